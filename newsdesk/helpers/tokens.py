import time
from typing import Any, Dict, Optional

import jwt


def decode_token_claims(token: str) -> Dict[str, Any]:
    """
    Read a JWT's claims without verifying its signature.

    The backend is the only party that can verify the token; the client just
    needs the expiry to decide whether a refresh is due.

    Raises:
        jwt.InvalidTokenError: If the token is not a well-formed JWT
    """
    return jwt.decode(token, options={"verify_signature": False})


def is_token_expired(token: str, leeway: int = 0, now: Optional[float] = None) -> bool:
    """
    True if the token's ``exp`` claim is in the past, or if there is no ``exp`` at all.

    Raises:
        jwt.InvalidTokenError: If the token is malformed or ``exp`` is not a number
    """
    claims = decode_token_claims(token)
    exp = claims.get("exp")
    if exp is None:
        return True
    try:
        exp = float(exp)
    except (TypeError, ValueError) as e:
        raise jwt.InvalidTokenError(f"Invalid exp claim: {exp!r}") from e
    current = time.time() if now is None else now
    return exp <= current + leeway
