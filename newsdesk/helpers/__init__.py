from newsdesk.helpers.env import get_env_int, get_env_str
from newsdesk.helpers.time import format_date, parse_datetime
from newsdesk.helpers.tokens import decode_token_claims, is_token_expired
from newsdesk.helpers.version import get_newsdesk_version

__all__ = [
    "get_env_int",
    "get_env_str",
    "format_date",
    "parse_datetime",
    "decode_token_claims",
    "is_token_expired",
    "get_newsdesk_version",
]
