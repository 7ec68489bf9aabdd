import logging
import os

from .formatters import NewsdeskLogFileFormatter, NewsdeskLogFormatter

# Create the logger at module level
logger = logging.getLogger("newsdesk")
logger.propagate = False
logger.setLevel(logging.WARNING)


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str) and hasattr(logging, level.upper()):
        resolved = getattr(logging, level.upper())
        if isinstance(resolved, int):
            return resolved
    return logging.WARNING


def configure_logging(config=None):  # Config is imported lazily to avoid a circular import
    """Configure the Newsdesk logger with console and optional file handlers.

    Args:
        config: Optional Config instance. If not provided, a new Config instance will be created.
    """
    if config is None:
        from newsdesk.config import Config

        config = Config()

    # Use env var as override if present, otherwise use config
    log_level_env = os.environ.get("NEWSDESK_LOG_LEVEL", "").upper()
    if log_level_env and hasattr(logging, log_level_env):
        log_level = getattr(logging, log_level_env)
    else:
        log_level = _resolve_level(config.log_level)

    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG)
    stream_handler.setFormatter(NewsdeskLogFormatter())
    logger.addHandler(stream_handler)

    log_file = getattr(config, "log_file", None)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(logging.DEBUG)
        formatter = NewsdeskLogFileFormatter("%(asctime)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
