from importlib.metadata import version

from newsdesk.logging import logger


def get_newsdesk_version():
    try:
        pkg_version = version("newsdesk")
        return pkg_version
    except Exception as e:
        logger.warning("Error reading package version: %s", e)
        return None
