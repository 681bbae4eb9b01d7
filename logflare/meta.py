from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
import logging
import platform
from typing import Dict, Optional


LOG = logging.getLogger(__name__)

DISTRIBUTION_NAME = "logflare-client"


@lru_cache(maxsize=1)
def get_version() -> Optional[str]:
    """
    Get the version of the installed client package.

    Returns:
      Optional[str]: The version if found, otherwise None.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        LOG.debug("Unable to get %s version.", DISTRIBUTION_NAME)
        return None


def get_user_agent() -> str:
    """
    Get the user agent string for HTTP requests.

    Returns:
      str: The user agent string in the format: logflare-python/{version} (Python/{python_version})
    """
    client_version = get_version() or "unknown"
    python_version = platform.python_version()

    return f"logflare-python/{client_version} (Python/{python_version})"


def get_meta_http_headers() -> Dict[str, str]:
    """
    Get the metadata headers for the client.

    Returns:
      Dict[str, str]: The metadata headers.
    """
    return {
        "User-Agent": get_user_agent(),
    }
