from dataclasses import dataclass
import logging
from typing import Any, Callable, Dict, List, Optional

from .constants import BATCH_KEY, DEFAULT_API_URL
from .errors import ConfigurationError
from .log_codes import CONFIG_DEFAULT_API_URL

logger = logging.getLogger(__name__)

Payload = Dict[str, List[Any]]
ErrorCallback = Callable[[Payload, Exception], Any]


@dataclass(frozen=True)
class ClientOptions:
    """
    Configuration of a Logflare client.

    Args:
        source_token (str): Identifier of the source the events belong to.
        api_key (str): API key authorizing the ingestion requests.
        api_url (Optional[str]): Base URL of the Logflare API.
        on_error (Optional[ErrorCallback]): Called with the payload and the
            error whenever a send fails.
    """
    source_token: str
    api_key: str
    api_url: Optional[str] = None
    on_error: Optional[ErrorCallback] = None

    def __post_init__(self) -> None:
        if not self.source_token:
            raise ConfigurationError(setting="source token")
        if not self.api_key:
            raise ConfigurationError(setting="logging transport api key")

    @property
    def resolved_api_url(self) -> str:
        """
        The configured API URL, or the hosted endpoint when none was given.
        """
        if self.api_url:
            return self.api_url

        logger.debug(CONFIG_DEFAULT_API_URL, extra={"api_url": DEFAULT_API_URL})
        return DEFAULT_API_URL


def build_payload(batch: List[Any]) -> Payload:
    return {BATCH_KEY: batch}


@dataclass(frozen=True)
class SendResult:
    """
    Outcome of a single send.

    Exactly one of ``data`` and ``error`` is meaningful: ``data`` holds the
    parsed response body of a successful request, ``error`` the exception
    that made the request fail.
    """
    payload: Payload
    data: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """
        Return the response body, raising the stored error if the send failed.
        """
        if self.error is not None:
            raise self.error
        return self.data
