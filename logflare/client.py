"""
Logflare ingestion client.

This module contains the LogflareClient, which submits batches of log events
to the Logflare HTTP API. Every send is a single POST request; failures are
logged, reported to the optional ``on_error`` callback and handed back to the
caller inside a SendResult instead of being raised.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from .constants import API_KEY_PARAM, LOGS_ENDPOINT, REQUEST_HEADERS, SOURCE_PARAM
from .errors import NetworkError
from .log_codes import (
    SEND_DISPATCHED,
    SEND_FAILED,
    SEND_ON_ERROR_FAILED,
    SEND_SUCCEEDED,
)
from .meta import get_meta_http_headers
from .models import ClientOptions, ErrorCallback, Payload, SendResult, build_payload

logger = logging.getLogger(__name__)


class LogflareClient:
    """
    Asynchronous client for the Logflare ingestion API.

    The client keeps no connection pool or other mutable state: each send
    opens its own ``httpx.AsyncClient``, so one instance can be shared by
    concurrent tasks.
    """

    def __init__(
        self,
        source_token: str,
        api_key: str,
        api_url: Optional[str] = None,
        on_error: Optional[ErrorCallback] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
    ):
        """
        Initialize the client.

        Args:
            source_token: Identifier of the Logflare source
            api_key: API key retrieved from Logflare
            api_url: Optional base URL, defaults to the hosted endpoint
            on_error: Optional callback receiving the payload and the error
                of every failed send
            transport: Optional httpx transport used for the requests
            timeout: Optional request timeout, httpx defaults apply otherwise

        Raises:
            ConfigurationError: If the source token or the API key is empty.
        """
        self._options = ClientOptions(
            source_token=source_token,
            api_key=api_key,
            api_url=api_url,
            on_error=on_error,
        )
        self._api_url = self._options.resolved_api_url
        self._transport = transport
        self._timeout = timeout

    @classmethod
    def from_options(
        cls,
        options: ClientOptions,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
    ) -> "LogflareClient":
        return cls(
            source_token=options.source_token,
            api_key=options.api_key,
            api_url=options.api_url,
            on_error=options.on_error,
            transport=transport,
            timeout=timeout,
        )

    @property
    def source_token(self) -> str:
        return self._options.source_token

    @property
    def api_key(self) -> str:
        return self._options.api_key

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def on_error(self) -> Optional[ErrorCallback]:
        return self._options.on_error

    def build_url(self) -> httpx.URL:
        """
        Build the ingestion URL for this client's source.

        Returns:
            The absolute URL of the logs endpoint with credentials as query
            parameters.
        """
        url = httpx.URL(self._api_url).join(LOGS_ENDPOINT)
        return url.copy_merge_params(
            {API_KEY_PARAM: self.api_key, SOURCE_PARAM: self.source_token}
        )

    def _get_headers(self) -> Dict[str, str]:
        headers = dict(REQUEST_HEADERS)
        headers.update(get_meta_http_headers())

        return headers

    def _create_http_client(self) -> httpx.AsyncClient:
        client_kwargs: Dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            client_kwargs["timeout"] = self._timeout

        return httpx.AsyncClient(**client_kwargs)

    async def send_event(self, event: Any) -> SendResult:
        """
        Send a single event.

        Args:
            event: A JSON serializable log event

        Returns:
            The outcome of sending a batch holding only this event.
        """
        return await self.send_events([event])

    async def send_events(self, batch: List[Any]) -> SendResult:
        """
        Send a batch of events in one request.

        Args:
            batch: JSON serializable log events, sent in the given order

        Returns:
            A SendResult with the parsed response body on success, or the
            error that made the request fail. This method does not raise.
        """
        payload = build_payload(batch)

        try:
            url = self.build_url()
            body = json.dumps(payload)

            logger.debug(
                SEND_DISPATCHED,
                extra={"event_count": len(batch), "api_url": self._api_url},
            )
            async with self._create_http_client() as http_client:
                response = await http_client.post(
                    url, content=body, headers=self._get_headers()
                )

            data = response.json()
        except Exception as exc:
            return self._handle_error(payload, exc)

        if not response.is_success:
            return self._handle_error(
                payload, NetworkError(url=str(url), response=response, data=data)
            )

        logger.debug(
            SEND_SUCCEEDED,
            extra={"event_count": len(batch), "status_code": response.status_code},
        )
        return SendResult(payload=payload, data=data)

    def _handle_error(self, payload: Payload, error: Exception) -> SendResult:
        """
        Log a failed send and report it to the ``on_error`` callback.
        """
        # Failure lines keep the fixed diagnostic text; the log code goes in extra.
        if isinstance(error, NetworkError) and error.response is not None:
            logger.error(
                f"Logflare API request failed with {error.status_code} status: "
                f"{json.dumps(error.data, separators=(',', ':'))}",
                extra={"code": SEND_FAILED, "status_code": error.status_code},
            )
        else:
            logger.error(
                str(error),
                extra={"code": SEND_FAILED, "error_type": type(error).__name__},
            )

        if self.on_error is not None:
            try:
                self.on_error(payload, error)
            except Exception:
                logger.exception(SEND_ON_ERROR_FAILED)

        return SendResult(payload=payload, error=error)
