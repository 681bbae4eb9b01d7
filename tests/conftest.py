import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from logflare import LogflareClient

SOURCE_TOKEN = "some-token"
API_KEY = "some-key"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    """
    Requests captured by the transports built with ``transport_factory``.
    """
    return []


@pytest.fixture
def transport_factory(requests_seen: List[httpx.Request]):
    """
    Factory fixture building a MockTransport that records every request and
    answers with the given status and body.
    """

    def _create(
        status_code: int = 200,
        body: Any = None,
        content: Optional[bytes] = None,
        raises: Optional[Exception] = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if raises is not None:
                raise raises
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(
                status_code, content=json.dumps(body).encode("utf-8")
            )

        return httpx.MockTransport(handler)

    return _create


@pytest.fixture
def client_factory() -> Callable[..., LogflareClient]:
    def _create(transport: httpx.MockTransport, **kwargs) -> LogflareClient:
        kwargs.setdefault("source_token", SOURCE_TOKEN)
        kwargs.setdefault("api_key", API_KEY)
        return LogflareClient(transport=transport, **kwargs)

    return _create
