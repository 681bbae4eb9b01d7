from unittest.mock import Mock

import pytest

from logflare.constants import DEFAULT_API_URL
from logflare.errors import ConfigurationError
from logflare.models import ClientOptions, SendResult, build_payload


@pytest.mark.unit
class TestClientOptions:
    """
    Tests for ClientOptions validation.
    """

    def test_valid_options(self):
        on_error = Mock()
        options = ClientOptions(
            source_token="token", api_key="key", on_error=on_error
        )

        assert options.source_token == "token"
        assert options.api_key == "key"
        assert options.on_error is on_error
        assert options.resolved_api_url == DEFAULT_API_URL

    def test_resolved_api_url_prefers_configured_url(self):
        options = ClientOptions(
            source_token="token", api_key="key", api_url="http://localhost:4000"
        )
        assert options.resolved_api_url == "http://localhost:4000"

    def test_missing_source_token_is_checked_first(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ClientOptions(source_token="", api_key="")

        assert exc_info.value.setting == "source token"
        assert str(exc_info.value) == "Logflare API source token is NOT configured!"

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ClientOptions(source_token="token", api_key="")

        assert str(exc_info.value) == (
            "Logflare API logging transport api key is NOT configured!"
        )

    def test_options_are_immutable(self):
        options = ClientOptions(source_token="token", api_key="key")

        with pytest.raises(AttributeError):
            options.api_key = "other"


@pytest.mark.unit
class TestSendResult:
    """
    Tests for SendResult.
    """

    def test_successful_result(self):
        result = SendResult(payload=build_payload([{"a": 1}]), data={"message": "ok"})

        assert result.ok
        assert result.unwrap() == {"message": "ok"}

    def test_failed_result(self):
        error = RuntimeError("boom")
        result = SendResult(payload=build_payload([]), error=error)

        assert not result.ok
        with pytest.raises(RuntimeError, match="boom"):
            result.unwrap()

    def test_build_payload_keeps_order(self):
        batch = [{"n": 3}, {"n": 1}, {"n": 2}]

        assert build_payload(batch) == {"batch": [{"n": 3}, {"n": 1}, {"n": 2}]}
