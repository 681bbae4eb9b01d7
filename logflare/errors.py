from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    import httpx


class LogflareError(Exception):
    """
    Base exception for Logflare client errors.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An unexpected error occurred in the Logflare client."):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(LogflareError):
    """
    Error raised when the client is constructed with an incomplete configuration.

    Args:
        setting (str): The human readable name of the missing setting.
        message (str): The error message template.
    """
    def __init__(self, setting: str = "configuration",
                 message: str = "Logflare API {setting} is NOT configured!"):
        self.setting = setting
        super().__init__(message.format(setting=setting))


class NetworkError(LogflareError):
    """
    Error describing a non-2xx response from the Logflare API.

    Args:
        url (str): The URL the request was sent to.
        response (httpx.Response): The raw HTTP response.
        data (Any): The parsed response body.
        message (str): The error message template.
    """
    def __init__(self, url: str, response: "httpx.Response", data: Any = None,
                 message: str = 'Network response was not ok for "{url}"'):
        self.url = url
        self.response = response
        self.data = data
        super().__init__(message.format(url=url))

    @property
    def status_code(self) -> Optional[int]:
        """
        Get the HTTP status of the failed response.

        Returns:
            Optional[int]: The status code, or None if no response is attached.
        """
        if self.response is None:
            return None
        return self.response.status_code
