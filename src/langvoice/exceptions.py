"""Exception hierarchy for the LangVoice SDK."""

from typing import Optional


class LangVoiceError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class AuthenticationError(LangVoiceError):
    """API key is missing or was rejected (HTTP 401)."""

    def __init__(self, message: str = "Invalid or missing API key", status_code: Optional[int] = 401) -> None:
        super().__init__(message, status_code)


class RateLimitError(LangVoiceError):
    """Too many requests (HTTP 429)."""

    def __init__(self, message: str = "Rate limit exceeded", status_code: Optional[int] = 429) -> None:
        super().__init__(message, status_code)


class ValidationError(LangVoiceError):
    """Request rejected as invalid.

    Raised with ``status_code=400`` when the server rejects a request and with
    ``status_code=None`` when a request model refuses its input locally.
    """

    def __init__(self, message: str, status_code: Optional[int] = 400) -> None:
        super().__init__(message, status_code)


class APIError(LangVoiceError):
    """Any other non-2xx response, or a request that timed out."""


class NetworkError(APIError):
    """The request never got a response (connection refused, DNS failure, ...)."""


class UnknownToolError(LangVoiceError):
    """A tool call named an operation the toolkit does not provide."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


def map_http_error(status_code: int, message: str) -> LangVoiceError:
    """Translate an HTTP status and server message into a typed error."""
    if status_code == 401:
        return AuthenticationError(message)
    if status_code == 429:
        return RateLimitError(message)
    if status_code == 400:
        return ValidationError(message)
    return APIError(message, status_code)


def is_langvoice_error(error: object) -> bool:
    return isinstance(error, LangVoiceError)


def is_authentication_error(error: object) -> bool:
    return isinstance(error, AuthenticationError)


def is_rate_limit_error(error: object) -> bool:
    return isinstance(error, RateLimitError)
