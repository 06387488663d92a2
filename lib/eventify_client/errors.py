from __future__ import annotations


class EventifyClientError(Exception):
    """Base client error."""


class BadURLError(EventifyClientError):
    """Endpoint path could not be resolved against the base URL."""


class RequestEncodingError(EventifyClientError):
    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class NetworkError(EventifyClientError):
    """Transport/network layer error."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class InvalidResponseError(EventifyClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(InvalidResponseError):
    """Auth-related API error."""


class DecodingError(EventifyClientError):
    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause
