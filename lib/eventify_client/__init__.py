from .client import EventifyClient
from .errors import (
    AuthError,
    BadURLError,
    DecodingError,
    EventifyClientError,
    InvalidResponseError,
    NetworkError,
    RequestEncodingError,
)
from .models import AuthorizationResponse, SignInRequest, SignUpRequest, ValidateRequest, ValidationResponse

__all__ = [
    "EventifyClient",
    "EventifyClientError",
    "BadURLError",
    "InvalidResponseError",
    "AuthError",
    "DecodingError",
    "NetworkError",
    "RequestEncodingError",
    "AuthorizationResponse",
    "SignInRequest",
    "SignUpRequest",
    "ValidateRequest",
    "ValidationResponse",
]
