"""
Error taxonomy for the share handlers.

Every error knows the HTTP status and the stable ``error`` tag it renders as,
so a handler can catch ``ShareError`` once and turn it into a response.
"""

from typing import Any, Dict, Optional

from cors_utils import build_response

GENERIC_SERVER_MESSAGE = "An unexpected error occurred. Please try again later."


class ShareError(Exception):
    """Base exception for every error a share handler can answer with."""

    status_code = 500
    error = "Internal Server Error"
    default_message: Optional[str] = GENERIC_SERVER_MESSAGE

    def __init__(self, message: Optional[str] = None, original_exception: Optional[Exception] = None):
        self.message = message if message is not None else self.default_message
        self.original_exception = original_exception
        super().__init__(self.message or self.error)

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body

    def to_response(self):
        return build_response(self.status_code, self.to_dict())


class MethodNotAllowed(ShareError):
    status_code = 405
    error = "Method Not Allowed"
    default_message = None


class BadRequest(ShareError):
    status_code = 400
    error = "Bad Request"
    default_message = "Bad Request"


class Unauthorized(ShareError):
    status_code = 401
    error = "Unauthorized"
    default_message = "Invalid API credentials"


class Forbidden(ShareError):
    status_code = 403
    error = "Forbidden"
    default_message = "Insufficient permissions to access this resource"


class NotFound(ShareError):
    status_code = 404
    error = "Not Found"
    default_message = "Not Found"


class InternalServerError(ShareError):
    pass


class CorruptedShare(InternalServerError):
    """Raised when a stored tracks payload cannot be decoded."""

    default_message = "Share data is corrupted"


class ConfigurationError(Exception):
    """Raised when the handler environment is incomplete."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
