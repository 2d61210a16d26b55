"""
Error taxonomy for Workasana.

Domain operations raise these; the routing layer in ``workasana.main`` is the
only place that turns them into HTTP responses.
"""
from typing import Dict, Optional


class ConfigurationError(RuntimeError):
    """Required startup configuration is missing or empty."""


class InvalidToken(Exception):
    """Bearer token is malformed, expired or carries a bad signature."""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class InvalidArgument(ServiceError):
    status_code = 400
    default_message = "Invalid argument"


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Unauthorized"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class InternalError(ServiceError):
    status_code = 500
