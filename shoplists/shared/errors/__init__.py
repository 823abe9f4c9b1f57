from .base import (
    AppError,
    DomainError,
    ForbiddenError,
    MalformedBodyError,
    UnauthenticatedError,
)
from .http import handle_app_error, register_error_handler
from .validation import format_pydantic_errors, raise_decode_error

__all__ = [
    "AppError",
    "DomainError",
    "ForbiddenError",
    "MalformedBodyError",
    "UnauthenticatedError",
    "format_pydantic_errors",
    "handle_app_error",
    "raise_decode_error",
    "register_error_handler",
]
