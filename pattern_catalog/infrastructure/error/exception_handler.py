"""Maps exceptions to structured error responses."""
import threading
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from pattern_catalog.infrastructure.exceptions import (
    DocumentReadError,
    InfrastructureError,
    RenderError,
    SampleNotFoundError,
)
from pattern_catalog.infrastructure.logging.logger import get_logger


class ErrorCategory(str, Enum):
    """Broad classes of failure."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    INFRASTRUCTURE = "infrastructure"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Stable error codes reported to callers."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PATTERN_NOT_FOUND = "PATTERN_NOT_FOUND"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    SAMPLE_NOT_FOUND = "SAMPLE_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DOCUMENT_READ_ERROR = "DOCUMENT_READ_ERROR"
    RENDER_ERROR = "RENDER_ERROR"
    INFRASTRUCTURE_ERROR = "INFRASTRUCTURE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse:
    """Structured description of a handled error."""

    def __init__(self, error_code: str, message: str, category: ErrorCategory,
                 details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.category = category
        self.details = details or {}

    @property
    def exit_code(self) -> int:
        return 2 if self.category == ErrorCategory.CONFIGURATION else 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }


class ExceptionHandler:
    """Translate exceptions into ErrorResponse objects and log them once."""

    def __init__(self, logger=None):
        self._logger = logger or get_logger(__name__)

    def handle(self, error: BaseException) -> ErrorResponse:
        response = self._to_response(error)
        if response.category == ErrorCategory.INTERNAL:
            self._logger.error("Unexpected error", error=str(error), exc_info=error)
        else:
            self._logger.warning(
                "Handled error", error_code=response.error_code, error=response.message
            )
        return response

    def _to_response(self, error: BaseException) -> ErrorResponse:
        # Order matters: most specific types first
        if isinstance(error, EntityNotFoundError):
            code = (ErrorCode.PATTERN_NOT_FOUND if error.entity_type == "Pattern"
                    else ErrorCode.ENTITY_NOT_FOUND)
            return ErrorResponse(code.value, error.message, ErrorCategory.NOT_FOUND, error.details)
        if isinstance(error, ConfigurationError):
            return ErrorResponse(ErrorCode.CONFIGURATION_ERROR.value, error.message,
                                 ErrorCategory.CONFIGURATION, error.details)
        if isinstance(error, ValidationError):
            return ErrorResponse(ErrorCode.VALIDATION_ERROR.value, error.message,
                                 ErrorCategory.VALIDATION, error.details)
        if isinstance(error, DomainException):
            return ErrorResponse(error.error_code, error.message,
                                 ErrorCategory.VALIDATION, error.details)
        if isinstance(error, PydanticValidationError):
            return ErrorResponse(ErrorCode.VALIDATION_ERROR.value, str(error),
                                 ErrorCategory.VALIDATION,
                                 {"errors": error.errors(include_url=False)})
        if isinstance(error, SampleNotFoundError):
            return ErrorResponse(ErrorCode.SAMPLE_NOT_FOUND.value, str(error),
                                 ErrorCategory.NOT_FOUND, {"slug": error.slug})
        if isinstance(error, DocumentReadError):
            return ErrorResponse(ErrorCode.DOCUMENT_READ_ERROR.value, str(error),
                                 ErrorCategory.INFRASTRUCTURE, _details(error))
        if isinstance(error, RenderError):
            return ErrorResponse(ErrorCode.RENDER_ERROR.value, str(error),
                                 ErrorCategory.INFRASTRUCTURE, _details(error))
        if isinstance(error, InfrastructureError):
            return ErrorResponse(ErrorCode.INFRASTRUCTURE_ERROR.value, str(error),
                                 ErrorCategory.INFRASTRUCTURE, _details(error))
        return ErrorResponse(ErrorCode.INTERNAL_ERROR.value, str(error) or error.__class__.__name__,
                             ErrorCategory.INTERNAL, {"type": error.__class__.__name__})


def _details(error: InfrastructureError) -> Dict[str, Any]:
    if isinstance(error.details, dict):
        return error.details
    return {"details": error.details} if error.details is not None else {}


_handler: Optional[ExceptionHandler] = None
_handler_lock = threading.Lock()


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _handler
    if _handler is None:
        with _handler_lock:
            if _handler is None:
                _handler = ExceptionHandler()
    return _handler
