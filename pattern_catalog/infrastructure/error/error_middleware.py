"""Error handling middleware for command handlers."""

import functools
from typing import Callable, Optional

from pattern_catalog.infrastructure.error.exception_handler import (
    ExceptionHandler,
    get_exception_handler,
)


class HandledError(Exception):
    """Carries an ErrorResponse out of a wrapped handler."""

    def __init__(self, response):
        super().__init__(response.message)
        self.response = response


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_handler(self, handler_func: Callable) -> Callable:
        """
        Wrap a handler function so that failures return an error dictionary.

        Args:
            handler_func: The handler function to wrap

        Returns:
            Wrapped handler function with error handling
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args, **kwargs):
            try:
                return handler_func(*args, **kwargs)
            except Exception as e:
                return self._error_handler.handle(e).to_dict()

        return wrapped_handler

    def wrap_cli_handler(self, handler_func: Callable) -> Callable:
        """
        Wrap a CLI handler so that failures raise HandledError.

        The CLI turns HandledError into an error message and exit code.
        """

        @functools.wraps(handler_func)
        def wrapped_cli_handler(*args, **kwargs):
            try:
                return handler_func(*args, **kwargs)
            except HandledError:
                raise
            except Exception as e:
                raise HandledError(self._error_handler.handle(e)) from e

        return wrapped_cli_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding error handling to functions.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        return ErrorMiddleware(error_handler).wrap_handler(func)

    return decorator


def with_cli_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """Decorator raising HandledError for any failure of the wrapped CLI handler."""

    def decorator(func: Callable) -> Callable:
        return ErrorMiddleware(error_handler).wrap_cli_handler(func)

    return decorator
