from typing import Optional, Any


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class StorageError(InfrastructureError):
    """Raised when catalogue data cannot be read."""
    pass


class DocumentReadError(InfrastructureError):
    """Raised when a markdown document cannot be read."""
    pass


class RenderError(InfrastructureError):
    """Raised when the catalogue cannot be rendered."""
    pass


class SampleNotFoundError(InfrastructureError):
    """Raised when no sample module is registered for a pattern."""
    def __init__(self, slug: str):
        super().__init__(f"No sample registered for pattern: {slug}", {"slug": slug})
        self.slug = slug


class SampleLoadError(InfrastructureError):
    """Raised when a sample module or one of its objects cannot be loaded."""
    pass
