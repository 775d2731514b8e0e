from typing import List, Optional

from pattern_catalog.domain.base.exceptions import DomainException, EntityNotFoundError


class PatternNotFoundError(EntityNotFoundError):
    """Raised when a pattern cannot be found."""
    def __init__(self, slug: str):
        super().__init__("Pattern", slug)
        self.slug = slug


class PatternValidationError(DomainException):
    """Raised when a catalogue entry fails validation."""
    def __init__(self, source: str, errors: List[str], slug: Optional[str] = None):
        message = f"Pattern validation failed for {source}: {'; '.join(errors)}"
        super().__init__(message, details={"source": source, "errors": errors, "slug": slug})
        self.source = source
        self.errors = errors
        self.slug = slug
