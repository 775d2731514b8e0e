"""Application layer - use cases over the catalogue and markdown documents."""

from pattern_catalog.application.catalog_service import CatalogApplicationService
from pattern_catalog.application.lint_service import DocumentLintService

__all__ = ["CatalogApplicationService", "DocumentLintService"]
