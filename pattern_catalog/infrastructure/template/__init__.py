"""Catalogue rendering."""

from pattern_catalog.infrastructure.template.jinja_renderer import (
    JinjaCatalogRenderer,
    normalise_blank_lines,
)

__all__ = ["JinjaCatalogRenderer", "normalise_blank_lines"]
