"""Markdown parsing, linting and draft consolidation."""

from pattern_catalog.infrastructure.markdown.anchors import AnchorRegistry, github_anchor
from pattern_catalog.infrastructure.markdown.consolidator import ConsolidationResult, DraftConsolidator
from pattern_catalog.infrastructure.markdown.linter import RULES, MarkdownLinter
from pattern_catalog.infrastructure.markdown.parser import MarkdownParser, build_sections, walk_sections
from pattern_catalog.infrastructure.markdown.toc import build_toc

__all__ = [
    "AnchorRegistry",
    "github_anchor",
    "ConsolidationResult",
    "DraftConsolidator",
    "RULES",
    "MarkdownLinter",
    "MarkdownParser",
    "build_sections",
    "walk_sections",
    "build_toc",
]
