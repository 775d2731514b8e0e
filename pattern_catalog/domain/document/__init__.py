"""Document bounded context - parsed markdown and lint findings."""

from .models import (
    CodeBlock,
    Heading,
    LintIssue,
    LintReport,
    Link,
    MarkdownDocument,
    Section,
    Severity,
    TocEntry,
)

__all__ = [
    "CodeBlock",
    "Heading",
    "Link",
    "TocEntry",
    "Section",
    "MarkdownDocument",
    "Severity",
    "LintIssue",
    "LintReport",
]
