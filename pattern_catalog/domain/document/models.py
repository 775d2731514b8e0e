"""Markdown document model - parsed structure used by linting and consolidation."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Heading(BaseModel):
    """An ATX heading of the document."""
    model_config = ConfigDict(frozen=True)

    level: int
    title: str
    line: int
    anchor: str


class CodeBlock(BaseModel):
    """A fenced code block."""
    model_config = ConfigDict(frozen=True)

    language: str = ""
    content: str = ""
    line: int
    closed: bool = True


class Link(BaseModel):
    """An inline markdown link outside code blocks."""
    model_config = ConfigDict(frozen=True)

    text: str
    target: str
    line: int

    @property
    def is_internal(self) -> bool:
        return self.target.startswith('#')

    @property
    def anchor(self) -> str:
        return self.target[1:] if self.is_internal else ""


class TocEntry(BaseModel):
    """A link listed in the table of contents."""
    model_config = ConfigDict(frozen=True)

    title: str
    anchor: str
    depth: int
    line: int


class Section(BaseModel):
    """A heading together with its body lines and nested sections."""

    heading: Heading
    body: List[str] = Field(default_factory=list)
    children: List['Section'] = Field(default_factory=list)

    @property
    def content_lines(self) -> int:
        """Number of non-blank body lines."""
        return sum(1 for line in self.body if line.strip())

    @property
    def is_empty(self) -> bool:
        return self.content_lines == 0 and not self.children


class MarkdownDocument(BaseModel):
    """A parsed markdown document."""

    path: Optional[str] = None
    lines: List[str] = Field(default_factory=list)
    preamble: List[str] = Field(default_factory=list)
    headings: List[Heading] = Field(default_factory=list)
    code_blocks: List[CodeBlock] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)
    toc_heading: Optional[Heading] = None
    toc: List[TocEntry] = Field(default_factory=list)
    sections: List[Section] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path or "<text>"

    @property
    def anchors(self) -> set:
        return {heading.anchor for heading in self.headings}


class Severity(str, Enum):
    """Lint issue severity."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class LintIssue(BaseModel):
    """A single finding of the linter."""
    model_config = ConfigDict(frozen=True)

    rule: str
    severity: Severity
    message: str
    line: Optional[int] = None

    def format(self, document: str = "") -> str:
        location = f"{document}:{self.line}" if self.line else document
        return f"{location}: {self.severity.value} {self.rule} {self.message}".strip()


class LintReport(BaseModel):
    """All findings for one document."""

    document: str
    issues: List[LintIssue] = Field(default_factory=list)
    strict: bool = False

    def _count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @computed_field
    @property
    def error_count(self) -> int:
        return self._count(Severity.ERROR)

    @computed_field
    @property
    def warning_count(self) -> int:
        return self._count(Severity.WARNING)

    @computed_field
    @property
    def info_count(self) -> int:
        return self._count(Severity.INFO)

    @computed_field
    @property
    def passed(self) -> bool:
        if self.error_count:
            return False
        return not (self.strict and self.warning_count)

    def rules(self) -> List[str]:
        """Distinct rule codes reported, in first-seen order."""
        seen: List[str] = []
        for issue in self.issues:
            if issue.rule not in seen:
                seen.append(issue.rule)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode='json')
        data["issues"] = sorted(data["issues"], key=lambda i: (i["line"] or 0, i["rule"]))
        return data
