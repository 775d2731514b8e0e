"""Document lint service - checks and repairs markdown catalogues."""
import sys
from pathlib import Path
from typing import List, Optional, Union

from pattern_catalog.config.schemas.lint_schema import LintConfig
from pattern_catalog.domain.base.events import (
    DocumentLintedEvent,
    DomainEvent,
    DraftsConsolidatedEvent,
    EventPublisher,
)
from pattern_catalog.domain.document import LintReport, MarkdownDocument
from pattern_catalog.infrastructure.exceptions import DocumentReadError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.markdown import (
    ConsolidationResult,
    DraftConsolidator,
    MarkdownLinter,
    MarkdownParser,
    build_toc,
)

STDIN_PATH = "-"


class DocumentLintService:
    """Application service for linting, consolidating and indexing markdown documents."""

    def __init__(self,
                 config: Optional[LintConfig] = None,
                 parser: Optional[MarkdownParser] = None,
                 linter: Optional[MarkdownLinter] = None,
                 consolidator: Optional[DraftConsolidator] = None,
                 event_publisher: Optional[EventPublisher] = None):
        self._config = config or LintConfig()
        self._parser = parser or MarkdownParser(self._config.toc_heading_names)
        self._linter = linter or MarkdownLinter(self._config)
        self._consolidator = consolidator or DraftConsolidator(
            self._parser, toc_levels=self._config.toc_levels)
        self._event_publisher = event_publisher
        self._logger = get_logger(__name__)

    def read_document(self, path: Union[str, Path]) -> MarkdownDocument:
        """Read and parse a markdown file ('-' reads standard input)."""
        path = str(path)
        if path == STDIN_PATH:
            return self._parser.parse(sys.stdin.read(), "<stdin>")
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(f"Cannot read document {path}: {e}", {"path": path}) from e
        return self._parser.parse(text, path)

    def lint_file(self, path: Union[str, Path], strict: Optional[bool] = None,
                  disabled_rules: Optional[List[str]] = None) -> LintReport:
        """Lint a markdown file."""
        return self._lint(self.read_document(path), strict, disabled_rules)

    def lint_text(self, text: str, name: Optional[str] = None,
                  strict: Optional[bool] = None,
                  disabled_rules: Optional[List[str]] = None) -> LintReport:
        """Lint markdown text."""
        return self._lint(self._parser.parse(text, name), strict, disabled_rules)

    def consolidate_file(self, path: Union[str, Path],
                         regenerate_toc: bool = False) -> ConsolidationResult:
        """Merge the concatenated drafts of a markdown file into one document."""
        document = self.read_document(path)
        result = self._consolidator.consolidate(document, regenerate_toc=regenerate_toc)
        self._publish(DraftsConsolidatedEvent(
            aggregate_id=document.name,
            sections_in=result.sections_in,
            sections_out=result.sections_out,
            toc_regenerated=result.toc_regenerated,
        ))
        return result

    def generate_toc(self, path: Union[str, Path]) -> str:
        """Build a table of contents for the headings of a markdown file."""
        document = self.read_document(path)
        headings = [h for h in document.headings if h != document.toc_heading]
        return build_toc(headings, self._config.toc_levels)

    def _lint(self, document: MarkdownDocument, strict: Optional[bool],
              disabled_rules: Optional[List[str]]) -> LintReport:
        report = self._linter.lint(document, strict=strict, disabled_rules=disabled_rules)
        self._logger.info("Linted document", document=document.name,
                          errors=report.error_count, warnings=report.warning_count,
                          passed=report.passed)
        self._publish(DocumentLintedEvent(
            aggregate_id=document.name,
            error_count=report.error_count,
            warning_count=report.warning_count,
            passed=report.passed,
        ))
        return report

    def _publish(self, event: DomainEvent) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)
