"""Consistency checks for markdown catalogues."""
import ast
import json
import re
from typing import Callable, Dict, List, Optional, Set, Tuple

import yaml

from pattern_catalog.config.schemas.lint_schema import LintConfig
from pattern_catalog.domain.document import (
    CodeBlock,
    LintIssue,
    LintReport,
    MarkdownDocument,
    Section,
    Severity,
)
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.markdown.parser import iter_prose_lines, walk_sections

# rule code -> (severity, description)
RULES: Dict[str, Tuple[Severity, str]] = {
    "TOC001": (Severity.WARNING, "Document has no table of contents"),
    "TOC002": (Severity.ERROR, "Table of contents entry points to a missing section"),
    "TOC003": (Severity.WARNING, "Section is missing from the table of contents"),
    "LINK001": (Severity.ERROR, "Internal link points to a missing anchor"),
    "SEC001": (Severity.ERROR, "Duplicate section"),
    "SEC002": (Severity.WARNING, "Empty section"),
    "SEC003": (Severity.INFO, "Stub section"),
    "SEC004": (Severity.WARNING, "Pattern section lacks a required subsection"),
    "CODE001": (Severity.ERROR, "Python code block does not parse"),
    "CODE002": (Severity.ERROR, "JSON code block does not parse"),
    "CODE003": (Severity.ERROR, "YAML code block does not parse"),
    "CODE004": (Severity.INFO, "Code block has no language"),
    "CODE005": (Severity.ERROR, "Code block is not closed"),
}


def _normalise(title: str) -> str:
    return " ".join(title.lower().split())


class MarkdownLinter:
    """Runs the lint rules over a parsed document."""

    def __init__(self, config: Optional[LintConfig] = None):
        self.config = config or LintConfig()
        self._logger = get_logger(__name__)
        self._stub_patterns = [
            re.compile(r"\b" + re.escape(marker) + r"\b", re.IGNORECASE)
            for marker in self.config.stub_markers
        ]

    def lint(self, document: MarkdownDocument, strict: Optional[bool] = None,
             disabled_rules: Optional[List[str]] = None) -> LintReport:
        """
        Lint a document.

        Args:
            document: Parsed markdown document
            strict: Overrides the configured strict flag when given
            disabled_rules: Rule codes to skip in addition to the configured ones

        Returns:
            LintReport with the issues of all enabled rules
        """
        disabled = {rule.upper() for rule in self.config.disabled_rules}
        disabled.update(rule.upper() for rule in disabled_rules or [])
        strict = self.config.strict if strict is None else strict

        issues: List[LintIssue] = []
        checks: List[Callable[[MarkdownDocument], List[LintIssue]]] = [
            self._check_toc,
            self._check_links,
            self._check_sections,
            self._check_code_blocks,
        ]
        for check in checks:
            issues.extend(issue for issue in check(document) if issue.rule not in disabled)

        report = LintReport(document=document.name, issues=issues, strict=strict)
        self._logger.debug("Linted document", document=document.name,
                           errors=report.error_count, warnings=report.warning_count)
        return report

    def _issue(self, rule: str, message: str, line: Optional[int] = None) -> LintIssue:
        severity, _ = RULES[rule]
        return LintIssue(rule=rule, severity=severity, message=message, line=line)

    def _check_toc(self, document: MarkdownDocument) -> List[LintIssue]:
        if document.toc_heading is None:
            return [self._issue("TOC001", "Document has no table of contents heading")]

        issues = []
        anchors = document.anchors
        for entry in document.toc:
            if entry.anchor not in anchors:
                issues.append(self._issue(
                    "TOC002",
                    f"Table of contents entry '{entry.title}' points to missing anchor '#{entry.anchor}'",
                    entry.line,
                ))

        listed = {entry.anchor for entry in document.toc}
        levels = set(self.config.toc_levels)
        for heading in document.headings:
            if heading == document.toc_heading or heading.level not in levels:
                continue
            if heading.anchor not in listed:
                issues.append(self._issue(
                    "TOC003",
                    f"Section '{heading.title}' is not listed in the table of contents",
                    heading.line,
                ))
        return issues

    def _check_links(self, document: MarkdownDocument) -> List[LintIssue]:
        toc_lines = {entry.line for entry in document.toc}
        anchors = document.anchors
        issues = []
        for link in document.links:
            if not link.is_internal or link.line in toc_lines:
                continue
            if link.anchor not in anchors:
                issues.append(self._issue(
                    "LINK001",
                    f"Link '{link.text}' points to missing anchor '{link.target}'",
                    link.line,
                ))
        return issues

    def _check_sections(self, document: MarkdownDocument) -> List[LintIssue]:
        issues = []
        seen: Dict[Tuple[str, ...], int] = {}
        duplicated: Set[Tuple[str, ...]] = set()

        for path, section in walk_sections(document.sections):
            key = tuple(_normalise(title) for title in path)
            heading = section.heading

            # descendants of a reported duplicate are not reported again
            if any(key[:size] in duplicated for size in range(1, len(key))):
                continue
            if key in seen:
                duplicated.add(key)
                issues.append(self._issue(
                    "SEC001",
                    f"Duplicate section '{' > '.join(path)}' (first defined at line {seen[key]})",
                    heading.line,
                ))
                continue
            seen[key] = heading.line

            if section.is_empty:
                issues.append(self._issue("SEC002", f"Section '{heading.title}' is empty",
                                          heading.line))
                continue

            stub = self._is_stub(section)
            if stub:
                issues.append(self._issue("SEC003", f"Section '{heading.title}' is a stub",
                                          heading.line))
            elif heading.level == self.config.pattern_heading_level:
                missing = self._missing_subsections(section)
                if missing:
                    issues.append(self._issue(
                        "SEC004",
                        f"Section '{heading.title}' lacks subsections: {', '.join(missing)}",
                        heading.line,
                    ))
        return issues

    def _is_stub(self, section: Section) -> bool:
        for _, line in iter_prose_lines(section.body):
            if any(pattern.search(line) for pattern in self._stub_patterns):
                return True
        return False

    def _missing_subsections(self, section: Section) -> List[str]:
        present = {_normalise(child.heading.title) for child in section.children}
        return [name for name in self.config.required_subsections
                if _normalise(name) not in present]

    def _check_code_blocks(self, document: MarkdownDocument) -> List[LintIssue]:
        issues = []
        for block in document.code_blocks:
            if not block.closed:
                issues.append(self._issue(
                    "CODE005", "Code block is not closed; the rest of the document is swallowed",
                    block.line))
                continue
            language = block.language
            if not language:
                issues.append(self._issue("CODE004", "Code block has no language", block.line))
            elif language in self.config.python_languages:
                issues.extend(self._check_python(block))
            elif language in self.config.json_languages:
                issues.extend(self._check_json(block))
            elif language in self.config.yaml_languages:
                issues.extend(self._check_yaml(block))
        return issues

    def _check_python(self, block: CodeBlock) -> List[LintIssue]:
        try:
            ast.parse(block.content)
        except SyntaxError as e:
            line = block.line + (e.lineno or 1)
            return [self._issue("CODE001", f"Python syntax error: {e.msg}", line)]
        return []

    def _check_json(self, block: CodeBlock) -> List[LintIssue]:
        try:
            json.loads(block.content)
        except json.JSONDecodeError as e:
            return [self._issue("CODE002", f"Invalid JSON: {e.msg}", block.line + e.lineno)]
        return []

    def _check_yaml(self, block: CodeBlock) -> List[LintIssue]:
        try:
            list(yaml.safe_load_all(block.content))
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            line = block.line + mark.line + 1 if mark is not None else block.line
            problem = getattr(e, "problem", None) or str(e)
            return [self._issue("CODE003", f"Invalid YAML: {problem}", line)]
        return []
