"""Merging of concatenated catalogue drafts into a single document."""
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from pattern_catalog.domain.document import MarkdownDocument, Section
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.markdown.parser import MarkdownParser, walk_sections
from pattern_catalog.infrastructure.markdown.toc import build_toc

Key = Tuple[str, ...]


class ConsolidationResult(BaseModel):
    """Merged markdown and what happened while merging."""

    markdown: str
    drafts: int = 1
    sections_in: int = 0
    sections_out: int = 0
    duplicates_merged: int = 0
    toc_regenerated: bool = False
    replaced: List[str] = Field(default_factory=list)


class _MergedNode:
    def __init__(self, key: Key, section: Section):
        self.key = key
        self.section = section
        self.children: List[Key] = []


class DraftConsolidator:
    """
    Merges a document made of several concatenated drafts.

    Sections are identified by their heading path. For every path the version
    with the most non-blank body lines wins, ties going to the later draft.
    Sections keep the order in which they first appear under their parent.
    """

    def __init__(self, parser: Optional[MarkdownParser] = None,
                 toc_levels: Sequence[int] = (2, 3)):
        self.parser = parser or MarkdownParser()
        self.toc_levels = list(toc_levels)
        self._logger = get_logger(__name__)

    def consolidate(self, document: MarkdownDocument,
                    regenerate_toc: bool = False) -> ConsolidationResult:
        nodes: Dict[Key, _MergedNode] = {}
        roots: List[Key] = []
        replaced: List[str] = []
        sections_in = 0
        draft_starts: Counter = Counter()

        for path, section in walk_sections(document.sections):
            sections_in += 1
            key = tuple(" ".join(title.lower().split()) for title in path)
            if len(key) == 1:
                draft_starts[key] += 1
            node = nodes.get(key)
            if node is None:
                nodes[key] = _MergedNode(key, section)
                siblings = nodes[key[:-1]].children if len(key) > 1 else roots
                siblings.append(key)
                continue

            if section.content_lines >= node.section.content_lines:
                if section.content_lines > node.section.content_lines:
                    replaced.append(" > ".join(path))
                node.section = section

        lines = self._trim(document.preamble)
        if lines:
            lines.append("")
        for key in roots:
            self._render(nodes, key, lines)

        markdown = "\n".join(lines).rstrip("\n") + "\n" if lines else ""
        toc_regenerated = False
        if regenerate_toc:
            markdown, toc_regenerated = self._regenerate_toc(markdown)

        result = ConsolidationResult(
            markdown=markdown,
            drafts=max(draft_starts.values(), default=1),
            sections_in=sections_in,
            sections_out=len(nodes),
            duplicates_merged=sections_in - len(nodes),
            toc_regenerated=toc_regenerated,
            replaced=replaced,
        )
        self._logger.info("Consolidated drafts", document=document.name,
                          sections_in=result.sections_in, sections_out=result.sections_out)
        return result

    def _render(self, nodes: Dict[Key, _MergedNode], key: Key, lines: List[str]) -> None:
        node = nodes[key]
        heading = node.section.heading
        lines.append(f"{'#' * heading.level} {heading.title}")
        lines.append("")
        body = self._trim(node.section.body)
        if body:
            lines.extend(body)
            lines.append("")
        for child in node.children:
            self._render(nodes, child, lines)

    def _regenerate_toc(self, markdown: str) -> Tuple[str, bool]:
        """Replace the body of the TOC section with a list built from the headings."""
        merged = self.parser.parse(markdown)
        toc_heading = merged.toc_heading
        if toc_heading is None:
            return markdown, False

        headings = [h for h in merged.headings if h != toc_heading]
        toc = build_toc(headings, self.toc_levels).rstrip("\n").split("\n")

        position = merged.headings.index(toc_heading)
        end = (merged.headings[position + 1].line - 1
               if position + 1 < len(merged.headings) else len(merged.lines))
        lines = merged.lines[:toc_heading.line] + [""] + toc + [""] + merged.lines[end:]
        return "\n".join(lines).rstrip("\n") + "\n", True

    @staticmethod
    def _trim(lines: List[str]) -> List[str]:
        start, end = 0, len(lines)
        while start < end and not lines[start].strip():
            start += 1
        while end > start and not lines[end - 1].strip():
            end -= 1
        return list(lines[start:end])
