"""Line-oriented markdown parser.

Only the structure the linter and consolidator need is recognised: ATX
headings, fenced code blocks, inline links and the table of contents. Fenced
blocks are opaque, so headings and links inside them are ignored.
"""
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from pattern_catalog.domain.document import (
    CodeBlock,
    Heading,
    Link,
    MarkdownDocument,
    Section,
    TocEntry,
)
from pattern_catalog.infrastructure.markdown.anchors import AnchorRegistry

HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*([^`]*?)[ \t]*$")
LINK_RE = re.compile(r"(?<!!)\[([^\]]*)\]\(\s*<?([^)\s>]*)>?(?:\s+\"[^\"]*\")?\s*\)")
LIST_ITEM_RE = re.compile(r"^([ \t]*)(?:[-*+]|\d+[.)])[ \t]+")
INLINE_CODE_RE = re.compile(r"`+[^`]*`+")

DEFAULT_TOC_HEADINGS = ("Table of Contents", "Contents")


def is_fence_close(line: str, fence: str) -> bool:
    """Check whether a line closes a fence opened with ``fence``."""
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
        and len(line) - len(line.lstrip(" ")) <= 3
    )


def iter_prose_lines(lines: Iterable[str]) -> Iterable[Tuple[int, str]]:
    """Yield (index, line) for lines outside fenced code blocks."""
    fence: Optional[str] = None
    for index, line in enumerate(lines):
        if fence is not None:
            if is_fence_close(line, fence):
                fence = None
            continue
        match = FENCE_RE.match(line)
        if match:
            fence = match.group(1)
            continue
        yield index, line


class MarkdownParser:
    """Parses markdown text into a MarkdownDocument."""

    def __init__(self, toc_heading_names: Optional[Sequence[str]] = None):
        names = toc_heading_names or DEFAULT_TOC_HEADINGS
        self.toc_heading_names = {name.strip().lower() for name in names}

    def parse(self, text: str, path: Optional[str] = None) -> MarkdownDocument:
        lines = text.splitlines()
        anchors = AnchorRegistry()
        headings: List[Heading] = []
        code_blocks: List[CodeBlock] = []
        links: List[Link] = []

        fence: Optional[str] = None
        fence_language = ""
        fence_line = 0
        fence_content: List[str] = []

        for index, line in enumerate(lines):
            number = index + 1

            if fence is not None:
                if is_fence_close(line, fence):
                    code_blocks.append(CodeBlock(
                        language=fence_language,
                        content="\n".join(fence_content),
                        line=fence_line,
                    ))
                    fence = None
                else:
                    fence_content.append(line)
                continue

            fence_match = FENCE_RE.match(line)
            if fence_match:
                fence = fence_match.group(1)
                info = fence_match.group(2).strip()
                fence_language = info.split()[0].lower() if info else ""
                fence_line = number
                fence_content = []
                continue

            heading_match = HEADING_RE.match(line)
            if heading_match:
                title = heading_match.group(2).strip()
                headings.append(Heading(
                    level=len(heading_match.group(1)),
                    title=title,
                    line=number,
                    anchor=anchors.assign(title),
                ))
                continue

            for link_match in LINK_RE.finditer(INLINE_CODE_RE.sub("", line)):
                links.append(Link(
                    text=link_match.group(1).strip(),
                    target=link_match.group(2),
                    line=number,
                ))

        if fence is not None:
            code_blocks.append(CodeBlock(
                language=fence_language,
                content="\n".join(fence_content),
                line=fence_line,
                closed=False,
            ))

        first_heading = headings[0].line - 1 if headings else len(lines)
        toc_heading, toc = self._find_toc(lines, headings, links)

        document = MarkdownDocument(
            path=path,
            lines=lines,
            preamble=lines[:first_heading],
            headings=headings,
            code_blocks=code_blocks,
            links=links,
            toc_heading=toc_heading,
            toc=toc,
        )
        document.sections = build_sections(document)
        return document

    def is_toc_heading(self, title: str) -> bool:
        return title.strip().lower() in self.toc_heading_names

    def _find_toc(self, lines: List[str], headings: List[Heading],
                  links: List[Link]) -> Tuple[Optional[Heading], List[TocEntry]]:
        for position, heading in enumerate(headings):
            if not self.is_toc_heading(heading.title):
                continue
            end = headings[position + 1].line if position + 1 < len(headings) else len(lines) + 1
            return heading, self._toc_entries(lines, heading.line, end, links)
        return None, []

    def _toc_entries(self, lines: List[str], start: int, end: int,
                     links: List[Link]) -> List[TocEntry]:
        """Internal links on list items between the TOC heading and the next heading."""
        items = []
        for link in links:
            if not (start < link.line < end) or not link.is_internal:
                continue
            item = LIST_ITEM_RE.match(lines[link.line - 1])
            if not item:
                continue
            indent = len(item.group(1).expandtabs(4))
            items.append((link, indent))

        # depth follows the distinct indentation widths, so 2- and 4-space lists both work
        widths = sorted({indent for _, indent in items})
        return [
            TocEntry(title=link.text, anchor=link.anchor,
                     depth=widths.index(indent) + 1, line=link.line)
            for link, indent in items
        ]


def build_sections(document: MarkdownDocument) -> List[Section]:
    """Build the heading tree of a document, attaching body lines to each heading."""
    roots: List[Section] = []
    stack: List[Section] = []
    headings = document.headings

    for position, heading in enumerate(headings):
        end = headings[position + 1].line - 1 if position + 1 < len(headings) else len(document.lines)
        section = Section(heading=heading, body=document.lines[heading.line:end])

        while stack and stack[-1].heading.level >= heading.level:
            stack.pop()
        if stack:
            stack[-1].children.append(section)
        else:
            roots.append(section)
        stack.append(section)

    return roots


def walk_sections(sections: List[Section],
                  parents: Tuple[str, ...] = ()) -> Iterable[Tuple[Tuple[str, ...], Section]]:
    """Yield (heading path, section) depth-first in document order."""
    for section in sections:
        path = parents + (section.heading.title,)
        yield path, section
        yield from walk_sections(section.children, path)
