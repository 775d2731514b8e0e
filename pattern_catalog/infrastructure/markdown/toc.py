"""Table of contents generation."""
from typing import Iterable, List, Sequence

from pattern_catalog.domain.document import Heading


def build_toc(headings: Iterable[Heading], levels: Sequence[int] = (2, 3)) -> str:
    """
    Render a nested markdown bullet list linking to the given headings.

    Only headings whose level is in ``levels`` are listed; nesting is relative
    to the shallowest level.
    """
    if not levels:
        return ""
    wanted = set(levels)
    base = min(wanted)
    lines: List[str] = []
    for heading in headings:
        if heading.level not in wanted:
            continue
        indent = "  " * (heading.level - base)
        lines.append(f"{indent}- [{heading.title}](#{heading.anchor})")
    return "\n".join(lines) + "\n" if lines else ""
