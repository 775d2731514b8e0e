"""GitHub-style heading anchors."""
import re
from typing import Dict

_DROP_CHARS = re.compile(r"[^\w\- ]", re.UNICODE)


def github_anchor(title: str) -> str:
    """
    Compute the anchor GitHub generates for a heading title.

    The title is lower-cased, every character other than word characters,
    spaces and hyphens is dropped, and spaces become hyphens.
    Example: ``"Chain of Responsibility"`` -> ``"chain-of-responsibility"``.
    """
    return _DROP_CHARS.sub("", title.strip().lower()).replace(" ", "-")


class AnchorRegistry:
    """Assigns unique anchors in document order (x, x-1, x-2, ...)."""

    def __init__(self):
        self._seen: Dict[str, int] = {}

    def assign(self, title: str) -> str:
        base = github_anchor(title)
        count = self._seen.get(base)
        if count is None:
            self._seen[base] = 0
            return base

        count += 1
        candidate = f"{base}-{count}"
        while candidate in self._seen:
            count += 1
            candidate = f"{base}-{count}"
        self._seen[base] = count
        self._seen[candidate] = 0
        return candidate
