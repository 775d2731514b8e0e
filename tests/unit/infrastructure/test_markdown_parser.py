"""Tests for anchors, the markdown parser and table of contents generation."""
import pytest

from pattern_catalog.domain.document import Heading
from pattern_catalog.infrastructure.markdown import (
    AnchorRegistry,
    MarkdownParser,
    build_toc,
    github_anchor,
    walk_sections,
)
from pattern_catalog.infrastructure.markdown.parser import iter_prose_lines

DOCUMENT = """\
# Design Patterns

Intro with a [link](#observer) and `[code](#not-a-link)`.

## Table of Contents

- [Creational Patterns](#creational-patterns)
  - [Singleton](#singleton)
- [Behavioral Patterns](#behavioral-patterns)
    - [Observer](#observer)

## Creational Patterns

### Singleton

```python
# Not a heading
x = 1
```

## Behavioral Patterns

### Observer

![diagram](#observer-diagram)
"""


class TestAnchors:
    """Test GitHub-style anchors."""

    @pytest.mark.parametrize("title, anchor", [
        ("Chain of Responsibility", "chain-of-responsibility"),
        ("When to Use", "when-to-use"),
        ("Model-View-Controller", "model-view-controller"),
        ("What's new? (2024)", "whats-new-2024"),
        ("  Padded  ", "padded"),
    ])
    def test_github_anchor(self, title, anchor):
        """Test anchor computation."""
        assert github_anchor(title) == anchor

    def test_registry_deduplicates(self):
        """Test that repeated titles get numbered anchors."""
        registry = AnchorRegistry()
        assert [registry.assign("Example") for _ in range(3)] == ["example", "example-1", "example-2"]

    def test_registry_avoids_existing_suffix(self):
        """Test that a numbered anchor never collides with a literal title."""
        registry = AnchorRegistry()
        assert registry.assign("Example 1") == "example-1"
        assert registry.assign("Example") == "example"
        assert registry.assign("Example") == "example-2"


class TestMarkdownParser:
    """Test parsing of headings, code blocks, links and the TOC."""

    def setup_method(self):
        self.document = MarkdownParser().parse(DOCUMENT, "README.md")

    def test_headings(self):
        """Test that headings outside code blocks are found in order."""
        titles = [(h.level, h.title) for h in self.document.headings]
        assert titles == [
            (1, "Design Patterns"),
            (2, "Table of Contents"),
            (2, "Creational Patterns"),
            (3, "Singleton"),
            (2, "Behavioral Patterns"),
            (3, "Observer"),
        ]
        assert self.document.headings[3].anchor == "singleton"

    def test_code_blocks(self):
        """Test code block language, content and line."""
        [block] = self.document.code_blocks
        assert block.language == "python"
        assert block.content == "# Not a heading\nx = 1"
        assert block.line == 16
        assert block.closed

    def test_links_skip_inline_code_and_images(self):
        """Test that links in inline code and image links are ignored."""
        targets = [link.target for link in self.document.links]
        assert "#not-a-link" not in targets
        assert "#observer-diagram" not in targets
        assert targets[0] == "#observer"

    def test_toc(self):
        """Test TOC detection and entry depth from indentation."""
        document = self.document
        assert document.toc_heading.title == "Table of Contents"
        assert [(e.anchor, e.depth) for e in document.toc] == [
            ("creational-patterns", 1),
            ("singleton", 2),
            ("behavioral-patterns", 1),
            ("observer", 3),
        ]

    def test_preamble(self):
        """Test that the preamble holds lines before the first heading."""
        document = MarkdownParser().parse("Front matter\n\n# Title\n")
        assert document.preamble == ["Front matter", ""]
        assert document.name == "<text>"

    def test_sections_tree(self):
        """Test the nested section tree and body lines."""
        paths = [path for path, _ in walk_sections(self.document.sections)]
        assert ("Design Patterns", "Creational Patterns", "Singleton") in paths
        singleton = dict(walk_sections(self.document.sections))[
            ("Design Patterns", "Creational Patterns", "Singleton")]
        assert singleton.body[1] == "```python"
        assert singleton.content_lines == 4

    def test_unclosed_fence(self):
        """Test that an unterminated fence is reported as not closed."""
        document = MarkdownParser().parse("# T\n\n~~~yaml\na: 1\n## Inside\n")
        [block] = document.code_blocks
        assert not block.closed
        assert block.language == "yaml"
        assert [h.title for h in document.headings] == ["T"]

    def test_closing_hashes_and_custom_toc_name(self):
        """Test closing hash sequences and configurable TOC names."""
        document = MarkdownParser(["Index"]).parse("## Index ##\n\n- [A](#a)\n\n## A\n\ntext\n")
        assert document.toc_heading.title == "Index"
        assert [e.anchor for e in document.toc] == ["a"]

    def test_iter_prose_lines(self):
        """Test that fenced lines are skipped."""
        lines = ["a", "```", "b", "```", "c"]
        assert [line for _, line in iter_prose_lines(lines)] == ["a", "c"]


class TestBuildToc:
    """Test table of contents generation."""

    def test_nested_list(self):
        """Test nesting relative to the shallowest level."""
        headings = [
            Heading(level=1, title="Title", line=1, anchor="title"),
            Heading(level=2, title="Creational Patterns", line=3, anchor="creational-patterns"),
            Heading(level=3, title="Builder", line=5, anchor="builder"),
            Heading(level=4, title="Example", line=7, anchor="example"),
        ]
        assert build_toc(headings, (2, 3)) == (
            "- [Creational Patterns](#creational-patterns)\n"
            "  - [Builder](#builder)\n"
        )

    def test_no_matching_headings(self):
        """Test that no matching headings give an empty string."""
        assert build_toc([Heading(level=1, title="T", line=1, anchor="t")]) == ""
