"""Tests for the markdown linter rules."""
from pattern_catalog.config.schemas import LintConfig
from pattern_catalog.infrastructure.markdown import RULES, MarkdownLinter, MarkdownParser

CLEAN = """\
# Patterns

## Table of Contents

- [Creational Patterns](#creational-patterns)
  - [Singleton](#singleton)

## Creational Patterns

Patterns about creating objects.

### Singleton

One instance. See [Singleton](#singleton).

#### Advantages

- Controlled access

#### Disadvantages

- Global state

#### When to Use

- Exactly one instance is needed
"""


def lint(text: str, config: LintConfig = None, **kwargs):
    config = config or LintConfig()
    document = MarkdownParser(config.toc_heading_names).parse(text, "doc.md")
    return MarkdownLinter(config).lint(document, **kwargs)


def rules_of(report):
    return [issue.rule for issue in report.issues]


class TestMarkdownLinter:
    """Test each lint rule on small documents."""

    def test_clean_document(self):
        """Test that a well-formed catalogue has no issues."""
        report = lint(CLEAN)
        assert report.issues == []
        assert report.passed

    def test_rule_table(self):
        """Test that every rule has a severity and a description."""
        assert set(RULES) == {
            "TOC001", "TOC002", "TOC003", "LINK001",
            "SEC001", "SEC002", "SEC003", "SEC004",
            "CODE001", "CODE002", "CODE003", "CODE004", "CODE005",
        }

    def test_missing_toc(self):
        """Test TOC001 when there is no table of contents."""
        report = lint("# Title\n\n## Section\n\ntext\n")
        assert "TOC001" in rules_of(report)
        assert report.passed

    def test_toc_entry_without_section(self):
        """Test TOC002 for an entry pointing nowhere."""
        text = CLEAN.replace("  - [Singleton](#singleton)",
                             "  - [Singleton](#singleton)\n  - [Builder](#builder)")
        report = lint(text)
        assert rules_of(report) == ["TOC002"]
        assert report.issues[0].line == 7
        assert not report.passed

    def test_section_missing_from_toc(self):
        """Test TOC003 for a heading the TOC does not list."""
        text = CLEAN.replace("  - [Singleton](#singleton)\n", "")
        report = lint(text)
        assert rules_of(report) == ["TOC003"]
        assert report.passed
        assert not lint(text, strict=True).passed

    def test_broken_internal_link(self):
        """Test LINK001 for a link to a missing anchor."""
        text = CLEAN.replace("See [Singleton](#singleton)", "See [Builder](#builder)")
        report = lint(text)
        assert rules_of(report) == ["LINK001"]
        assert "#builder" in report.issues[0].message

    def test_external_links_ignored(self):
        """Test that external links are not checked."""
        text = CLEAN.replace("See [Singleton](#singleton)", "See [docs](https://example.com)")
        assert lint(text).issues == []

    def test_duplicate_section(self):
        """Test SEC001 for a repeated heading path, reported once."""
        duplicate = CLEAN[CLEAN.index("## Creational Patterns"):]
        report = lint(CLEAN + "\n" + duplicate)
        duplicates = [issue for issue in report.issues if issue.rule == "SEC001"]
        assert len(duplicates) == 1
        assert "first defined at line 8" in duplicates[0].message
        assert not report.passed

    def test_same_title_under_different_parents(self):
        """Test that subsections repeated under different patterns are fine."""
        text = CLEAN.replace("  - [Singleton](#singleton)",
                             "  - [Singleton](#singleton)\n  - [Builder](#builder)")
        text += "\n### Builder\n\nStep by step.\n\n#### Advantages\n\n- a\n\n" \
                "#### Disadvantages\n\n- b\n\n#### When to Use\n\n- c\n"
        assert lint(text).issues == []

    def test_empty_section(self):
        """Test SEC002 for a heading without content."""
        text = CLEAN.replace("- Global state\n", "")
        report = lint(text)
        assert rules_of(report) == ["SEC002"]

    def test_stub_section(self):
        """Test SEC003 for a stub, which skips the subsection check."""
        text = CLEAN + "\n### Builder\n\n*Coming soon.*\n"
        text = text.replace("  - [Singleton](#singleton)",
                            "  - [Singleton](#singleton)\n  - [Builder](#builder)")
        report = lint(text)
        assert rules_of(report) == ["SEC003"]
        assert report.passed

    def test_stub_marker_inside_code_is_not_a_stub(self):
        """Test that markers inside fenced code are ignored."""
        text = CLEAN.replace("One instance. See [Singleton](#singleton).",
                             "One instance. See [Singleton](#singleton).\n\n"
                             "```python\n# TODO: thread safety\n```")
        assert lint(text).issues == []

    def test_missing_subsections(self):
        """Test SEC004 for a pattern without the required subsections."""
        text = CLEAN[:CLEAN.index("#### Disadvantages")]
        report = lint(text)
        assert rules_of(report) == ["SEC004"]
        assert "Disadvantages, When to Use" in report.issues[0].message

    def test_python_syntax_error(self):
        """Test CODE001 with the line of the offending statement."""
        text = "# T\n\n```python\nx = 1\ndef broken(:\n```\n"
        report = lint(text, disabled_rules=["TOC001"])
        assert rules_of(report) == ["CODE001"]
        assert report.issues[0].line == 5

    def test_json_error(self):
        """Test CODE002 for invalid JSON."""
        report = lint("# T\n\n```json\n{\"a\": }\n```\n", disabled_rules=["toc001"])
        assert rules_of(report) == ["CODE002"]

    def test_yaml_error(self):
        """Test CODE003 for invalid YAML."""
        report = lint("# T\n\n```yaml\na: [1, 2\n```\n", disabled_rules=["TOC001"])
        assert rules_of(report) == ["CODE003"]

    def test_valid_blocks(self):
        """Test that valid code, JSON and YAML blocks pass."""
        text = ("# T\n\n```python\nx = 1\n```\n\n```json\n{\"a\": 1}\n```\n\n"
                "```yml\na: 1\n---\nb: 2\n```\n\n```text\nnot checked (\n```\n")
        assert lint(text, disabled_rules=["TOC001"]).issues == []

    def test_block_without_language(self):
        """Test CODE004 for a bare fence."""
        report = lint("# T\n\n```\nplain\n```\n", disabled_rules=["TOC001"])
        assert rules_of(report) == ["CODE004"]

    def test_configured_disabled_rules(self):
        """Test that configured and per-call disabled rules combine."""
        config = LintConfig(disabled_rules=["TOC001"])
        report = lint("# T\n\n```\nplain\n```\n", config, disabled_rules=["CODE004"])
        assert report.issues == []

    def test_configured_strict(self):
        """Test that the configured strict flag applies unless overridden."""
        text = CLEAN.replace("  - [Singleton](#singleton)\n", "")
        config = LintConfig(strict=True)
        assert not lint(text, config).passed
        assert lint(text, config, strict=False).passed

    def test_unclosed_code_block(self):
        """Test CODE005 for a fence that swallows the rest of the document."""
        text = ("# Doc\n\n## Contents\n\n- [A](#a)\n\n## A\n\n"
                "```python\nx = 1\n\n## B\n\nMore text.\n")
        report = lint(text)
        assert rules_of(report) == ["CODE005"]
        assert report.issues[0].line == 9
        assert not report.passed

    def test_unclosed_code_block_can_be_disabled(self):
        """Test that CODE005 follows the disabled rules like any other rule."""
        text = "# T\n\n## Contents\n\n- [T](#t)\n\n```python\nx = 1\n"
        report = lint(text, disabled_rules=["CODE005"])
        assert "CODE005" not in rules_of(report)
