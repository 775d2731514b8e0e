"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for pattern listings, lint reports and validation problems
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

FORMATS = ["json", "yaml", "table", "list"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type. Text passes through unchanged."""
    if isinstance(data, str):
        return data
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "issues" in data:
        return format_lint_table(data)
    elif isinstance(data, dict) and "problems" in data:
        return format_problems_table(data)
    elif isinstance(data, dict) and "output" in data:
        return "\n".join(data["output"])
    elif isinstance(data, dict):
        return format_mapping_table(data)
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "issues" in data:
        return format_lint_list(data)
    elif isinstance(data, dict) and "output" in data:
        return "\n".join(data["output"])
    elif isinstance(data, dict):
        return "\n".join(_list_lines(data))
    return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern summaries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Status", style="yellow")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            pattern.get("slug", "N/A"),
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("status", "N/A"),
            pattern.get("summary", ""),
        )
    return _render(table)


def format_lint_table(report: Dict) -> str:
    """Format a lint report as a Rich table followed by a summary line."""
    issues = report.get("issues", [])
    summary = _lint_summary(report)
    if not issues:
        return summary

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Severity")
    table.add_column("Rule", style="blue", no_wrap=True)
    table.add_column("Message")

    styles = {"error": "red", "warning": "yellow", "info": "dim"}
    for issue in issues:
        severity = issue.get("severity", "")
        table.add_row(
            str(issue.get("line") or ""),
            f"[{styles.get(severity, 'white')}]{severity}[/]",
            issue.get("rule", ""),
            issue.get("message", ""),
        )
    return _render(table) + summary


def format_problems_table(result: Dict) -> str:
    """Format catalogue validation problems as a Rich table."""
    problems = result.get("problems", [])
    if not problems:
        return (f"Catalogue is valid: {result.get('pattern_count', 0)} patterns, "
                f"{result.get('checked_samples', 0)} samples checked.")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Check", style="blue")
    table.add_column("Problem")
    for problem in problems:
        table.add_row(problem.get("slug", ""), problem.get("check", ""), problem.get("message", ""))
    return _render(table)


def format_mapping_table(data: Dict) -> str:
    """Format a flat or nested mapping as a two-column Rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in _flatten(data):
        table.add_row(key, value)
    return _render(table)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format pattern summaries as a detailed list."""
    if not patterns:
        return "No patterns found."
    blocks = []
    for pattern in patterns:
        blocks.append("\n".join([
            f"{pattern.get('name', 'N/A')} ({pattern.get('slug', 'N/A')})",
            f"  Category: {pattern.get('category', 'N/A')}",
            f"  Status:   {pattern.get('status', 'N/A')}",
            f"  Summary:  {pattern.get('summary', '')}",
        ]))
    return "\n\n".join(blocks)


def format_lint_list(report: Dict) -> str:
    """Format a lint report one issue per line, like compiler output."""
    document = report.get("document", "")
    lines = []
    for issue in report.get("issues", []):
        location = f"{document}:{issue['line']}" if issue.get("line") else document
        lines.append(f"{location}: {issue.get('severity')} {issue.get('rule')} {issue.get('message')}")
    lines.append(_lint_summary(report).rstrip("\n"))
    return "\n".join(lines)


def _lint_summary(report: Dict) -> str:
    status = "passed" if report.get("passed") else "failed"
    return (f"{report.get('document', '')}: {status} "
            f"({report.get('error_count', 0)} errors, {report.get('warning_count', 0)} warnings, "
            f"{report.get('info_count', 0)} info)\n")


def _flatten(data: Dict, prefix: str = "") -> List[tuple]:
    rows = []
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            rows.extend(_flatten(value, f"{name}."))
        elif isinstance(value, list):
            rows.append((name, ", ".join(str(item) for item in value)))
        else:
            rows.append((name, "" if value is None else str(value)))
    return rows


def _list_lines(data: Dict) -> List[str]:
    lines = []
    for key, value in _flatten(data):
        if "\n" in value:
            lines.append(f"{key}:")
            lines.extend(f"  {line}" for line in value.splitlines())
        else:
            lines.append(f"{key}: {value}")
    return lines
