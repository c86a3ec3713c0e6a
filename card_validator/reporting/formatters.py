"""
Renderers turning a list of findings into console text, JSON or CSV.
"""

import csv
import io
import json
from collections.abc import Sequence

from card_validator.core.models import Finding, Severity

CSV_COLUMNS = ("cardId", "cardName", "rule", "severity", "message", "suggestion")

SEVERITY_LABELS = {
    Severity.ERROR: "[ERROR]",
    Severity.WARNING: "[WARNING]",
    Severity.INFO: "[INFO]",
}


def summarize(findings: Sequence[Finding]) -> dict[str, int]:
    """
    Count findings per severity.

    Returns:
        {"error": n, "warning": n, "info": n}, every severity present
    """
    counts = {severity.value: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity.value] += 1
    return counts


def render_console(findings: Sequence[Finding]) -> str:
    """Human-readable report with one block per finding and a summary line."""
    lines = ["", "=== Card Validator Report ===", ""]

    for finding in findings:
        lines.append(f'{SEVERITY_LABELS[finding.severity]} Card {finding.card_id} "{finding.card_name}"')
        lines.append(f"  Rule: {finding.rule}")
        lines.append(f"  Issue: {finding.message}")
        if finding.suggestion:
            lines.append(f"  Suggestion: {finding.suggestion}")
        lines.append("")

    counts = summarize(findings)
    lines.append(
        f"Summary: {counts['error']} errors, {counts['warning']} warnings, {counts['info']} info"
    )
    return "\n".join(lines) + "\n"


def render_json(findings: Sequence[Finding]) -> str:
    return json.dumps([finding.to_dict() for finding in findings], indent=2)


def render_csv(findings: Sequence[Finding]) -> str:
    """
    CSV export: bare header row, then every cell quoted with embedded
    quotes doubled. A missing suggestion is an empty cell.
    """
    buffer = io.StringIO()
    buffer.write(",".join(CSV_COLUMNS) + "\n")

    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for finding in findings:
        data = finding.to_dict()
        writer.writerow([data.get(column) or "" for column in CSV_COLUMNS])

    return buffer.getvalue()


RENDERERS = {
    "console": render_console,
    "json": render_json,
    "csv": render_csv,
}


def render(findings: Sequence[Finding], report_format: str = "console") -> str:
    """
    Render findings in the requested format.

    Raises:
        ValueError: If the format is unknown
    """
    renderer = RENDERERS.get(report_format)
    if renderer is None:
        raise ValueError(f"Unknown report format: {report_format}. Expected one of: {', '.join(RENDERERS)}")
    return renderer(findings)
