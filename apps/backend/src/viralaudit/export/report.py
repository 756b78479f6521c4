"""Critique report generator.

Renders an analysis result as Markdown or JSON for the CLI and API.
Entries whose fix is the sentinel are shown without a fix line.
"""

import json
from pathlib import Path
from typing import Literal

from viralaudit.models.analysis import AnalysisResult

_CATEGORY_TITLES = {
    "visual": "Visuals",
    "audio": "Audio",
    "copy": "Copy",
}


def generate_report(result: AnalysisResult, title: str | None = None) -> str:
    """Generate a critique report in Markdown format.

    Args:
        result: Validated analysis result
        title: Optional heading, e.g. the video file name

    Returns:
        Markdown formatted report string
    """
    lines = [
        f"# {title}" if title else "# Ad Critique",
        "",
        f"**Overall score**: {result.overall_score}/100",
        "",
        result.brutal_summary,
        "",
        "## Pillars",
        "",
        "| Pillar | Score | Feedback |",
        "|--------|-------|----------|",
    ]

    for key, category in result.categories.items():
        lines.append(f"| {_CATEGORY_TITLES[key]} | {category.score} | {_cell(category.feedback)} |")
    lines.append("")

    fixes = [
        (_CATEGORY_TITLES[key], category.fix)
        for key, category in result.categories.items()
        if category.fix is not None
    ]
    if fixes:
        for name, fix in fixes:
            lines.append(f"- **{name} fix**: {fix}")
        lines.append("")

    lines.append("## Checks")
    lines.append("")
    for _, check in result.checks.items():
        lines.append(f"### [{check.status.value}] {check.label.value}")
        lines.append("")
        lines.append(check.details)
        if check.fix is not None:
            lines.append("")
            lines.append(f"**Fix**: {check.fix}")
        lines.append("")

    lines.append("## Timeline")
    lines.append("")
    if not result.timestamped_notes:
        lines.append("No timestamped notes.")
    for note in result.timestamped_notes:
        lines.append(f"- `{note.time}` {note.note}")

    return "\n".join(lines).rstrip() + "\n"


def generate_report_json(result: AnalysisResult) -> dict:
    """Generate a JSON-serializable report.

    Fixes are ``null`` where the engine had nothing to suggest, and the
    failing checks are listed up front.
    """
    data = result.model_dump(mode="json", by_alias=True)
    data["flaggedChecks"] = [key for key, _ in result.flagged_checks()]
    return data


def save_report(
    result: AnalysisResult,
    output_path: Path,
    format: Literal["markdown", "json"] = "markdown",
    title: str | None = None,
) -> Path:
    """Write a report to disk.

    Args:
        result: Validated analysis result
        output_path: Destination file
        format: "markdown" or "json"
        title: Optional Markdown heading

    Returns:
        Path to the written report
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if format == "json":
        content = json.dumps(generate_report_json(result), ensure_ascii=False, indent=2)
    else:
        content = generate_report(result, title=title)

    output_path.write_text(content, encoding="utf-8")
    return output_path


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")
