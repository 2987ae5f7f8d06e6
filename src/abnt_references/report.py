"""Validation reporting utilities."""
from __future__ import annotations

from typing import List, Sequence

from .models import ValidationReport


def render_report(reports: Sequence[ValidationReport], references: Sequence[str]) -> str:
    """Return a human-readable summary of validation results."""

    valid = sum(1 for report in reports if report.is_valid)
    lines: List[str] = [
        "ABNT Reference Validation Report",
        f"References checked: {len(reports)}",
        f"Valid references: {valid}",
    ]
    for index, (reference, report) in enumerate(zip(references, reports), start=1):
        status = "OK" if report.is_valid else "ISSUES"
        lines.append(f"{index}. [{status}] score {report.score}: {reference}")
        for code, issue in zip(report.codes, report.issues):
            lines.append(f"   - {code}: {issue}")
        for suggestion in report.suggestions:
            lines.append(f"   > {suggestion}")
    return "\n".join(lines)
