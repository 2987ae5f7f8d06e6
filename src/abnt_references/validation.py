"""Lint-style checks for ABNT reference strings."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .models import ValidationReport

ISSUE_PENALTY = 20

_SURNAME_PREFIX = re.compile(r"^[A-ZÁÉÍÓÚÂÊÎÔÛÃÕÇ]+,")
_YEAR = re.compile(r"[0-9]{4}")


@dataclass(frozen=True)
class ValidationRule:
    code: str
    message: str
    suggestion: Optional[str]
    passes: Callable[[str], bool]


def _has_surname_prefix(reference: str) -> bool:
    return _SURNAME_PREFIX.match(reference) is not None


def _ends_with_period(reference: str) -> bool:
    return reference.strip().endswith(".")


def _has_emphasis(reference: str) -> bool:
    return "**" in reference or "_" in reference


def _has_year(reference: str) -> bool:
    return _YEAR.search(reference) is not None


def _has_access_date(reference: str) -> bool:
    lowered = reference.lower()
    return "disponível em" not in lowered or "acesso em" in lowered


RULES: Tuple[ValidationRule, ...] = (
    ValidationRule(
        code="surname-uppercase",
        message="Author surname must be uppercase at the start",
        suggestion="Start with SURNAME, Name.",
        passes=_has_surname_prefix,
    ),
    ValidationRule(
        code="terminal-period",
        message="Reference must end with a period",
        suggestion=None,
        passes=_ends_with_period,
    ),
    ValidationRule(
        code="title-emphasis",
        message="Main title must be emphasized (bold)",
        suggestion="Use **Title** to emphasize the main title",
        passes=_has_emphasis,
    ),
    ValidationRule(
        code="publication-year",
        message="Reference must contain the publication year",
        suggestion=None,
        passes=_has_year,
    ),
    ValidationRule(
        code="access-date",
        message="Website references must include the access date",
        suggestion="Add: Acesso em: DD mês. AAAA.",
        passes=_has_access_date,
    ),
)


def validate_reference(reference: str | None) -> ValidationReport:
    """Run every rule against ``reference`` and score the result.

    Rules are independent, so one failure never hides another. Each issue
    costs ``ISSUE_PENALTY`` points from 100, floored at zero.
    """
    text = reference or ""
    issues: List[str] = []
    suggestions: List[str] = []
    codes: List[str] = []
    for rule in RULES:
        if rule.passes(text):
            continue
        codes.append(rule.code)
        issues.append(rule.message)
        if rule.suggestion:
            suggestions.append(rule.suggestion)
    return ValidationReport(
        is_valid=not issues,
        issues=issues,
        suggestions=suggestions,
        score=max(0, 100 - ISSUE_PENALTY * len(issues)),
        codes=codes,
    )


def validate_references(references: Iterable[str]) -> List[ValidationReport]:
    return [validate_reference(reference) for reference in references]
