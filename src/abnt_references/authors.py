"""Author name normalization for ABNT citations and references.

Only single authors are handled. The surname is always the last
whitespace-separated token, so particles ("da", "van") and multi-word
surnames are not recognized.
"""
from __future__ import annotations


def to_citation_form(name: str | None) -> str:
    """Return the surname in capitals, e.g. ``"João Silva" -> "SILVA"``."""
    if not name:
        return ""
    parts = name.split()
    if not parts:
        return ""
    return parts[-1].upper()


def to_reference_form(name: str | None) -> str:
    """Return ``"SURNAME, Given Names"`` for a bibliography entry."""
    if not name:
        return ""
    if " " not in name.strip():
        return name.strip().upper()
    parts = name.split()
    surname = parts.pop().upper()
    return f"{surname}, {' '.join(parts)}"


def capitalize_surname(surname: str) -> str:
    if not surname:
        return ""
    return surname[0] + surname[1:].lower()
