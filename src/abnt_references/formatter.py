"""ABNT (NBR 6023) reference formatting."""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date
from typing import Any, Callable, List, Mapping, Optional

from .authors import to_reference_form
from .models import (
    ArticleFields,
    BookFields,
    OtherFields,
    ReferenceFields,
    Segment,
    ThesisFields,
    WebsiteFields,
)
from .reference_types import SOURCE_TYPES, fields_from_mapping, normalize_source_type

ABNT_MONTHS = (
    "jan.",
    "fev.",
    "mar.",
    "abr.",
    "maio",
    "jun.",
    "jul.",
    "ago.",
    "set.",
    "out.",
    "nov.",
    "dez.",
)

_EMPHASIS = re.compile(r"\*\*(.+?)\*\*")


@dataclass(frozen=True)
class Placeholders:
    """Text substituted for missing fields so gaps stay visible."""

    title: str = "Título"
    year: str = "Ano"
    city: str = "Local"
    publisher: str = "Editora"
    volume: str = "X"
    number: str = "X"
    pages: str = "X-X"
    journal: str = "Nome da Revista"
    site_name: str = "Nome do site"
    url: str = "URL"
    institution: str = "Instituição"
    thesis_type: str = "Dissertação"
    degree: str = "Mestrado"


def abnt_date(value: date) -> str:
    """Render a date the way ABNT writes access dates: ``01 jan. 2024``."""
    return f"{value.day:02d} {ABNT_MONTHS[value.month - 1]} {value.year}"


class ReferenceFormatter:
    """Assemble reference strings for books, articles, websites and theses.

    Templates never fail on missing data: absent values are replaced by the
    configured :class:`Placeholders`. Titles are wrapped in ``**`` to mark
    the bold emphasis ABNT requires.
    """

    def __init__(
        self,
        placeholders: Placeholders | None = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.placeholders = placeholders or Placeholders()
        self.today = today or date.today

    def format(self, source_type: str | None, fields: ReferenceFields | Mapping[str, Any] | None) -> str:
        type_key = normalize_source_type(source_type)
        expected = SOURCE_TYPES[type_key].record if type_key else OtherFields
        if is_dataclass(fields) and not isinstance(fields, type):
            if not isinstance(fields, expected):
                # A record of another source type is re-read field by field.
                fields = fields_from_mapping(type_key, asdict(fields))
        else:
            fields = fields_from_mapping(type_key, fields)
        if type_key is None:
            return getattr(fields, "text", "") or ""
        formatter = getattr(self, f"format_{type_key}")
        return formatter(fields)

    def format_book(self, fields: BookFields) -> str:
        ph = self.placeholders
        subtitle = f": {fields.subtitle}" if fields.subtitle else ""
        edition = f"{fields.edition}. ed. " if fields.edition else ""
        return (
            f"{to_reference_form(fields.author)}. "
            f"**{fields.title or ph.title}**{subtitle}. "
            f"{edition}{fields.city or ph.city}: {fields.publisher or ph.publisher}, "
            f"{fields.year or ph.year}."
        )

    def format_article(self, fields: ArticleFields) -> str:
        ph = self.placeholders
        dated = " ".join(part for part in [fields.month, fields.year or ph.year] if part)
        return (
            f"{to_reference_form(fields.author)}. {fields.title or ph.title}. "
            f"**{fields.journal or ph.journal}**, {fields.city or ph.city}, "
            f"v. {fields.volume or ph.volume}, n. {fields.number or ph.number}, "
            f"p. {fields.pages or ph.pages}, {dated}."
        )

    def format_website(self, fields: WebsiteFields) -> str:
        ph = self.placeholders
        today = self.today()
        year = fields.year or str(today.year)
        access_date = fields.access_date or abnt_date(today)
        return (
            f"{to_reference_form(fields.author)}. **{fields.title or ph.title}**. "
            f"{fields.site_name or ph.site_name}, {year}. "
            f"Disponível em: {fields.url or ph.url}. Acesso em: {access_date}."
        )

    def format_thesis(self, fields: ThesisFields) -> str:
        ph = self.placeholders
        year = fields.year or ph.year
        pages = f"{fields.pages} f. " if fields.pages else ""
        return (
            f"{to_reference_form(fields.author)}. **{fields.title or ph.title}**. {year}. "
            f"{pages}{fields.thesis_type or ph.thesis_type} ({fields.degree or ph.degree}) - "
            f"{fields.institution or ph.institution}, {fields.city or ph.city}, {year}."
        )


def split_emphasis(reference: str) -> List[Segment]:
    """Split a formatted reference into plain and emphasized segments."""
    segments: List[Segment] = []
    position = 0
    for match in _EMPHASIS.finditer(reference):
        if match.start() > position:
            segments.append(Segment(reference[position : match.start()]))
        segments.append(Segment(match.group(1), emphasized=True))
        position = match.end()
    if position < len(reference):
        segments.append(Segment(reference[position:]))
    return segments


def strip_emphasis(reference: str) -> str:
    return _EMPHASIS.sub(r"\1", reference)
