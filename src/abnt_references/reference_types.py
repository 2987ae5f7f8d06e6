"""Source type registry and conversion of loose field bags into typed records."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Type

from .models import (
    ArticleFields,
    BookFields,
    OtherFields,
    ReferenceFields,
    ThesisFields,
    WebsiteFields,
)


@dataclass(frozen=True)
class SourceType:
    key: str
    record: Type


SOURCE_TYPES = {
    "book": SourceType("book", BookFields),
    "article": SourceType("article", ArticleFields),
    "website": SourceType("website", WebsiteFields),
    "thesis": SourceType("thesis", ThesisFields),
}

_ALIASES = {
    "livro": "book",
    "artigo": "article",
    "site": "website",
    "tese": "thesis",
}

_FIELD_ALIASES = {
    "siteName": "site_name",
    "accessDate": "access_date",
    "thesisType": "thesis_type",
    # Thesis forms post the kind of work under "type".
    "type": "thesis_type",
}


def normalize_source_type(value: str | None) -> Optional[str]:
    """Return the canonical type key, or ``None`` for unknown types."""
    if not value:
        return None
    key = str(value).strip().lower()
    key = _ALIASES.get(key, key)
    return key if key in SOURCE_TYPES else None


def fields_from_mapping(type_key: str | None, data: Mapping[str, Any] | None) -> ReferenceFields:
    """Build the record for ``type_key`` from a loosely-typed mapping.

    Unknown keys are dropped and ``None`` values become empty strings. An
    unrecognized type yields :class:`OtherFields` carrying ``data["text"]``.
    """
    data = data or {}
    source = SOURCE_TYPES.get(normalize_source_type(type_key) or "")
    if source is None:
        return OtherFields(text=_as_text(data.get("text")))

    allowed = {f.name for f in fields(source.record)}
    values: Dict[str, str] = {}
    for raw_key, raw_value in data.items():
        name = _FIELD_ALIASES.get(raw_key, raw_key)
        if name == "thesis_type" and source.record is not ThesisFields:
            continue
        if name in allowed and not values.get(name):
            values[name] = _as_text(raw_value)
    return source.record(**values)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
