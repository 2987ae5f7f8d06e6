"""Bridge between page-metadata extractors and the website reference template."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .formatter import ReferenceFormatter
from .models import WebsiteFields

_YEAR = re.compile(r"[0-9]{4}")

_KEY_ALIASES = {
    "siteName": "site_name",
    "publishedDate": "published_date",
    "accessDate": "access_date",
}


@dataclass
class PageMetadata:
    """Best-effort record describing a web page; any field may be empty."""

    author: str = ""
    title: str = ""
    site_name: str = ""
    published_date: str = ""
    url: str = ""
    access_date: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "PageMetadata":
        values: Dict[str, str] = {}
        for key, value in (data or {}).items():
            name = _KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__ and value is not None:
                values[name] = str(value).strip()
        return cls(**values)

    def to_website_fields(self) -> WebsiteFields:
        match = _YEAR.search(self.published_date)
        return WebsiteFields(
            author=self.author,
            title=self.title,
            site_name=self.site_name,
            year=match.group(0) if match else "",
            url=self.url,
            access_date=self.access_date,
        )


def abnt_reference_from_metadata(
    record: PageMetadata | Mapping[str, Any] | None,
    formatter: ReferenceFormatter | None = None,
) -> str:
    """Format an extractor record through the website template."""
    if not isinstance(record, PageMetadata):
        record = PageMetadata.from_mapping(record)
    formatter = formatter or ReferenceFormatter()
    return formatter.format_website(record.to_website_fields())


class MetadataProvider:
    """Base interface for page-metadata extractors."""

    name: str = "base"

    def extract(self, url: str) -> PageMetadata:  # pragma: no cover - interface
        raise NotImplementedError


class StaticMetadataProvider(MetadataProvider):
    """Serve canned records keyed by URL; suitable for tests and offline use."""

    def __init__(self, static_map: Mapping[str, Mapping[str, Any]]):
        self.static_map = static_map
        self.name = "static"

    def extract(self, url: str) -> PageMetadata:
        data: Optional[Mapping[str, Any]] = self.static_map.get(url)
        record = PageMetadata.from_mapping(data)
        if not record.url:
            record.url = url
        return record
