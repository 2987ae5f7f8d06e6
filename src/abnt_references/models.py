"""Data models for ABNT citation and reference workflows."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class CitationFields:
    """Inputs for an in-text citation."""

    author: str = ""
    year: str = ""
    page: Optional[str] = None
    quote: Optional[str] = None


@dataclass
class CitationVariant:
    """One generated citation string plus the labels shown next to it."""

    key: str
    label: str
    description: str
    text: str
    example: str

    @property
    def ready(self) -> bool:
        return bool(self.text)


@dataclass
class BookFields:
    author: str = ""
    title: str = ""
    subtitle: str = ""
    edition: str = ""
    city: str = ""
    publisher: str = ""
    year: str = ""


@dataclass
class ArticleFields:
    author: str = ""
    title: str = ""
    journal: str = ""
    city: str = ""
    volume: str = ""
    number: str = ""
    pages: str = ""
    month: str = ""
    year: str = ""


@dataclass
class WebsiteFields:
    author: str = ""
    title: str = ""
    site_name: str = ""
    year: str = ""
    url: str = ""
    access_date: str = ""


@dataclass
class ThesisFields:
    author: str = ""
    title: str = ""
    year: str = ""
    pages: str = ""
    thesis_type: str = ""
    degree: str = ""
    institution: str = ""
    city: str = ""


@dataclass
class OtherFields:
    """Free-text reference for source types without a template."""

    text: str = ""


ReferenceFields = Union[BookFields, ArticleFields, WebsiteFields, ThesisFields, OtherFields]


@dataclass(frozen=True)
class Segment:
    """A run of reference text, optionally rendered with emphasis."""

    text: str
    emphasized: bool = False


@dataclass
class ValidationReport:
    """Outcome of the rule battery for one reference string."""

    is_valid: bool
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    score: int = 100
    codes: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
            "score": self.score,
        }


@dataclass
class LibraryEntry:
    """A reference saved in a user's library, as sent by the client."""

    id: str
    text: str
    type: str
    created_at: str
    project: Optional[str] = None
    user_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "type": self.type,
            "project": self.project,
            "createdAt": self.created_at,
            "userId": self.user_id,
        }
