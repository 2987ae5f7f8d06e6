"""ABNT citation and reference formatting toolkit."""

from .authors import to_citation_form, to_reference_form
from .citations import CitationFormatter
from .formatter import Placeholders, ReferenceFormatter, split_emphasis, strip_emphasis
from .metadata import PageMetadata, abnt_reference_from_metadata
from .models import (
    ArticleFields,
    BookFields,
    CitationFields,
    CitationVariant,
    OtherFields,
    Segment,
    ThesisFields,
    ValidationReport,
    WebsiteFields,
)
from .validation import validate_reference, validate_references

__all__ = [
    "to_citation_form",
    "to_reference_form",
    "CitationFormatter",
    "Placeholders",
    "ReferenceFormatter",
    "split_emphasis",
    "strip_emphasis",
    "PageMetadata",
    "abnt_reference_from_metadata",
    "ArticleFields",
    "BookFields",
    "CitationFields",
    "CitationVariant",
    "OtherFields",
    "Segment",
    "ThesisFields",
    "ValidationReport",
    "WebsiteFields",
    "validate_reference",
    "validate_references",
]
