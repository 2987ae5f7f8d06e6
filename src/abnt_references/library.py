"""Normalization of reference lists synced from the client library."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from .errors import InvalidLibraryPayload
from .models import LibraryEntry

LIBRARY_TYPES = ("livro", "artigo", "site", "tese", "outro")


def normalize_library_entries(entries: Any, user_id: Optional[str] = None) -> List[LibraryEntry]:
    """Coerce client-side library entries into well-formed records.

    Nothing is stored; the caller owns persistence.
    """
    if not isinstance(entries, list):
        raise InvalidLibraryPayload("References must be a list")

    normalized: List[LibraryEntry] = []
    for raw in entries:
        item = raw if isinstance(raw, dict) else {}
        ref_type = item.get("type")
        normalized.append(
            LibraryEntry(
                id=str(item.get("id") or uuid.uuid4()),
                text=str(item.get("text") or ""),
                type=ref_type if ref_type in LIBRARY_TYPES else "outro",
                project=item.get("project") or None,
                created_at=item.get("createdAt") or _utc_now(),
                user_id=user_id or None,
            )
        )
    return normalized


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
