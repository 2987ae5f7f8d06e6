"""Exceptions raised at the request boundary.

The formatting and validation core never raises; these cover malformed
payloads handed to the HTTP API and CLI.
"""
from __future__ import annotations


class AbntReferenceError(Exception):
    """Base class for toolkit errors."""


class InvalidRequestError(AbntReferenceError):
    """A request is missing required top-level fields."""


class InvalidLibraryPayload(InvalidRequestError):
    """A library sync payload is not a list of references."""
