"""Adapter for draft values captured by the quote-line editing surface."""

from __future__ import annotations

from .schema import DraftValuePayload
from .translator import load_draft_edits, parse_draft_edits, to_draft_edit

__all__ = [
    "DraftValuePayload",
    "load_draft_edits",
    "parse_draft_edits",
    "to_draft_edit",
]
