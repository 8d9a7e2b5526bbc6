"""Collapse per-cell draft edits into one draft per quote line."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .contracts import MergedDraft

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .contracts import DraftEdit, DraftsById

log = getLogger(__name__)


def merge_draft_edits(edits: Iterable[DraftEdit]) -> DraftsById:
    """Merge ``edits`` in arrival order into one draft per line id.

    Only fields present on an edit overwrite the merged draft; an untouched field
    never clears a value merged from an earlier edit. Insertion order of the
    returned mapping is the order in which each id was first seen.
    """

    drafts: DraftsById = {}
    count = 0
    for edit in edits:
        count += 1
        draft = drafts.get(edit.id)
        if draft is None:
            draft = drafts[edit.id] = MergedDraft(id=edit.id)
        draft.absorb(edit)
    log.debug("Merged %s draft edits into %s drafts", count, len(drafts))
    return drafts
