"""Orchestrator for the reconciliation subsystem.

The engine composes stage interfaces but does not prescribe implementations, so a
caller can swap in a different merge or build stage (for instance one that also
records rationale for audit) without touching the application services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .classify import build_amendments
from .merge import merge_draft_edits

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quoteamend.domain.model import QuoteLine

    from .contracts import DraftEdit, DraftsById
    from .plan import ReconciliationPlan


class MergeDraftEdits(Protocol):
    """Collapse raw draft edits into one merged draft per line id."""

    def __call__(self, edits: Iterable[DraftEdit]) -> DraftsById: ...


class BuildAmendments(Protocol):
    """Compare merged drafts with originals and plan persistence operations."""

    def __call__(
        self,
        drafts: DraftsById,
        originals: Iterable[QuoteLine],
    ) -> ReconciliationPlan: ...


@dataclass(slots=True)
class ReconciliationEngine:
    """Run reconciliation from raw draft edits to a persistence plan."""

    merge: MergeDraftEdits
    build: BuildAmendments

    @classmethod
    def default(cls) -> ReconciliationEngine:
        return cls(merge=merge_draft_edits, build=build_amendments)

    def reconcile(
        self,
        edits: Iterable[DraftEdit],
        originals: Iterable[QuoteLine],
    ) -> ReconciliationPlan:
        """Run all reconciliation stages for ``edits`` against ``originals``."""

        drafts = self.merge(edits)
        return self.build(drafts, tuple(originals))
