"""Reconciliation core for turning operator edits into persistence operations.

Layered flow of a save:
1) merge per-cell draft edits into one draft per quote line
2) resolve each draft against its original line
3) classify what changed and build supersession + amendment operations

Cancellation and undo are planned by separate pure functions over the same
contracts. Every stage is side-effect free; submitting the resulting plan is the
job of the application services.
"""

from __future__ import annotations

from .cancel import plan_cancellation
from .classify import build_amendments, classify_change, resolve_values
from .contracts import (
    AmendmentRecord,
    DraftEdit,
    DraftsById,
    LinesById,
    MergedDraft,
    QuantityUpdate,
    RestorationUpdate,
    SupersessionUpdate,
    index_lines,
)
from .engine import BuildAmendments, MergeDraftEdits, ReconciliationEngine
from .merge import merge_draft_edits
from .plan import ReconciliationPlan, UndoPlan
from .undo import plan_undo

__all__ = [
    "AmendmentRecord",
    "BuildAmendments",
    "DraftEdit",
    "DraftsById",
    "LinesById",
    "MergeDraftEdits",
    "MergedDraft",
    "QuantityUpdate",
    "ReconciliationEngine",
    "ReconciliationPlan",
    "RestorationUpdate",
    "SupersessionUpdate",
    "UndoPlan",
    "build_amendments",
    "classify_change",
    "index_lines",
    "merge_draft_edits",
    "plan_cancellation",
    "plan_undo",
    "resolve_values",
]
