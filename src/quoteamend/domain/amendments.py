"""Application services for reviewing and amending the lines of one quote.

Each action follows the same sequence:
1) read the authoritative quote-line snapshot
2) plan operations with the pure reconciliation functions
3) submit every operation concurrently and wait for all of them
4) on full success refresh the snapshot, then notify the operator

A failed operation aborts the success path once: the operator gets one error
notification, no refresh is triggered and nothing tries to work out which
operations went through. The next refresh shows the real state.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from quoteamend.domain.export import render_quote_lines_csv, summarize_products
from quoteamend.domain.model import Severity
from quoteamend.domain.reconciliation import (
    ReconciliationEngine,
    plan_cancellation,
    plan_undo,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable, Sequence
    from pathlib import Path

    from quoteamend.domain.export import ProductSummary
    from quoteamend.domain.model import LineId, Quote, QuoteLine
    from quoteamend.domain.ports import (
        Notifier,
        QuoteLineGateway,
        QuoteLineSource,
        RefreshSignal,
    )
    from quoteamend.domain.reconciliation import DraftEdit, ReconciliationPlan, UndoPlan

log = getLogger(__name__)


class ActionStatus(StrEnum):
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True)
class ActionResult:
    """Outcome of one save, cancel or undo action."""

    status: ActionStatus
    updated: int = 0
    inserted: int = 0
    deleted: int = 0
    inserted_ids: tuple[LineId, ...] = ()
    errors: tuple[Exception, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.status is ActionStatus.SUCCEEDED


@dataclass(slots=True)
class ExportResult:
    """Outcome of a CSV export; ``path`` is ``None`` when nothing was written."""

    path: Path | None
    rows: int = 0


@dataclass(slots=True)
class _BatchOutcome:
    inserted_ids: list[LineId] = field(default_factory=list["LineId"])
    errors: list[Exception] = field(default_factory=list[Exception])


@dataclass(slots=True)
class QuoteAmendmentService:
    """Save, cancel, undo and export actions for the lines of ``quote_id``."""

    quote_id: str
    source: QuoteLineSource
    gateway: QuoteLineGateway
    notifier: Notifier
    on_refresh: RefreshSignal | None = None
    engine: ReconciliationEngine = field(default_factory=ReconciliationEngine.default)
    _snapshot: tuple[QuoteLine, ...] | None = field(default=None, init=False, repr=False)

    # Reads ---------------------------------------------------------------------

    def quote(self) -> Quote | None:
        return asyncio.run(self.source.fetch_quote(self.quote_id))

    def quote_lines(self) -> tuple[QuoteLine, ...]:
        return asyncio.run(self._current_lines())

    def refresh(self) -> tuple[QuoteLine, ...]:
        """Re-fetch the authoritative quote lines and signal the refresh."""

        return asyncio.run(self._refresh())

    def product_summary(self) -> list[ProductSummary]:
        return summarize_products(self.quote_lines())

    # Actions -------------------------------------------------------------------

    def save_changes(self, edits: Iterable[DraftEdit]) -> ActionResult:
        """Reconcile ``edits`` against the current lines and persist the result."""

        return asyncio.run(self._save_changes(tuple(edits)))

    def cancel_selected(self, selected_ids: Sequence[LineId]) -> ActionResult:
        if not selected_ids:
            self.notifier.notify(Severity.WARNING, "Select at least one quote line to cancel.")
            return ActionResult(status=ActionStatus.SKIPPED)
        return asyncio.run(self._cancel_selected(selected_ids))

    def undo_amendments(self, selected_ids: Sequence[LineId]) -> ActionResult:
        if not selected_ids:
            self.notifier.notify(Severity.WARNING, "Select at least one amendment to undo.")
            return ActionResult(status=ActionStatus.SKIPPED)
        return asyncio.run(self._undo_amendments(selected_ids))

    def export_csv(self, path: Path) -> ExportResult:
        lines = self.quote_lines()
        if not lines:
            self.notifier.notify(Severity.WARNING, "There are no quote lines to export.")
            return ExportResult(path=None)
        path.write_text(render_quote_lines_csv(lines) + "\n", encoding="utf-8")
        log.info("Exported %s quote lines to %s", len(lines), path)
        return ExportResult(path=path, rows=len(lines))

    # Internals -----------------------------------------------------------------

    async def _current_lines(self) -> tuple[QuoteLine, ...]:
        if self._snapshot is None:
            self._snapshot = tuple(await self.source.fetch_quote_lines(self.quote_id))
        return self._snapshot

    async def _refresh(self) -> tuple[QuoteLine, ...]:
        self._snapshot = tuple(await self.source.fetch_quote_lines(self.quote_id))
        if self.on_refresh is not None:
            self.on_refresh(self._snapshot)
        return self._snapshot

    async def _save_changes(self, edits: Sequence[DraftEdit]) -> ActionResult:
        lines = await self._current_lines()
        plan = self.engine.reconcile(edits, lines)
        log.info(
            "Saving quote %s: %s edits, %s amendments planned",
            self.quote_id,
            len(edits),
            len(plan.new_amendments),
        )
        return await self._apply_reconciliation(
            plan,
            success="Quote lines saved.",
            nothing_to_do="No changes to save.",
            failure="Failed to save changes",
        )

    async def _cancel_selected(self, selected_ids: Sequence[LineId]) -> ActionResult:
        lines = await self._current_lines()
        plan = plan_cancellation(selected_ids, lines)
        log.info(
            "Cancelling quote %s: %s selected, %s cancellations planned",
            self.quote_id,
            len(selected_ids),
            len(plan.new_amendments),
        )
        return await self._apply_reconciliation(
            plan,
            success="Selected quote lines cancelled.",
            nothing_to_do="Selected quote lines are already cancelled.",
            failure="Failed to cancel quote lines",
        )

    async def _undo_amendments(self, selected_ids: Sequence[LineId]) -> ActionResult:
        lines = await self._current_lines()
        plan = plan_undo(selected_ids, lines)
        log.info(
            "Undoing amendments on quote %s: %s selected, %s undoable",
            self.quote_id,
            len(selected_ids),
            len(plan.retracted_ids),
        )
        if plan.is_empty:
            self.notifier.notify(Severity.SUCCESS, "No amendments to undo.")
            return ActionResult(status=ActionStatus.SUCCEEDED)
        outcome = await self._submit(self._undo_operations(plan))
        return await self._finish(
            outcome,
            result=ActionResult(
                status=ActionStatus.SUCCEEDED,
                updated=len(plan.restorations),
                deleted=len(plan.retracted_ids),
            ),
            success="Amendments undone.",
            failure="Failed to undo amendments",
        )

    async def _apply_reconciliation(
        self,
        plan: ReconciliationPlan,
        *,
        success: str,
        nothing_to_do: str,
        failure: str,
    ) -> ActionResult:
        if plan.is_empty:
            self.notifier.notify(Severity.SUCCESS, nothing_to_do)
            return ActionResult(status=ActionStatus.SUCCEEDED)
        outcome = await self._submit(self._reconciliation_operations(plan))
        return await self._finish(
            outcome,
            result=ActionResult(
                status=ActionStatus.SUCCEEDED,
                updated=len(plan.supersession_updates),
                inserted=len(plan.new_amendments),
                inserted_ids=tuple(outcome.inserted_ids),
            ),
            success=success,
            failure=failure,
        )

    def _reconciliation_operations(self, plan: ReconciliationPlan) -> list[Awaitable[object]]:
        return [
            *(self.gateway.update_quote_line(update) for update in plan.supersession_updates),
            *(self.gateway.insert_quote_line(record) for record in plan.new_amendments),
        ]

    def _undo_operations(self, plan: UndoPlan) -> list[Awaitable[object]]:
        return [
            *(self.gateway.update_quote_line(update) for update in plan.restorations),
            *(self.gateway.delete_quote_line(line_id) for line_id in plan.retracted_ids),
        ]

    async def _submit(self, operations: Sequence[Awaitable[object]]) -> _BatchOutcome:
        """Run all operations concurrently and wait until every one has settled."""

        outcomes = await asyncio.gather(*operations, return_exceptions=True)
        batch = _BatchOutcome()
        for value in outcomes:
            if isinstance(value, Exception):
                batch.errors.append(value)
            elif isinstance(value, BaseException):
                raise value
            elif isinstance(value, str):
                batch.inserted_ids.append(value)
        return batch

    async def _finish(
        self,
        outcome: _BatchOutcome,
        *,
        result: ActionResult,
        success: str,
        failure: str,
    ) -> ActionResult:
        if outcome.errors:
            log.error(
                "%s on quote %s: %s of %s operations rejected",
                failure,
                self.quote_id,
                len(outcome.errors),
                result.updated + result.inserted + result.deleted,
            )
            # Some operations may have landed; re-read before the next action.
            self._snapshot = None
            self.notifier.notify(Severity.ERROR, f"{failure}: {outcome.errors[0]}")
            return ActionResult(status=ActionStatus.FAILED, errors=tuple(outcome.errors))
        await self._refresh()
        self.notifier.notify(Severity.SUCCESS, success)
        return result
