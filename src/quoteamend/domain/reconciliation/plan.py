"""Plan types handed from the planners to the persistence collaborators.

A plan is the contract between:
- the pure planning stages (merge, classify, cancel, undo)
- the application services that submit operations and notify the operator

Keeping it explicit means the planners can be tested without any gateway.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quoteamend.domain.model import LineId

    from .contracts import AmendmentRecord, RestorationUpdate, SupersessionUpdate


@dataclass(slots=True)
class ReconciliationPlan:
    """Zeroing updates and new amendment lines, in draft order."""

    supersession_updates: list[SupersessionUpdate] = field(
        default_factory=list["SupersessionUpdate"]
    )
    new_amendments: list[AmendmentRecord] = field(default_factory=list["AmendmentRecord"])

    def add(self, update: SupersessionUpdate, amendment: AmendmentRecord) -> None:
        self.supersession_updates.append(update)
        self.new_amendments.append(amendment)

    @property
    def is_empty(self) -> bool:
        return not self.supersession_updates and not self.new_amendments

    @property
    def operation_count(self) -> int:
        return len(self.supersession_updates) + len(self.new_amendments)


@dataclass(slots=True)
class UndoPlan:
    """Quantity restorations for predecessors and the amendment lines to retract."""

    restorations: list[RestorationUpdate] = field(default_factory=list["RestorationUpdate"])
    retracted_ids: list[LineId] = field(default_factory=list["LineId"])

    def add(self, restoration: RestorationUpdate, retracted_id: LineId) -> None:
        self.restorations.append(restoration)
        self.retracted_ids.append(retracted_id)

    @property
    def is_empty(self) -> bool:
        return not self.restorations and not self.retracted_ids

    @property
    def operation_count(self) -> int:
        return len(self.restorations) + len(self.retracted_ids)
