"""Plan the undo of selected amendment lines.

Undoing an amendment restores the superseded predecessor's quantity from the
snapshot stored on the amendment, then retracts the amendment line. Only the head
of a provenance chain can be undone: an amendment that was itself amended later
is left alone, otherwise the later line would point at a retracted record.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .contracts import RestorationUpdate, index_lines
from .plan import UndoPlan

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quoteamend.domain.model import LineId, QuoteLine

log = getLogger(__name__)


def plan_undo(selected_ids: Iterable[LineId], lines: Iterable[QuoteLine]) -> UndoPlan:
    lines_by_id = index_lines(lines)
    superseded_ids = {
        line.amended_from_id for line in lines_by_id.values() if line.amended_from_id
    }

    plan = UndoPlan()
    for line_id in dict.fromkeys(selected_ids):
        line = lines_by_id.get(line_id)
        if line is None or line.amended_from_id is None:
            log.debug("Skipping undo of %s: not an amendment line", line_id)
            continue
        if line_id in superseded_ids:
            log.debug("Skipping undo of %s: superseded by a later amendment", line_id)
            continue
        if line.amended_from_id not in lines_by_id:
            log.debug("Skipping undo of %s: predecessor %s missing", line_id, line.amended_from_id)
            continue
        if line.original_quantity is None:
            log.debug("Skipping undo of %s: no original quantity recorded", line_id)
            continue
        plan.add(
            RestorationUpdate(id=line.amended_from_id, quantity=line.original_quantity),
            line.id,
        )
    return plan
