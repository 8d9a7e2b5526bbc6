"""Plan the cancellation of selected quote lines."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from quoteamend.domain.model import ZERO, AmendType

from .contracts import AmendmentRecord, SupersessionUpdate, index_lines
from .plan import ReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quoteamend.domain.model import LineId, QuoteLine

log = getLogger(__name__)


def plan_cancellation(
    selected_ids: Iterable[LineId],
    lines: Iterable[QuoteLine],
) -> ReconciliationPlan:
    """Zero each selected live line and record a zero-quantity "Cancel Line" amendment.

    Lines that are missing or already at zero quantity are skipped, so cancelling
    the same selection twice plans nothing the second time.
    """

    lines_by_id = index_lines(lines)
    plan = ReconciliationPlan()
    for line_id in dict.fromkeys(selected_ids):
        line = lines_by_id.get(line_id)
        if line is None:
            log.debug("Skipping cancellation of unknown quote line %s", line_id)
            continue
        if not line.is_live:
            log.debug("Skipping cancellation of %s: quantity already zero", line_id)
            continue
        plan.add(
            SupersessionUpdate(id=line.id),
            AmendmentRecord.from_original(
                line,
                quantity=ZERO,
                net_price=line.net_price,
                amend_type=AmendType.CANCEL_LINE,
            ),
        )
    return plan
