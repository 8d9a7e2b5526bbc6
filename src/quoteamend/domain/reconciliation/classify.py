"""Compare merged drafts with their originals and build amendment operations.

Responsibilities of this stage:
- resolve effective values (draft value if touched, else the original's)
- detect which of quantity/price changed, with exact decimal equality
- classify the change and emit one supersession + one amendment per changed line

Drafts referencing unknown lines and drafts that change nothing are skipped;
neither is an error.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from quoteamend.domain.model import UNSET, AmendType

from .contracts import AmendmentRecord, SupersessionUpdate, index_lines
from .plan import ReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Iterable
    from decimal import Decimal

    from quoteamend.domain.model import QuoteLine

    from .contracts import DraftsById, MergedDraft

log = getLogger(__name__)


def classify_change(*, quantity_changed: bool, price_changed: bool) -> AmendType:
    if quantity_changed and price_changed:
        return AmendType.CHANGE_BOTH
    if quantity_changed:
        return AmendType.CHANGE_QUANTITY
    if price_changed:
        return AmendType.CHANGE_PRICE
    raise ValueError("Cannot classify an amendment without any change")


def resolve_values(draft: MergedDraft, original: QuoteLine) -> tuple[Decimal, Decimal]:
    """Return ``(quantity, net_price)`` after applying ``draft`` to ``original``."""

    quantity = original.quantity if draft.quantity is UNSET else draft.quantity
    net_price = original.net_price if draft.net_price is UNSET else draft.net_price
    return quantity, net_price


def build_amendments(drafts: DraftsById, originals: Iterable[QuoteLine]) -> ReconciliationPlan:
    """Turn merged drafts into supersession updates and new amendment lines."""

    lines_by_id = index_lines(originals)
    plan = ReconciliationPlan()
    for line_id, draft in drafts.items():
        original = lines_by_id.get(line_id)
        if original is None:
            log.debug("Skipping draft for unknown quote line %s", line_id)
            continue

        quantity, net_price = resolve_values(draft, original)
        quantity_changed = quantity != original.quantity
        price_changed = net_price != original.net_price
        if not quantity_changed and not price_changed:
            log.debug("Skipping draft for %s: values match the original", line_id)
            continue

        amend_type = classify_change(
            quantity_changed=quantity_changed,
            price_changed=price_changed,
        )
        plan.add(
            SupersessionUpdate(id=original.id),
            AmendmentRecord.from_original(
                original,
                quantity=quantity,
                net_price=net_price,
                amend_type=amend_type,
            ),
        )

    log.debug(
        "Planned %s amendments from %s drafts",
        len(plan.new_amendments),
        len(drafts),
    )
    return plan
