from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from quoteamend.domain.model import AmendType
from quoteamend.domain.reconciliation import RestorationUpdate, plan_undo
from tests.helpers.quote_lines import make_quote_line

if TYPE_CHECKING:
    from quoteamend.domain.model import QuoteLine


def _amendment(line_id: str, amended_from: str, *, original_quantity: int | None = 2) -> QuoteLine:
    return make_quote_line(
        line_id,
        quantity=3,
        amended_from_id=amended_from,
        amend_type=AmendType.CHANGE_QUANTITY,
        original_quantity=None if original_quantity is None else Decimal(original_quantity),
        original_net_price=Decimal(100),
    )


def test_undo_restores_predecessor_and_retracts_amendment() -> None:
    lines = [make_quote_line("a1", quantity=0), _amendment("a2", "a1")]

    plan = plan_undo(["a2"], lines)

    assert plan.restorations == [RestorationUpdate(id="a1", quantity=Decimal(2))]
    assert plan.retracted_ids == ["a2"]


def test_undo_skips_lines_that_are_not_amendments() -> None:
    plan = plan_undo(["a1"], [make_quote_line("a1")])

    assert plan.is_empty


def test_undo_only_applies_to_chain_head() -> None:
    lines = [
        make_quote_line("a1", quantity=0),
        _amendment("a2", "a1"),
        _amendment("a3", "a2"),
    ]

    plan = plan_undo(["a2", "a3"], lines)

    assert plan.retracted_ids == ["a3"]
    assert plan.restorations == [RestorationUpdate(id="a2", quantity=Decimal(2))]


def test_undo_skips_amendment_whose_predecessor_is_missing() -> None:
    plan = plan_undo(["a2"], [_amendment("a2", "gone")])

    assert plan.is_empty


def test_undo_skips_amendment_without_original_quantity() -> None:
    lines = [make_quote_line("a1", quantity=0), _amendment("a2", "a1", original_quantity=None)]

    plan = plan_undo(["a2"], lines)

    assert plan.is_empty


def test_undo_deduplicates_selection() -> None:
    lines = [make_quote_line("a1", quantity=0), _amendment("a2", "a1")]

    plan = plan_undo(["a2", "a2"], lines)

    assert plan.operation_count == 2
