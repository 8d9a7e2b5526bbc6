from __future__ import annotations

from decimal import Decimal

from quoteamend.domain.model import AmendType
from quoteamend.domain.reconciliation import SupersessionUpdate, plan_cancellation
from tests.helpers.quote_lines import make_quote_line


def test_cancel_zeroes_line_and_records_cancel_amendment() -> None:
    line = make_quote_line("a1", quantity=4, net_price=25)

    plan = plan_cancellation(["a1"], [line])

    assert plan.supersession_updates == [SupersessionUpdate(id="a1")]
    [record] = plan.new_amendments
    assert record.amend_type is AmendType.CANCEL_LINE
    assert record.quantity == Decimal(0)
    assert record.net_price == Decimal(25)
    assert record.original_quantity == Decimal(4)
    assert record.amended_from_id == "a1"


def test_cancel_skips_lines_already_at_zero() -> None:
    lines = [make_quote_line("a1", quantity=0), make_quote_line("b1", quantity=1)]

    plan = plan_cancellation(["a1", "b1"], lines)

    assert [update.id for update in plan.supersession_updates] == ["b1"]


def test_cancel_ignores_unknown_and_duplicate_ids() -> None:
    lines = [make_quote_line("a1")]

    plan = plan_cancellation(["a1", "missing", "a1"], lines)

    assert plan.operation_count == 2


def test_cancel_with_nothing_cancellable_is_empty() -> None:
    plan = plan_cancellation(["a1"], [make_quote_line("a1", quantity=0)])

    assert plan.is_empty
