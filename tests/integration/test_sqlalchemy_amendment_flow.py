from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from quoteamend.adapters.sqlalchemy.unit_of_work import is_started, shutdown
from quoteamend.app import build_local_service, build_remote_service
from quoteamend.config import RecordServiceConfig
from quoteamend.domain.model import AmendType, Severity
from quoteamend.domain.reconciliation import DraftEdit
from tests.helpers.quote_lines import RecordingNotifier, RecordingRefresh

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from quoteamend.adapters.sqlalchemy import SqlAlchemyQuoteLineUnitOfWork

    UowFactory = Callable[[], SqlAlchemyQuoteLineUnitOfWork]


def test_save_cancel_undo_round_trip_on_sqlite(
    seeded_unit_of_work: UowFactory,
    tmp_path: Path,
) -> None:
    notifier = RecordingNotifier()
    refresh = RecordingRefresh()
    service = build_local_service(
        "q1",
        unit_of_work_factory=seeded_unit_of_work,
        notifier=notifier,
        on_refresh=refresh,
    )

    saved = service.save_changes(
        [
            DraftEdit(id="a1", quantity=Decimal(5)),
            DraftEdit(id="a1", net_price=Decimal(120)),
        ]
    )
    assert saved.succeeded
    [amendment_id] = saved.inserted_ids

    lines = {line.id: line for line in service.quote_lines()}
    assert lines["a1"].quantity == Decimal(0)
    assert lines[amendment_id].amend_type == AmendType.CHANGE_BOTH
    assert lines[amendment_id].name == "QL-0003"
    assert lines[amendment_id].net_price == Decimal(120)

    cancelled = service.cancel_selected(["b1"])
    assert cancelled.succeeded
    assert {line.id: line.quantity for line in service.quote_lines()}["b1"] == Decimal(0)

    undone = service.undo_amendments([amendment_id])
    assert undone.succeeded
    lines = {line.id: line for line in service.quote_lines()}
    assert amendment_id not in lines
    assert lines["a1"].quantity == Decimal(2)

    export = service.export_csv(tmp_path / "QuoteLines.csv")
    assert export.rows == len(lines)
    assert len(refresh.calls) == 3
    assert notifier.severities() == [Severity.SUCCESS] * 3


def test_local_save_against_missing_line_is_a_no_op(seeded_unit_of_work: UowFactory) -> None:
    notifier = RecordingNotifier()
    service = build_local_service("q1", unit_of_work_factory=seeded_unit_of_work, notifier=notifier)

    result = service.save_changes([DraftEdit(id="missing", quantity=Decimal(1))])

    assert result.succeeded
    assert notifier.messages == [(Severity.SUCCESS, "No changes to save.")]


def test_remote_service_uses_given_config() -> None:
    config = RecordServiceConfig(base_url="https://records.test", api_token="t")

    service = build_remote_service("q1", config=config, notifier=RecordingNotifier())

    assert service.quote_id == "q1"
    assert service.source.config is config  # type: ignore[attr-defined]
    assert service.gateway.config is config  # type: ignore[attr-defined]


def test_local_service_starts_the_store_on_demand() -> None:
    shutdown()
    try:
        service = build_local_service("q1", database_uri="sqlite+pysqlite:///:memory:")

        assert is_started()
        assert service.quote() is None
        assert service.quote_lines() == ()
    finally:
        shutdown()
