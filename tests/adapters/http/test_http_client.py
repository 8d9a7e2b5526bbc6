from __future__ import annotations

import asyncio
import json
from collections.abc import Callable  # noqa: TC003
from decimal import Decimal

import httpx
import pytest

from quoteamend.adapters.http import (
    HttpQuoteLineGateway,
    HttpQuoteLineSource,
    parse_quote_line,
)
from quoteamend.config import RecordServiceConfig
from quoteamend.domain.errors import GatewayError
from quoteamend.domain.model import AmendType
from quoteamend.domain.reconciliation import AmendmentRecord, SupersessionUpdate
from tests.helpers.quote_lines import make_quote_line

CONFIG = RecordServiceConfig(base_url="https://records.test/api", api_token="secret")


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[RecordServiceConfig], httpx.AsyncClient]:
    def factory(config: RecordServiceConfig) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def line_payload() -> dict[str, object]:
    return {
        "id": "a1",
        "quoteId": "q1",
        "productId": "p1",
        "productCode": "SKU-1",
        "quantity": "2",
        "netPrice": 100,
        "orderAccountId": "",
        "amendType": None,
        "name": "QL-0001",
        "productName": "Widget",
        "unknownField": "ignored",
    }


def test_parse_quote_line_maps_aliases(line_payload: dict[str, object]) -> None:
    line = parse_quote_line(line_payload)

    assert line.id == "a1"
    assert line.quote_id == "q1"
    assert line.quantity == Decimal(2)
    assert line.net_price == Decimal(100)
    assert line.order_account_id is None
    assert line.product_name == "Widget"


def test_parse_quote_line_rejects_negative_quantity(line_payload: dict[str, object]) -> None:
    line_payload["quantity"] = -1

    with pytest.raises(ValueError):
        parse_quote_line(line_payload)


def test_source_fetches_lines_with_auth_header(line_payload: dict[str, object]) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[line_payload])

    source = HttpQuoteLineSource(config=CONFIG, client_factory=_make_client_factory(handler))

    lines = asyncio.run(source.fetch_quote_lines("q1"))

    assert [line.id for line in lines] == ["a1"]
    assert seen[0].url.path == "/api/quotes/q1/lines"
    assert seen[0].headers["Authorization"] == "Bearer secret"


def test_source_returns_none_for_unknown_quote() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    source = HttpQuoteLineSource(config=CONFIG, client_factory=_make_client_factory(handler))

    assert asyncio.run(source.fetch_quote("zz")) is None


def test_source_parses_quote_header() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"id": "q1", "name": "Q-00001", "fulfillmentFrequency": "Monthly"},
        )

    source = HttpQuoteLineSource(config=CONFIG, client_factory=_make_client_factory(handler))

    quote = asyncio.run(source.fetch_quote("q1"))

    assert quote is not None
    assert quote.fulfillment_frequency == "Monthly"


def test_source_rejects_non_list_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"lines": []})

    source = HttpQuoteLineSource(config=CONFIG, client_factory=_make_client_factory(handler))

    with pytest.raises(GatewayError):
        asyncio.run(source.fetch_quote_lines("q1"))


def test_gateway_patches_quantity() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    gateway = HttpQuoteLineGateway(config=CONFIG, client_factory=_make_client_factory(handler))

    asyncio.run(gateway.update_quote_line(SupersessionUpdate(id="a1")))

    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/api/quote-lines/a1"
    assert json.loads(seen[0].content) == {"quantity": "0"}


def test_gateway_posts_amendment_and_returns_new_id() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": "a2"})

    gateway = HttpQuoteLineGateway(config=CONFIG, client_factory=_make_client_factory(handler))
    record = AmendmentRecord.from_original(
        make_quote_line("a1", quantity=2, net_price="100.00"),
        quantity=Decimal(3),
        net_price=Decimal("100.00"),
        amend_type=AmendType.CHANGE_QUANTITY,
    )

    new_id = asyncio.run(gateway.insert_quote_line(record))

    assert new_id == "a2"
    body = json.loads(seen[0].content)
    assert body["amendedFromId"] == "a1"
    assert body["amendType"] == "Change Quantity"
    assert body["quantity"] == "3"
    assert body["netPrice"] == "100.00"
    assert body["originalQuantity"] == "2"


def test_gateway_deletes_line() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    gateway = HttpQuoteLineGateway(config=CONFIG, client_factory=_make_client_factory(handler))

    asyncio.run(gateway.delete_quote_line("a2"))

    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/api/quote-lines/a2"


def test_gateway_raises_on_rejected_call() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, text="quantity locked")

    gateway = HttpQuoteLineGateway(config=CONFIG, client_factory=_make_client_factory(handler))

    with pytest.raises(GatewayError) as excinfo:
        asyncio.run(gateway.update_quote_line(SupersessionUpdate(id="a1")))

    assert excinfo.value.operation == "update"
    assert excinfo.value.line_id == "a1"
    assert "422" in str(excinfo.value)


def test_gateway_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = HttpQuoteLineGateway(config=CONFIG, client_factory=_make_client_factory(handler))

    with pytest.raises(GatewayError):
        asyncio.run(gateway.delete_quote_line("a1"))
