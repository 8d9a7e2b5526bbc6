"""HTTP client for the remote quote-line record service.

Each operation opens its own ``httpx.AsyncClient`` so that calls submitted
concurrently by the application services stay independent of one another. There
is no retry layer: a rejected call surfaces as ``GatewayError``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, cast

import httpx

from quoteamend.config import RecordServiceConfig, get_record_service_config
from quoteamend.domain.errors import GatewayError

from .schema import InsertedPayload
from .translator import amendment_body, parse_quote, parse_quote_line, quantity_update_body

if TYPE_CHECKING:
    from quoteamend.domain.model import LineId, Quote, QuoteLine
    from quoteamend.domain.reconciliation import AmendmentRecord, QuantityUpdate

log = getLogger(__name__)

ClientFactory = Callable[[RecordServiceConfig], httpx.AsyncClient]


def _default_client_factory(config: RecordServiceConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=config.base_url,
        headers=config.headers,
        timeout=config.timeout_seconds,
    )


def _raise_for_status(response: httpx.Response, *, operation: str, line_id: str | None) -> None:
    if response.is_success:
        return
    raise GatewayError(
        f"{operation} rejected with HTTP {response.status_code}: {response.text[:200]}",
        operation=operation,
        line_id=line_id,
    )


async def _send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    operation: str,
    line_id: str | None = None,
    json: object | None = None,
) -> httpx.Response:
    try:
        response = await client.request(method, url, json=json)
    except httpx.HTTPError as exc:
        raise GatewayError(
            f"{operation} failed: {exc}",
            operation=operation,
            line_id=line_id,
        ) from exc
    _raise_for_status(response, operation=operation, line_id=line_id)
    return response


@dataclass(slots=True)
class HttpQuoteLineSource:
    config: RecordServiceConfig = field(default_factory=get_record_service_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    async def fetch_quote(self, quote_id: str) -> Quote | None:
        async with self.client_factory(self.config) as client:
            try:
                response = await client.get(f"/quotes/{quote_id}")
            except httpx.HTTPError as exc:
                raise GatewayError(f"fetch quote failed: {exc}", operation="fetch") from exc
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            _raise_for_status(response, operation="fetch", line_id=None)
            return parse_quote(response.json())

    async def fetch_quote_lines(self, quote_id: str) -> list[QuoteLine]:
        async with self.client_factory(self.config) as client:
            response = await _send(client, "GET", f"/quotes/{quote_id}/lines", operation="fetch")
        payload = response.json()
        if not isinstance(payload, list):
            raise GatewayError("Expected a list of quote lines", operation="fetch")
        items = cast(list[object], payload)
        lines = [parse_quote_line(item) for item in items]
        log.debug("Fetched %s quote lines for quote %s", len(lines), quote_id)
        return lines


@dataclass(slots=True)
class HttpQuoteLineGateway:
    config: RecordServiceConfig = field(default_factory=get_record_service_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    async def update_quote_line(self, update: QuantityUpdate) -> None:
        async with self.client_factory(self.config) as client:
            await _send(
                client,
                "PATCH",
                f"/quote-lines/{update.id}",
                operation="update",
                line_id=update.id,
                json=quantity_update_body(update),
            )

    async def insert_quote_line(self, record: AmendmentRecord) -> LineId:
        async with self.client_factory(self.config) as client:
            response = await _send(
                client,
                "POST",
                "/quote-lines",
                operation="insert",
                line_id=record.amended_from_id,
                json=amendment_body(record),
            )
        inserted = InsertedPayload.model_validate(response.json())
        log.debug("Inserted amendment %s of quote line %s", inserted.id, record.amended_from_id)
        return inserted.id

    async def delete_quote_line(self, line_id: LineId) -> None:
        async with self.client_factory(self.config) as client:
            await _send(
                client,
                "DELETE",
                f"/quote-lines/{line_id}",
                operation="delete",
                line_id=line_id,
            )
