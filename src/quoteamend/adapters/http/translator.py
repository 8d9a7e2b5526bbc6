"""Translate record service payloads to domain entities and back."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quoteamend.domain.model import Quote, QuoteLine

from .schema import QuoteLinePayload, QuotePayload

if TYPE_CHECKING:
    from decimal import Decimal

    from quoteamend.domain.reconciliation import AmendmentRecord, QuantityUpdate


def _decimal_to_json(value: Decimal | None) -> str | None:
    return None if value is None else format(value, "f")


def parse_quote(payload: object) -> Quote:
    validated = QuotePayload.model_validate(payload)
    return Quote(
        id=validated.id,
        name=validated.name,
        fulfillment_frequency=validated.fulfillment_frequency,
    )


def parse_quote_line(payload: object) -> QuoteLine:
    validated = QuoteLinePayload.model_validate(payload)
    return QuoteLine(**validated.model_dump())


def quantity_update_body(update: QuantityUpdate) -> dict[str, object]:
    return {"quantity": _decimal_to_json(update.quantity)}


def amendment_body(record: AmendmentRecord) -> dict[str, object]:
    """Request body for inserting ``record``; money and quantities travel as strings."""

    return {
        "quoteId": record.quote_id,
        "productId": record.product_id,
        "productCode": record.product_code,
        "orderAccountId": record.order_account_id,
        "quantity": _decimal_to_json(record.quantity),
        "netPrice": _decimal_to_json(record.net_price),
        "amendedFromId": record.amended_from_id,
        "amendType": str(record.amend_type),
        "originalQuantity": _decimal_to_json(record.original_quantity),
        "originalNetPrice": _decimal_to_json(record.original_net_price),
    }
