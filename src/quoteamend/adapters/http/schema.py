"""Pydantic models describing the record service JSON payloads."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RecordServiceModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class QuotePayload(RecordServiceModel):
    id: str
    name: str
    fulfillment_frequency: str | None = Field(default=None, alias="fulfillmentFrequency")


class QuoteLinePayload(RecordServiceModel):
    id: str = Field(min_length=1)
    quote_id: str = Field(alias="quoteId")
    product_id: str = Field(alias="productId")
    product_code: str = Field(alias="productCode")
    quantity: Decimal = Field(ge=0)
    net_price: Decimal = Field(alias="netPrice", ge=0)
    order_account_id: str | None = Field(default=None, alias="orderAccountId")
    amend_type: str | None = Field(default=None, alias="amendType")
    amended_from_id: str | None = Field(default=None, alias="amendedFromId")
    name: str | None = None
    product_name: str | None = Field(default=None, alias="productName")
    order_account_name: str | None = Field(default=None, alias="orderAccountName")
    original_quantity: Decimal | None = Field(default=None, alias="originalQuantity")
    original_net_price: Decimal | None = Field(default=None, alias="originalNetPrice")

    _normalize_optional_ids = field_validator(
        "order_account_id", "amend_type", "amended_from_id", mode="before"
    )(_blank_to_none)


class InsertedPayload(RecordServiceModel):
    id: str = Field(min_length=1)
