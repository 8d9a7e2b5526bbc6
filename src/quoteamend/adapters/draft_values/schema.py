"""Pydantic model for the draft-values payload sent by the editing surface.

The surface reports one record per edited cell, keyed with the record service's
field names. A key that is absent means the cell was not touched; an explicit
``null`` is rejected because it cannot be told apart from a cleared value.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DraftValuePayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str = Field(alias="Id", min_length=1)
    quantity: Decimal | None = Field(default=None, alias="SBQQ_Quantity__c", ge=0)
    net_price: Decimal | None = Field(default=None, alias="SBQQ_NetPrice__c", ge=0)

    @field_validator("quantity", "net_price", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("draft values must not be null; omit the field instead")
        if isinstance(value, bool):
            raise ValueError("draft values must be numeric")
        return value

    @field_validator("id", mode="before")
    @classmethod
    def _strip_id(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value
