"""Shared reconciliation contract components.

This module holds only:
- the draft edit inputs and the merged drafts derived from them
- the persistence operations produced by the planners
- ``*ById`` mapping aliases
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from quoteamend.domain.model import UNSET, ZERO, QuoteLine, is_set, to_decimal

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quoteamend.domain.model import AmendType, LineId, Maybe, Money, Quantity


@dataclass(slots=True, frozen=True, kw_only=True)
class DraftEdit:
    """One edit record captured by the editing surface.

    A field left as ``UNSET`` was not touched by this record. Set fields are
    stored as ``Decimal`` whatever numeric type the caller passed.
    """

    id: LineId
    quantity: Maybe[Quantity] = UNSET
    net_price: Maybe[Money] = UNSET

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Draft edit must reference a quote line id")
        for name in ("quantity", "net_price"):
            value = getattr(self, name)
            if is_set(value):
                object.__setattr__(self, name, to_decimal(value))


@dataclass(slots=True, kw_only=True)
class MergedDraft:
    """Union of all draft edits sharing one line id, last write wins per field."""

    id: LineId
    quantity: Maybe[Quantity] = UNSET
    net_price: Maybe[Money] = UNSET

    def absorb(self, edit: DraftEdit) -> None:
        if is_set(edit.quantity):
            self.quantity = edit.quantity
        if is_set(edit.net_price):
            self.net_price = edit.net_price


type DraftsById = dict[LineId, MergedDraft]
type LinesById = dict[LineId, QuoteLine]


def index_lines(lines: Iterable[QuoteLine]) -> LinesById:
    return {line.id: line for line in lines}


@dataclass(slots=True, frozen=True, kw_only=True)
class QuantityUpdate:
    """Set the quantity of an existing line."""

    id: LineId
    quantity: Decimal


@dataclass(slots=True, frozen=True, kw_only=True)
class SupersessionUpdate(QuantityUpdate):
    """Zero out a line that has been replaced by an amendment."""

    quantity: Decimal = ZERO


@dataclass(slots=True, frozen=True, kw_only=True)
class RestorationUpdate(QuantityUpdate):
    """Give a superseded line back the quantity it had before its amendment."""


@dataclass(slots=True, frozen=True, kw_only=True)
class AmendmentRecord:
    """New quote line describing an amendment of ``amended_from_id``.

    Identity is assigned by whoever persists the record.
    """

    quote_id: str
    product_id: str
    product_code: str
    order_account_id: str | None
    quantity: Decimal
    net_price: Decimal
    amended_from_id: LineId
    amend_type: AmendType
    original_quantity: Decimal
    original_net_price: Decimal
    product_name: str | None = None
    order_account_name: str | None = None

    @classmethod
    def from_original(
        cls,
        original: QuoteLine,
        *,
        quantity: Decimal,
        net_price: Decimal,
        amend_type: AmendType,
    ) -> AmendmentRecord:
        return cls(
            quote_id=original.quote_id,
            product_id=original.product_id,
            product_code=original.product_code,
            order_account_id=original.order_account_id,
            quantity=quantity,
            net_price=net_price,
            amended_from_id=original.id,
            amend_type=amend_type,
            original_quantity=original.quantity,
            original_net_price=original.net_price,
            product_name=original.product_name,
            order_account_name=original.order_account_name,
        )

    def materialize(self, *, line_id: LineId, name: str | None = None) -> QuoteLine:
        """Return the quote line this record becomes once persisted as ``line_id``."""

        return QuoteLine(
            id=line_id,
            quote_id=self.quote_id,
            product_id=self.product_id,
            product_code=self.product_code,
            order_account_id=self.order_account_id,
            quantity=self.quantity,
            net_price=self.net_price,
            amend_type=str(self.amend_type),
            amended_from_id=self.amended_from_id,
            name=name,
            product_name=self.product_name,
            order_account_name=self.order_account_name,
            original_quantity=self.original_quantity,
            original_net_price=self.original_net_price,
        )
