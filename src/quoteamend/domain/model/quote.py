"""Quote and quote-line entities.

Both classes are plain dataclasses; the SQLAlchemy adapter maps them imperatively,
so nothing here knows about sessions or tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .primitives import ZERO

if TYPE_CHECKING:
    from .primitives import LineId, Money, Quantity


@dataclass(eq=False, kw_only=True)
class Quote:
    """Commercial proposal header."""

    id: str
    name: str
    fulfillment_frequency: str | None = None


@dataclass(eq=False, kw_only=True)
class QuoteLine:
    """A single priced product line on a quote.

    ``amended_from_id`` links an amendment line to the line it superseded. The
    ``original_*`` snapshots are only recorded on amendment lines and are what an
    undo restores.
    """

    id: LineId
    quote_id: str
    product_id: str
    product_code: str
    quantity: Quantity
    net_price: Money
    order_account_id: str | None = None
    amend_type: str | None = None
    amended_from_id: LineId | None = None
    name: str | None = None
    product_name: str | None = None
    order_account_name: str | None = None
    original_quantity: Quantity | None = None
    original_net_price: Money | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Quote line id must not be empty")
        if self.quantity < ZERO:
            raise ValueError(f"Quote line {self.id} has a negative quantity")
        if self.net_price < ZERO:
            raise ValueError(f"Quote line {self.id} has a negative net price")

    @property
    def is_amendment(self) -> bool:
        return self.amended_from_id is not None

    @property
    def is_live(self) -> bool:
        """Whether the line still represents live quantity (not zeroed out)."""
        return self.quantity != ZERO

    @property
    def display_name(self) -> str:
        return self.name or self.id
