"""Domain model for quotes and their line items."""

from __future__ import annotations

from .enums import AmendType, Severity
from .primitives import (
    UNSET,
    ZERO,
    LineId,
    Maybe,
    Money,
    Quantity,
    is_set,
    new_line_id,
    to_decimal,
)
from .quote import Quote, QuoteLine

__all__ = [
    "UNSET",
    "ZERO",
    "AmendType",
    "LineId",
    "Maybe",
    "Money",
    "Quantity",
    "Quote",
    "QuoteLine",
    "Severity",
    "is_set",
    "new_line_id",
    "to_decimal",
]
