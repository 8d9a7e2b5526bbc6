"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class AmendType(StrEnum):
    """Classification label stored on amendment lines."""

    CHANGE_QUANTITY = "Change Quantity"
    CHANGE_PRICE = "Change Price"
    CHANGE_BOTH = "Change Both"
    CANCEL_LINE = "Cancel Line"


class Severity(StrEnum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
