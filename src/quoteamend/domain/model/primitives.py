"""Domain primitives: scalar aliases, the ``UNSET`` marker and decimal coercion.

Money and quantities are fixed-point ``Decimal`` values so that change detection
compares exactly (``Decimal("2") == Decimal("2.00")``) without float noise.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Final, Literal
from uuid import uuid4

type LineId = str
type Money = Decimal
type Quantity = Decimal

ZERO: Final[Decimal] = Decimal(0)


class Unset(Enum):
    """Marker for an optional field that was not touched.

    Kept distinct from ``None`` and from zero: a draft setting a quantity to ``0``
    is a real edit, a draft without a quantity is not.
    """

    UNSET = "UNSET"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset.UNSET

type Maybe[T] = T | Literal[Unset.UNSET]


def is_set[T](value: Maybe[T]) -> bool:
    return value is not UNSET


def new_line_id() -> LineId:
    return uuid4().hex


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to ``Decimal``.

    Floats go through ``str`` so that ``120.1`` becomes ``Decimal("120.1")`` rather
    than its binary expansion.
    """

    if isinstance(value, bool):
        raise TypeError("Booleans are not numeric amounts")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Numeric value must be finite: {value!r}")
    return result
