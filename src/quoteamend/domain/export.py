"""Tabular views over a quote-line set: CSV snapshot and per-product totals."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Final

from quoteamend.domain.model import ZERO
from quoteamend.domain.reconciliation import index_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from quoteamend.domain.model import QuoteLine

CSV_HEADERS: Final[tuple[str, ...]] = (
    "QuoteLine Number",
    "Product Code",
    "Order Account Name",
    "Quantity",
    "Net Price",
    "Amend Type",
    "Amended From",
)
CSV_FILENAME: Final[str] = "QuoteLines.csv"


def _format_decimal(value: Decimal | None) -> str:
    if value is None:
        return ""
    return format(value.normalize(), "f")


def quote_line_rows(lines: Sequence[QuoteLine]) -> list[tuple[str, ...]]:
    """Return one display row per line, in ``CSV_HEADERS`` order."""

    lines_by_id = index_lines(lines)
    rows: list[tuple[str, ...]] = []
    for line in lines:
        amended_from = ""
        if line.amended_from_id is not None:
            predecessor = lines_by_id.get(line.amended_from_id)
            amended_from = predecessor.display_name if predecessor else line.amended_from_id
        rows.append(
            (
                line.name or "",
                line.product_code or "",
                line.order_account_name or "",
                _format_decimal(line.quantity),
                _format_decimal(line.net_price),
                line.amend_type or "",
                amended_from,
            )
        )
    return rows


def render_quote_lines_csv(lines: Sequence[QuoteLine]) -> str:
    """Render ``lines`` as CSV: header row first, every field double-quoted."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(quote_line_rows(lines))
    return buffer.getvalue().removesuffix("\n")


@dataclass(slots=True, frozen=True, kw_only=True)
class ProductSummary:
    """Total live quantity of one product across a quote."""

    product_id: str
    product_code: str
    product_name: str | None
    total_quantity: Decimal


def summarize_products(lines: Iterable[QuoteLine]) -> list[ProductSummary]:
    """Sum quantities per product, in the order products first appear.

    Superseded lines carry zero quantity, so the totals reflect live quantity only.
    """

    totals: dict[str, Decimal] = {}
    first_seen: dict[str, QuoteLine] = {}
    for line in lines:
        totals[line.product_id] = totals.get(line.product_id, ZERO) + line.quantity
        first_seen.setdefault(line.product_id, line)
    return [
        ProductSummary(
            product_id=product_id,
            product_code=first_seen[product_id].product_code,
            product_name=first_seen[product_id].product_name,
            total_quantity=total,
        )
        for product_id, total in totals.items()
    ]
