"""Adapter for the remote quote-line record service."""

from __future__ import annotations

from .client import HttpQuoteLineGateway, HttpQuoteLineSource
from .schema import InsertedPayload, QuoteLinePayload, QuotePayload
from .translator import amendment_body, parse_quote, parse_quote_line, quantity_update_body

__all__ = [
    "HttpQuoteLineGateway",
    "HttpQuoteLineSource",
    "InsertedPayload",
    "QuoteLinePayload",
    "QuotePayload",
    "amendment_body",
    "parse_quote",
    "parse_quote_line",
    "quantity_update_body",
]
