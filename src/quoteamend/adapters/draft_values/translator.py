"""Translate draft-values payloads into reconciliation inputs."""

from __future__ import annotations

import json
from decimal import Decimal
from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import TypeAdapter

from quoteamend.domain.model import UNSET
from quoteamend.domain.reconciliation import DraftEdit

from .schema import DraftValuePayload

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from quoteamend.domain.model import Maybe

log = getLogger(__name__)

_PAYLOAD_LIST = TypeAdapter(list[DraftValuePayload])


def _present[T](payload: DraftValuePayload, name: str, value: T | None) -> Maybe[T]:
    if name not in payload.model_fields_set or value is None:
        return UNSET
    return value


def to_draft_edit(payload: DraftValuePayload) -> DraftEdit:
    return DraftEdit(
        id=payload.id,
        quantity=_present(payload, "quantity", payload.quantity),
        net_price=_present(payload, "net_price", payload.net_price),
    )


def parse_draft_edits(payloads: Iterable[object]) -> list[DraftEdit]:
    """Validate raw draft records and convert them in their original order."""

    validated = _PAYLOAD_LIST.validate_python(list(payloads))
    edits = [to_draft_edit(payload) for payload in validated]
    log.debug("Parsed %s draft edits", len(edits))
    return edits


def load_draft_edits(path: Path) -> list[DraftEdit]:
    """Read a JSON file holding a list of draft records, or one record."""

    raw = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    if isinstance(raw, dict):
        return parse_draft_edits([cast(object, raw)])
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON list of draft values in {path}")
    return parse_draft_edits(cast(list[object], raw))
