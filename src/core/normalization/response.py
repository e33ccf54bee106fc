"""Compose the two leaves over one raw payload."""

from __future__ import annotations

from typing import Any, Iterable

from core.domain.models import ExtractionResult
from core.normalization.arrays import extract_items
from core.normalization.pagination import reconcile_page


def normalize_response(
    value: Any,
    *,
    requested_page: int,
    requested_per_page: int,
    array_keys: Iterable[str] = (),
) -> ExtractionResult:
    items = extract_items(value, array_keys)
    page = reconcile_page(
        value,
        requested_page=requested_page,
        requested_per_page=requested_per_page,
        item_count=len(items),
    )
    return ExtractionResult(items=items, page=page)
