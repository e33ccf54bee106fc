"""Meta Reconciler: locate or derive pagination fields.

Sources are scanned in a fixed order (the value itself, ``data``, ``error``,
``meta``, ``pagination``) and, inside each source, an ordered alias list. The
first non-null hit over the whole scan wins; later sources never override it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from core.domain.models import PageDescriptor, derive_last_page
from core.normalization.arrays import extract_items

log = logging.getLogger(__name__)

CURRENT_PAGE_KEYS = ("current_page", "currentPage", "page")
LAST_PAGE_KEYS = ("last_page", "lastPage", "total_pages", "totalPages")
PER_PAGE_KEYS = ("per_page", "perPage", "limit", "page_size", "pageSize")
TOTAL_KEYS = ("total", "totalItems", "total_results", "totalResults")
NEXT_PAGE_KEYS = ("nextPage", "next_page")

META_SOURCE_KEYS = ("data", "error", "meta", "pagination")


def meta_sources(value: Any) -> list[dict[str, Any]]:
    """Ordered meta sources; anything that is not an object is skipped."""

    if not isinstance(value, dict):
        return []
    candidates = [value, *(value.get(key) for key in META_SOURCE_KEYS)]
    return [c for c in candidates if isinstance(c, dict)]


def first_found(sources: Iterable[dict[str, Any]], keys: Iterable[str]) -> Any:
    keys = tuple(keys)
    for source in sources:
        for key in keys:
            found = source.get(key)
            if found is not None:
                return found
    return None


def to_int(value: Any) -> int | None:
    """Numeric coercion: ints, integral floats and numeric strings."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            as_float = float(text)
        except ValueError:
            return None
        return int(as_float) if as_float.is_integer() else None
    return None


def _at_least(value: int | None, minimum: int) -> int | None:
    return value if value is not None and value >= minimum else None


def reconcile_page(
    value: Any,
    *,
    requested_page: int,
    requested_per_page: int,
    item_count: int | None = None,
) -> PageDescriptor:
    """Build a fully populated `PageDescriptor` from ``value``. Never raises.

    ``item_count`` is the number of extracted records; when omitted it is
    computed from ``value`` with the generic array candidates.
    """

    if item_count is None:
        item_count = len(extract_items(value))
    requested_page = max(1, int(requested_page))
    requested_per_page = max(1, int(requested_per_page))

    sources = meta_sources(value)
    current_page = _at_least(to_int(first_found(sources, CURRENT_PAGE_KEYS)), 1)
    per_page = _at_least(to_int(first_found(sources, PER_PAGE_KEYS)), 1)
    last_page = _at_least(to_int(first_found(sources, LAST_PAGE_KEYS)), 1)
    total = _at_least(to_int(first_found(sources, TOTAL_KEYS)), 0)
    next_page = _at_least(to_int(first_found(sources, NEXT_PAGE_KEYS)), 1)

    if per_page is None:
        per_page = requested_per_page
    if current_page is None:
        current_page = requested_page
    if last_page is None:
        last_page = derive_last_page(total if total is not None else item_count, per_page)
    if total is None:
        total = item_count

    descriptor = PageDescriptor(
        current_page=current_page,
        per_page=per_page,
        last_page=last_page,
        total=total,
        next_page=next_page,
    )
    if descriptor.per_page != requested_per_page:
        log.debug(
            "Server confirmed per_page=%d (requested %d)",
            descriptor.per_page,
            requested_per_page,
        )
    return descriptor
