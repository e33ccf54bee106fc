"""Index Normalizer: rebase step -> ingredient references to 0-based.

The wire format has been seen both 0- and 1-based and nothing in the payload
says which one is in use. The whole set is read as 1-based iff its minimum is
>= 1, 0 is absent, and its maximum equals N or exceeds N-1. Otherwise it is
taken as 0-based. Out-of-range values (stale references) are then dropped.

Small collections are genuinely ambiguous: N=2, raw={1} could be the second
ingredient (0-based) or the first (1-based). The rule above reads it as
0-based, giving {1}. That tie-break is kept as is.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from core.domain.models import IndexSet

log = logging.getLogger(__name__)

_INT_TEXT = re.compile(r"-?[0-9]+")


def _as_index(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INT_TEXT.fullmatch(text):
            return int(text)
    return None


def looks_one_based(values: set[int], length: int) -> bool:
    if not values:
        return False
    lo, hi = min(values), max(values)
    return lo >= 1 and 0 not in values and (hi == length or hi > length - 1)


def is_ambiguous(values: set[int], length: int) -> bool:
    """Both readings fit: read as 0-based, but shifting by one also stays in range."""

    if not values or looks_one_based(values, length):
        return False
    return min(values) >= 1 and max(values) <= length - 1


def normalize_ingredient_indices(raw: Iterable[Any], length: int) -> IndexSet:
    """Canonical 0-based, unique, ascending indices in ``[0, length - 1]``. Never raises."""

    if length <= 0:
        return []
    values = {v for v in (_as_index(r) for r in raw) if v is not None}
    if not values:
        return []

    if looks_one_based(values, length):
        values = {v - 1 for v in values}
    elif is_ambiguous(values, length):
        log.debug("Ambiguous ingredient references %s for N=%d, reading as 0-based", sorted(values), length)

    return sorted(v for v in values if 0 <= v <= length - 1)


def to_wire_indices(indices: Iterable[int], base: int = 0) -> list[int]:
    """Re-expand canonical indices into the backend convention (``base`` 0 or 1)."""

    if base not in (0, 1):
        raise ValueError(f"index base must be 0 or 1, got {base}")
    return [i + base for i in sorted(set(indices))]
