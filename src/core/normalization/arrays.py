"""Array Extractor: locate the list of records inside an arbitrary JSON value.

Candidate sites are an ordered tuple of small pure functions; the first one
that yields a list wins. A candidate that is an object whose ``data`` is a list
is unwrapped one level, which covers ``{"data": {"data": [...]}}``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from core.domain.models import RawRecord

Extractor = Callable[[Any], Any]


def _itself(value: Any) -> Any:
    return value


def _key(name: str) -> Extractor:
    def extract(value: Any) -> Any:
        return value.get(name) if isinstance(value, dict) else None

    extract.__name__ = f"_key_{name}"
    return extract


BASE_EXTRACTORS: tuple[Extractor, ...] = (
    _itself,
    _key("data"),
    _key("result"),
    _key("results"),
    _key("items"),
    _key("records"),
)


def candidate_extractors(array_keys: Iterable[str] = ()) -> tuple[Extractor, ...]:
    """Generic candidates first, then resource-specific aliases (e.g. ``addons``)."""

    return BASE_EXTRACTORS + tuple(_key(k) for k in array_keys)


def _as_list(candidate: Any) -> list[Any] | None:
    if isinstance(candidate, list):
        return candidate
    if isinstance(candidate, dict) and isinstance(candidate.get("data"), list):
        return candidate["data"]
    return None


def extract_items(value: Any, array_keys: Iterable[str] = ()) -> list[RawRecord]:
    """Return the records found in ``value``, in backend order.

    No recognizable array is not an error: the result is simply empty.
    Entries that are not JSON objects are skipped.
    """

    for extractor in candidate_extractors(array_keys):
        found = _as_list(extractor(value))
        if found is not None:
            return [item for item in found if isinstance(item, dict)]
    return []


def extract_record(value: Any) -> RawRecord:
    """Single-record variant for detail and mutation responses."""

    if isinstance(value, dict):
        for key in ("data", "result"):
            inner = value.get(key)
            if isinstance(inner, dict):
                return inner
        return value
    return {}
