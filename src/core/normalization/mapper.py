"""Entity Mapper: raw backend record -> canonical entity via alias tables."""

from __future__ import annotations

import logging
from typing import Any, Iterable, TypeVar

from pydantic import ValidationError

from core.domain.entities import CanonicalEntity
from core.domain.models import RawRecord
from core.domain.resources import AliasTable, ResourceSpec

log = logging.getLogger(__name__)

E = TypeVar("E", bound=CanonicalEntity)


def pick(record: RawRecord, aliases: Iterable[str]) -> Any:
    """First alias with a non-null value (``a ?? b ?? c``)."""

    for alias in aliases:
        value = record.get(alias)
        if value is not None:
            return value
    return None


def apply_aliases(record: RawRecord, table: AliasTable) -> dict[str, Any]:
    """Canonical field -> first non-null backend value. Missing fields are omitted."""

    out: dict[str, Any] = {}
    for field_name, aliases in table.items():
        value = pick(record, aliases)
        if value is not None:
            out[field_name] = value
    return out


def _apply_nested(mapped: dict[str, Any], nested: dict[str, AliasTable]) -> None:
    for field_name, table in nested.items():
        value = mapped.get(field_name)
        if not isinstance(value, list):
            continue
        mapped[field_name] = [apply_aliases(v, table) if isinstance(v, dict) else v for v in value]


def _validate(entity: type[E], data: dict[str, Any]) -> E:
    """Validate; fields that do not fit the canonical type fall back to defaults."""

    try:
        return entity.model_validate(data)
    except ValidationError as exc:
        bad = {err["loc"][0] for err in exc.errors() if err.get("loc")}
        log.warning(
            "Dropping unparseable fields %s for %s",
            sorted(str(b) for b in bad),
            entity.__name__,
        )
        cleaned = {k: v for k, v in data.items() if k not in bad or k == "raw"}
        try:
            return entity.model_validate(cleaned)
        except ValidationError:
            return entity.model_validate({"raw": data.get("raw", {})})


def map_record(record: RawRecord, spec: ResourceSpec) -> CanonicalEntity:
    mapped: dict[str, Any] = {**spec.defaults, **apply_aliases(record, spec.aliases)}
    _apply_nested(mapped, spec.nested)
    mapped["raw"] = record
    return _validate(spec.entity, mapped)


def map_records(records: Iterable[RawRecord], spec: ResourceSpec) -> list[CanonicalEntity]:
    return [map_record(r, spec) for r in records]
