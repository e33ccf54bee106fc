"""Pure normalization of backend JSON (no I/O).

Everything here takes decoded JSON in and returns plain values or Pydantic
models out, so it can be tested without network or UI.
"""

from core.normalization.arrays import extract_items, extract_record
from core.normalization.indices import normalize_ingredient_indices, to_wire_indices
from core.normalization.mapper import map_record, map_records
from core.normalization.pagination import reconcile_page
from core.normalization.response import normalize_response

__all__ = [
    "extract_items",
    "extract_record",
    "map_record",
    "map_records",
    "normalize_ingredient_indices",
    "normalize_response",
    "reconcile_page",
    "to_wire_indices",
]
