"""Modelos de paginación y resultado de extracción (Pydantic v2).

Por qué Pydantic aquí:
- El descriptor de página tiene invariantes numéricas (>= 1, >= 0) que queremos
  validar en un solo sitio.
- La UI consume estos modelos sin saber qué forma de JSON llegó del backend.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field

RawRecord = dict[str, Any]
IndexSet = list[int]


def derive_last_page(total: int, per_page: int) -> int:
    """`max(1, ceil(total / per_page))`: última página cuando el backend no la da."""

    return max(1, math.ceil(total / max(1, per_page)))


class PageDescriptor(BaseModel):
    """Paginación canónica de una vista de lista.

    Invariante:
    - Si `last_page` no vino del backend, vale `max(1, ceil(total / per_page))`.
    """

    current_page: int = Field(
        default=1,
        ge=1,
        description="Página actual (1-based).",
    )
    per_page: int = Field(
        default=15,
        ge=1,
        description="Tamaño de página confirmado (o el solicitado si el backend calla).",
    )
    last_page: int = Field(
        default=1,
        ge=1,
        description="Última página disponible.",
    )
    total: int = Field(
        default=0,
        ge=0,
        description="Total de registros en el backend (o los extraídos si no se informa).",
    )
    next_page: int | None = Field(
        default=None,
        description="Página siguiente si el backend la informa explícitamente (nunca se deriva).",
    )

    @property
    def has_next(self) -> bool:
        return self.current_page < self.last_page

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


class ExtractionResult(BaseModel):
    """Lista de registros crudos + paginación, extraídos del mismo payload."""

    items: list[RawRecord] = Field(
        default_factory=list,
        description="Registros crudos en el orden original del backend.",
    )
    page: PageDescriptor = Field(
        default_factory=PageDescriptor,
        description="Paginación reconciliada.",
    )
