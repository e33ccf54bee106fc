"""Entidades canónicas que consume la UI (Pydantic v2).

Por qué modelos separados por recurso:
- Cada vista de lista renderiza columnas fijas; el backend manda nombres de
  campo distintos según endpoint/versión.
- Las tablas de alias (ver `core.domain.resources`) resuelven *qué campo*
  usar; estos modelos fijan *la forma* final y limpian valores sueltos.

Nota:
- Los tipos son deliberadamente tolerantes (`float | str`) porque el backend
  mezcla números y strings para precios/cantidades.
- `raw` conserva el registro original para las vistas de detalle.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

SuggestionStatus = Literal["pending", "approved", "rejected", "unknown"]

_INT_TEXT = re.compile(r"-?[0-9]+")


def _as_str_id(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "active", "on")
    return bool(value)


def _string_list(value: Any, keys: tuple[str, ...]) -> list[str]:
    """Aplana listas de strings u objetos (`{url: ...}`, `{name: ...}`) a strings."""

    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            if item.strip():
                out.append(item.strip())
            continue
        if isinstance(item, dict):
            for key in keys:
                candidate = item.get(key)
                if isinstance(candidate, str) and candidate.strip():
                    out.append(candidate.strip())
                    break
    return out


class CanonicalEntity(BaseModel):
    model_config = ConfigDict(extra="ignore")

    raw: dict[str, Any] = Field(
        default_factory=dict,
        description="Registro crudo original (para auditoría/detalle).",
        repr=False,
    )


class Addon(CanonicalEntity):
    addon_id: int | str | None = None
    id: int | str | None = None
    addon_name: str | None = None
    addon_description: str | None = None
    addon_price: float | str | None = None
    is_addon_active: bool = False
    addon_images: list[str] = Field(default_factory=list)
    name: str | None = None

    @field_validator("is_addon_active", mode="before")
    @classmethod
    def _active(cls, value: Any) -> bool:
        return _as_bool(value)

    @field_validator("addon_images", mode="before")
    @classmethod
    def _images(cls, value: Any) -> list[str]:
        return _string_list(value, ("url", "imageUrl", "path"))


class User(CanonicalEntity):
    id: int | str | None = None
    name: str | None = None
    email: str | None = None
    status: str | None = None
    created_at: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> str | None:
        # Algunos endpoints mandan `is_blocked` (bool) en vez de un status.
        if isinstance(value, bool):
            return "blocked" if value else "active"
        return value


class Order(CanonicalEntity):
    id: int | str | None = None
    status: str | None = None
    payment_status: str | None = None
    subtotal: float | str | None = None
    delivery_fee: float | str | None = None
    total: float | str | None = None
    delivery_address: str | None = None
    order_items: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _lower_status(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("order_items", mode="before")
    @classmethod
    def _items(cls, value: Any) -> list[dict[str, Any]]:
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, dict)]


class Product(CanonicalEntity):
    id: int | str | None = None
    name: str | None = None
    description: str = ""
    price: float | str | None = None
    stock: int | str | None = None
    is_active: bool = False
    sku: str | None = None
    is_private: bool = False
    images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    category_id: int | str | None = None
    created_at: str | None = None

    @property
    def status(self) -> str:
        return "active" if self.is_active else "inactive"

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("is_active", "is_private", mode="before")
    @classmethod
    def _flags(cls, value: Any) -> bool:
        return _as_bool(value)

    @field_validator("images", mode="before")
    @classmethod
    def _images(cls, value: Any) -> list[str]:
        return _string_list(value, ("imageUrl", "url", "path"))

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, value: Any) -> list[str]:
        return _string_list(value, ("name", "tagName", "label", "title", "slug"))


class RecipeIngredient(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    quantity: float | str | None = None
    unit: str | None = None


class RecipeStep(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str | None = None
    time_minutes: float | str | None = None
    ingredient_refs: list[int] = Field(
        default_factory=list,
        description="Referencias a ingredientes tal como llegan (0- ó 1-based, sin normalizar).",
    )

    @field_validator("ingredient_refs", mode="before")
    @classmethod
    def _refs(cls, value: Any) -> list[int]:
        if not isinstance(value, list):
            value = [value] if value is not None else []
        out: list[int] = []
        for item in value:
            if isinstance(item, bool):
                continue
            if isinstance(item, int):
                out.append(item)
            elif isinstance(item, str) and _INT_TEXT.fullmatch(item.strip()):
                out.append(int(item.strip()))
        return out


class Recipe(CanonicalEntity):
    id: int | str | None = None
    name: str | None = None
    description: str | None = None
    servings: int | str | None = None
    calories: float | str | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    steps: list[RecipeStep] = Field(default_factory=list)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients(cls, value: Any) -> list[Any]:
        return _objects_or_text(value, "name")

    @field_validator("steps", mode="before")
    @classmethod
    def _steps(cls, value: Any) -> list[Any]:
        return _objects_or_text(value, "description")


def _objects_or_text(value: Any, text_key: str) -> list[Any]:
    """Listas mixtas: dicts y modelos pasan tal cual; los strings sueltos se envuelven como `{text_key: s}`."""

    if not isinstance(value, list):
        return []
    out: list[Any] = []
    for item in value:
        if isinstance(item, (dict, BaseModel)):
            out.append(item)
        elif isinstance(item, str) and item.strip():
            out.append({text_key: item.strip()})
    return out


class RecipeSuggestion(CanonicalEntity):
    id: str | None = None
    summary: str = ""
    description: str | None = None
    status: SuggestionStatus = "unknown"
    servings: int | str | None = None
    calories: float | str | None = None
    macros: dict[str, Any] = Field(default_factory=dict)
    ingredients: list[dict[str, Any]] = Field(default_factory=list)
    steps: list[dict[str, Any]] = Field(default_factory=list)
    images: list[dict[str, Any]] = Field(default_factory=list)
    created_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> str | None:
        return _as_str_id(value)

    @field_validator("summary", mode="before")
    @classmethod
    def _summary(cls, value: Any) -> str:
        return value.strip() if isinstance(value, str) else ""

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> str:
        s = value.strip().lower() if isinstance(value, str) else ""
        return s if s in ("pending", "approved", "rejected") else "unknown"

    @field_validator("macros", mode="before")
    @classmethod
    def _macros(cls, value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @field_validator("ingredients", "steps", "images", mode="before")
    @classmethod
    def _object_list(cls, value: Any) -> list[dict[str, Any]]:
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, dict)]

    @property
    def thumbnail_url(self) -> str | None:
        """Imagen marcada como thumbnail; si no hay, la primera con URL."""

        with_url = [img for img in self.images if isinstance(img.get("url"), str) and img.get("url")]
        for img in with_url:
            if img.get("isThumbnail"):
                return img["url"]
        return with_url[0]["url"] if with_url else None

    @property
    def macros_label(self) -> str:
        if not self.macros:
            return "—"
        proteins = self.macros.get("proteins", "—")
        carbs = self.macros.get("carbs", "—")
        fats = self.macros.get("fats", "—")
        return f"{proteins}P / {carbs}C / {fats}F"
