"""Registro de recursos de lista (configuración, no código duplicado).

Idea:
- En vez de copiar la normalización en cada vista (addons, users, orders...),
  cada recurso se describe con un `ResourceSpec`: ruta, alias de array propios
  y la tabla de alias de campos hacia su entidad canónica.
- Las tablas se leen en orden: el primer alias con valor no nulo gana
  (equivalente a `addonName ?? name ?? title`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.domain.entities import (
    Addon,
    CanonicalEntity,
    Order,
    Product,
    Recipe,
    RecipeSuggestion,
    User,
)
from core.exceptions import UnknownResourceError

AliasTable = dict[str, tuple[str, ...]]


@dataclass(frozen=True)
class ResourceSpec:
    """Describe una vista de lista y cómo mapear sus registros."""

    name: str
    path: str
    entity: type[CanonicalEntity]
    aliases: AliasTable
    array_keys: tuple[str, ...] = ()
    nested: dict[str, AliasTable] = field(default_factory=dict)
    defaults: dict[str, Any] = field(default_factory=dict)
    title: str = ""

    def detail_path(self, record_id: object) -> str:
        return f"{self.path}/{record_id}"


ADDON_ALIASES: AliasTable = {
    "addon_id": ("addonId", "id"),
    "id": ("id",),
    "addon_name": ("addonName", "name", "title"),
    "addon_description": ("addonDescription", "description", "desc"),
    "addon_price": ("addonPrice", "price"),
    "is_addon_active": ("isAddonActive", "active", "is_active"),
    "addon_images": ("addonImages", "images", "imageUrls", "image_urls"),
    "name": ("name",),
}

USER_ALIASES: AliasTable = {
    "id": ("id", "userId", "user_id"),
    "name": ("name", "fullName", "full_name", "userName", "username"),
    "email": ("email", "userEmail", "user_email"),
    "status": ("status", "userStatus", "is_blocked", "isBlocked"),
    "created_at": ("created_at", "createdAt"),
}

ORDER_ALIASES: AliasTable = {
    "id": ("id", "orderId", "order_id"),
    "status": ("status", "orderStatus", "order_status"),
    "payment_status": ("paymentStatus", "payment_status"),
    "subtotal": ("subtotal", "subTotal", "sub_total"),
    "delivery_fee": ("deliveryFee", "delivery_fee"),
    "total": ("total", "orderTotal", "grand_total"),
    "delivery_address": ("deliveryAddress", "delivery_address", "address"),
    "order_items": ("orderItems", "order_items", "items"),
}

PRODUCT_ALIASES: AliasTable = {
    "id": ("productId", "id"),
    "name": ("productName", "name"),
    "description": ("productDescription", "productSku", "description"),
    "price": ("productPrice", "price"),
    "stock": ("productAvailableQuantity", "stock", "quantity"),
    "is_active": ("isProductActive", "is_active", "active"),
    "sku": ("productSku", "sku"),
    "is_private": ("isProductPrivate", "is_private"),
    "images": ("productImages", "images"),
    "tags": ("productTags", "tags"),
    "category_id": ("productCategoryId", "category_id", "categoryId"),
    "created_at": ("createdAt", "created_at"),
}

INGREDIENT_ALIASES: AliasTable = {
    "name": ("name", "ingredientName", "ingredient_name", "title"),
    "quantity": ("quantity", "qty", "amount"),
    "unit": ("unit", "unitName", "unit_name"),
}

STEP_ALIASES: AliasTable = {
    "description": ("description", "text", "instruction", "body"),
    "time_minutes": ("time_minutes", "timeMinutes", "duration", "minutes"),
    "ingredient_refs": (
        "ingredient_indices",
        "ingredientIndices",
        "ingredient_indexes",
        "ingredientIndexes",
        "ingredients",
    ),
}

RECIPE_ALIASES: AliasTable = {
    "id": ("id", "recipeId", "recipe_id"),
    "name": ("name", "title", "recipeName", "recipe_name"),
    "description": ("description", "recipeDescription"),
    "servings": ("servings", "portions"),
    "calories": ("calories", "kcal"),
    "ingredients": ("ingredients", "recipeIngredients", "recipe_ingredients"),
    "steps": ("steps", "instructions", "recipeSteps", "recipe_steps"),
}

SUGGESTION_ALIASES: AliasTable = {
    "id": ("id", "suggestion_id", "Suggestion_ID", "recipe_suggestion_id"),
    "summary": (
        "title",
        "name",
        "recipe_name",
        "recipeName",
        "suggestion",
        "text",
        "message",
        "description",
    ),
    "description": ("description",),
    "status": ("status",),
    "servings": ("servings",),
    "calories": ("calories",),
    "macros": ("macros",),
    "ingredients": ("ingredients",),
    "steps": ("steps",),
    "images": ("image", "images"),
    "created_at": ("created_at", "createdAt", "submitted_at"),
}


RESOURCES: dict[str, ResourceSpec] = {
    spec.name: spec
    for spec in (
        ResourceSpec(
            name="addons",
            path="/addons",
            entity=Addon,
            aliases=ADDON_ALIASES,
            array_keys=("addons",),
            defaults={"addon_images": []},
            title="Addons",
        ),
        ResourceSpec(
            name="users",
            path="/admins/users",
            entity=User,
            aliases=USER_ALIASES,
            array_keys=("users",),
            title="Users",
        ),
        ResourceSpec(
            name="orders",
            path="/admins/orders",
            entity=Order,
            aliases=ORDER_ALIASES,
            array_keys=("orders",),
            title="Orders",
        ),
        ResourceSpec(
            name="products",
            path="/admins/products",
            entity=Product,
            aliases=PRODUCT_ALIASES,
            array_keys=("products",),
            title="Products",
        ),
        ResourceSpec(
            name="recipes",
            path="/recipes",
            entity=Recipe,
            aliases=RECIPE_ALIASES,
            array_keys=("recipes",),
            nested={"ingredients": INGREDIENT_ALIASES, "steps": STEP_ALIASES},
            title="Recipes",
        ),
        ResourceSpec(
            name="recipe-suggestions",
            path="/recipes/suggestions",
            entity=RecipeSuggestion,
            aliases=SUGGESTION_ALIASES,
            array_keys=("suggestions",),
            title="Recipe suggestions",
        ),
    )
}


def get_resource(name: str) -> ResourceSpec:
    key = name.strip().lower().replace("_", "-")
    try:
        return RESOURCES[key]
    except KeyError:
        raise UnknownResourceError(f"Unknown resource '{name}'. Known: {', '.join(sorted(RESOURCES))}") from None
