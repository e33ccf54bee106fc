"""Tests for alias-table mapping into canonical entities."""

from __future__ import annotations

import pytest

from core.domain.entities import (
    Addon,
    Order,
    Product,
    Recipe,
    RecipeIngredient,
    RecipeStep,
    RecipeSuggestion,
    User,
)
from core.domain.resources import RESOURCES, get_resource
from core.exceptions import UnknownResourceError
from core.normalization.arrays import extract_items
from core.normalization.mapper import apply_aliases, map_record, map_records, pick


class TestPick:
    def test_first_non_null_alias(self) -> None:
        assert pick({"name": None, "title": "T"}, ("addonName", "name", "title")) == "T"

    def test_falsy_but_present_values_win(self) -> None:
        # `??` semantics: 0 and "" are values, only null/missing fall through.
        assert pick({"addonPrice": 0, "price": 9}, ("addonPrice", "price")) == 0
        assert pick({"name": "", "title": "T"}, ("name", "title")) == ""

    def test_nothing_found(self) -> None:
        assert pick({}, ("a", "b")) is None


class TestApplyAliases:
    def test_missing_fields_are_omitted(self) -> None:
        assert apply_aliases({"id": 1}, {"id": ("id",), "name": ("name",)}) == {"id": 1}


class TestAddons:
    def test_alias_variants(self, paginated_addons: dict) -> None:
        addons = map_records(extract_items(paginated_addons), RESOURCES["addons"])
        assert all(isinstance(a, Addon) for a in addons)
        first, second, third = addons

        assert first.addon_id == 1
        assert first.addon_name == "Extra cheese"
        assert first.addon_price == "1.50"
        assert first.is_addon_active is True
        assert first.addon_images == []

        assert second.addon_id == 2
        assert second.addon_name == "Bacon"
        assert second.is_addon_active is False
        assert second.addon_images == ["https://img/b.png"]

        assert third.addon_name == "Avocado"
        assert third.addon_images == ["https://img/a.png"]

    def test_raw_is_kept(self) -> None:
        record = {"id": 5, "name": "Sauce", "extra": {"x": 1}}
        addon = map_record(record, RESOURCES["addons"])
        assert addon.raw == record


class TestOtherResources:
    def test_user(self) -> None:
        user = map_record(
            {"userId": 7, "full_name": "Ana", "email": "a@x.io", "isBlocked": True, "createdAt": "2024-01-01"},
            get_resource("users"),
        )
        assert isinstance(user, User)
        assert (user.id, user.name, user.status, user.created_at) == (7, "Ana", "blocked", "2024-01-01")

    def test_order(self) -> None:
        order = map_record(
            {
                "id": 3,
                "status": "Delivered",
                "paymentStatus": "paid",
                "deliveryFee": 4,
                "total": 20.5,
                "deliveryAddress": "Main St",
                "orderItems": [{"id": 1, "quantity": 2}, "bogus"],
            },
            get_resource("orders"),
        )
        assert isinstance(order, Order)
        assert order.status == "delivered"
        assert order.delivery_fee == 4
        assert order.order_items == [{"id": 1, "quantity": 2}]

    def test_product(self) -> None:
        product = map_record(
            {
                "productId": 11,
                "productName": "Coffee",
                "productSku": "CF-1",
                "productPrice": 29.99,
                "productAvailableQuantity": 150,
                "isProductActive": 1,
                "productImages": [{"imageUrl": "https://img/1"}, "https://img/2"],
                "productTags": ["organic", {"tagName": "hot"}, {"other": "x"}],
            },
            get_resource("products"),
        )
        assert isinstance(product, Product)
        assert product.description == "CF-1"
        assert product.status == "active"
        assert product.images == ["https://img/1", "https://img/2"]
        assert product.tags == ["organic", "hot"]

    def test_recipe_nested_aliases(self) -> None:
        recipe = map_record(
            {
                "recipeId": 1,
                "title": "Pancakes",
                "ingredients": [{"ingredientName": "Flour", "qty": 200}, "Milk"],
                "instructions": [{"text": "Mix", "ingredientIndexes": [1, 2]}, "Cook"],
            },
            get_resource("recipes"),
        )
        assert isinstance(recipe, Recipe)
        assert [i.name for i in recipe.ingredients] == ["Flour", "Milk"]
        assert recipe.ingredients[0].quantity == 200
        assert recipe.steps[0].description == "Mix"
        assert recipe.steps[0].ingredient_refs == [1, 2]
        assert recipe.steps[1].description == "Cook"
        assert recipe.steps[1].ingredient_refs == []

    def test_suggestion(self) -> None:
        suggestion = map_record(
            {
                "suggestion_id": 12,
                "recipe_name": "  Soup  ",
                "status": "PENDING",
                "macros": {"proteins": 10, "carbs": 20},
                "image": [{"url": "https://img/1"}, {"url": "https://img/2", "isThumbnail": True}],
            },
            get_resource("recipe_suggestions"),
        )
        assert isinstance(suggestion, RecipeSuggestion)
        assert suggestion.id == "12"
        assert suggestion.summary == "Soup"
        assert suggestion.status == "pending"
        assert suggestion.thumbnail_url == "https://img/2"
        assert suggestion.macros_label == "10P / 20C / —F"

    def test_unknown_suggestion_status(self) -> None:
        suggestion = map_record({"id": 1, "status": "archived"}, RESOURCES["recipe-suggestions"])
        assert suggestion.status == "unknown"


class TestMalformedRecords:
    def test_unparseable_field_falls_back_to_default(self) -> None:
        addon = map_record({"id": 1, "addonName": {"en": "Cheese"}, "price": 3}, RESOURCES["addons"])
        assert isinstance(addon, Addon)
        assert addon.addon_name is None
        assert addon.addon_price == 3
        assert addon.addon_id == 1

    def test_bad_step_reference_keeps_every_step(self) -> None:
        recipe = map_record(
            {
                "id": 4,
                "ingredients": ["Rice", "Water"],
                "steps": [
                    {"text": "Rinse", "ingredient_indices": ["\u00b2", 1, "--1"]},
                    {"text": "Cook", "ingredient_indices": [0]},
                ],
            },
            RESOURCES["recipes"],
        )
        assert isinstance(recipe, Recipe)
        assert [s.description for s in recipe.steps] == ["Rinse", "Cook"]
        assert recipe.steps[0].ingredient_refs == [1]

    def test_recipe_accepts_model_instances(self) -> None:
        recipe = Recipe(
            ingredients=[RecipeIngredient(name="Rice")],
            steps=[RecipeStep(description="Cook", ingredient_refs=[0])],
        )
        assert [i.name for i in recipe.ingredients] == ["Rice"]
        assert recipe.steps[0].ingredient_refs == [0]

    def test_empty_record(self) -> None:
        order = map_record({}, RESOURCES["orders"])
        assert order.id is None
        assert order.order_items == []


def test_unknown_resource() -> None:
    with pytest.raises(UnknownResourceError):
        get_resource("widgets")
