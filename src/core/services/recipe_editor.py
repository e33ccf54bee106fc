"""Recipe edit form loading and submission.

When a recipe is opened for editing, each step's ingredient references are
rebased to canonical 0-based indices against the recipe's ingredient list.
The form works on those indices in memory; they are only re-expanded into the
backend's convention when the form is submitted.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from core.domain.entities import Recipe, RecipeIngredient
from core.domain.models import IndexSet
from core.domain.resources import RESOURCES, ResourceSpec
from core.interfaces.transport import ApiTransport
from core.normalization import extract_record, map_record, normalize_ingredient_indices, to_wire_indices

log = logging.getLogger(__name__)


class EditableStep(BaseModel):
    description: str | None = None
    time_minutes: float | str | None = None
    ingredient_indices: IndexSet = Field(
        default_factory=list,
        description="0-based, unique, ascending indices into the recipe ingredients.",
    )


class RecipeEditForm(BaseModel):
    """In-memory state of the recipe edit form."""

    id: int | str | None = None
    name: str | None = None
    description: str | None = None
    servings: int | str | None = None
    calories: float | str | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    steps: list[EditableStep] = Field(default_factory=list)

    def toggle_ingredient(self, step_index: int, ingredient_index: int) -> IndexSet:
        """Check/uncheck one ingredient for a step; returns the step's new indices."""

        if not 0 <= ingredient_index < len(self.ingredients):
            raise IndexError(f"ingredient index {ingredient_index} out of range")
        step = self.steps[step_index]
        current = set(step.ingredient_indices)
        current.symmetric_difference_update({ingredient_index})
        step.ingredient_indices = sorted(current)
        return step.ingredient_indices

    def to_payload(self, *, index_base: int = 0) -> dict[str, Any]:
        """Wire format for PUT; step indices are re-expanded with ``index_base``."""

        return {
            "name": self.name,
            "description": self.description,
            "servings": self.servings,
            "calories": self.calories,
            "ingredients": [i.model_dump() for i in self.ingredients],
            "steps": [
                {
                    "description": s.description,
                    "time_minutes": s.time_minutes,
                    "ingredient_indices": to_wire_indices(s.ingredient_indices, index_base),
                }
                for s in self.steps
            ],
        }


def build_edit_form(recipe: Recipe) -> RecipeEditForm:
    count = len(recipe.ingredients)
    steps = [
        EditableStep(
            description=step.description,
            time_minutes=step.time_minutes,
            ingredient_indices=normalize_ingredient_indices(step.ingredient_refs, count),
        )
        for step in recipe.steps
    ]
    return RecipeEditForm(
        id=recipe.id,
        name=recipe.name,
        description=recipe.description,
        servings=recipe.servings,
        calories=recipe.calories,
        ingredients=list(recipe.ingredients),
        steps=steps,
    )


def _as_recipe(payload: Any, spec: ResourceSpec) -> Recipe | None:
    record = extract_record(payload)
    if not record:
        return None
    entity = map_record(record, spec)
    if not isinstance(entity, Recipe):
        return None
    # `{message: "..."}` and similar acknowledgements are not recipes.
    if entity.id is None and entity.name is None:
        return None
    return entity


async def load_recipe_for_edit(
    transport: ApiTransport,
    recipe_id: int | str,
    *,
    spec: ResourceSpec | None = None,
) -> RecipeEditForm:
    spec = spec or RESOURCES["recipes"]
    payload = await transport.get(spec.detail_path(recipe_id))
    recipe = _as_recipe(payload, spec) or Recipe(id=recipe_id)
    return build_edit_form(recipe)


async def submit_recipe(
    transport: ApiTransport,
    form: RecipeEditForm,
    *,
    index_base: int = 0,
    spec: ResourceSpec | None = None,
) -> RecipeEditForm:
    """PUT the form; the echoed record (if any) goes back through the normalizer."""

    spec = spec or RESOURCES["recipes"]
    if form.id is None:
        response = await transport.post(spec.path, form.to_payload(index_base=index_base))
    else:
        response = await transport.put(spec.detail_path(form.id), form.to_payload(index_base=index_base))

    echoed = _as_recipe(response, spec)
    if echoed is None:
        log.debug("Recipe save returned no record; keeping local form state")
        return form
    return build_edit_form(echoed)
