"""Catalog helpers over a loaded list of recipes: categories, filtering, lookup."""
from __future__ import annotations
from typing import Iterable, List, Optional
from kochbuch.domain.Recipe import Recipe, RecipeId

__all__ = ['collect_categories', 'filter_by_category', 'remove_recipe', 'find_by_slug']


def collect_categories(recipes: Iterable[Recipe]) -> List[str]:
    """Distinct categories over all recipes, in first-seen order (feeds the category picker)."""
    seen = {}
    for recipe in recipes:
        for category in recipe.categories:
            seen.setdefault(category, None)
    return list(seen)


def filter_by_category(recipes: Iterable[Recipe], category: Optional[str]) -> List[Recipe]:
    """Recipes tagged with ``category``; an empty category means no filter."""
    if not category:
        return list(recipes)
    return [r for r in recipes if r.has_category(category)]


def remove_recipe(recipes: Iterable[Recipe], recipe_id: RecipeId) -> List[Recipe]:
    return [r for r in recipes if r.id != recipe_id]


def find_by_slug(recipes: Iterable[Recipe], slug: str) -> Optional[Recipe]:
    return next((r for r in recipes if r.slug == slug), None)
