"""Category and image editing for the recipe form, plus the submit check."""
from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence
from kochbuch.domain.Image import Image
from kochbuch.domain.Recipe import Recipe
from kochbuch.logic.editing.results import EditOutcome, EditResult, applied, rejected
from kochbuch.utilities.config import MAX_IMAGES
from kochbuch.utilities.constants import REQUIRED_FIELDS

logger = logging.getLogger(__name__)

__all__ = [
    'add_category', 'remove_category', 'add_image', 'remove_image',
    'missing_required_fields', 'is_submittable'
]


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def add_category(categories: Sequence[str], category: Any) -> EditResult:
    name = _clean(category)
    if not name:
        return rejected(categories, EditOutcome.INVALID)
    if name in categories:
        return rejected(categories, EditOutcome.DUPLICATE)
    return applied((*categories, name))


def remove_category(categories: Sequence[str], category: Any) -> EditResult:
    if category not in categories:
        return rejected(categories, EditOutcome.NOT_FOUND)
    return applied(c for c in categories if c != category)


def add_image(images: Sequence[Image], image: Any, max_images: Optional[int] = None) -> EditResult:
    """Attach an image unless one with the same file name is already attached.

    When the recipe already holds ``max_images`` images the oldest ones are
    dropped to make room, so with the default limit of one the new image
    replaces the current one.
    """
    if not isinstance(image, Image) or not _clean(image.name):
        return rejected(images, EditOutcome.INVALID)
    if any(existing.name == image.name for existing in images):
        return rejected(images, EditOutcome.DUPLICATE)
    limit = max(1, max_images if max_images is not None else MAX_IMAGES)
    kept = list(images)[len(images) - limit + 1:] if len(images) >= limit else list(images)
    if len(kept) < len(images):
        logger.info(f"Image limit {limit} reached, dropping {len(images) - len(kept)} image(s) for '{image.name}'")
    return applied((*kept, image))


def remove_image(images: Sequence[Image], image_name: Any) -> EditResult:
    if not image_name or not any(img.name == image_name for img in images):
        return rejected(images, EditOutcome.NOT_FOUND)
    return applied(img for img in images if img.name != image_name)


def missing_required_fields(recipe: Recipe) -> List[str]:
    """Names of required fields that are empty (or zero, for servings)."""
    missing = []
    for field in REQUIRED_FIELDS:
        value = getattr(recipe, field, None)
        if isinstance(value, str):
            value = value.strip()
        if not value:
            missing.append(field)
    return missing


def is_submittable(recipe: Recipe) -> bool:
    return not missing_required_fields(recipe)
