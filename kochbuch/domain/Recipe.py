"""Recipe domain entity: identity, categories, ordered ingredients and images, metadata."""
from typing import Iterable, Optional, Tuple, Union
from kochbuch.domain.Image import Image
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.utilities.validators import RecipeInput, parse_model

RecipeId = Union[int, str]


class Recipe:
    def __init__(self, id: Optional[RecipeId] = None, name: str = "", slug: str = "",
                 categories: Optional[Iterable[str]] = None,
                 ingredients: Optional[Iterable[Ingredient]] = None,
                 images: Optional[Iterable[Image]] = None,
                 description: str = "", source: str = "", servings: int = 0):
        self.id = id
        self.name = name
        self.slug = slug
        # Snapshots: editing produces a new Recipe instead of touching these
        self.categories: Tuple[str, ...] = tuple(categories or ())
        self.ingredients: Tuple[Ingredient, ...] = tuple(ingredients or ())
        self.images: Tuple[Image, ...] = tuple(images or ())
        self.description = description
        self.source = source
        self.servings = servings

    def has_category(self, category: str) -> bool:
        return category in self.categories

    def replace(self, **changes) -> "Recipe":
        '''Returns a copy with the given fields replaced.'''
        fields = {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "categories": self.categories,
            "ingredients": self.ingredients,
            "images": self.images,
            "description": self.description,
            "source": self.source,
            "servings": self.servings,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown recipe field(s): {', '.join(sorted(unknown))}")
        fields.update(changes)
        return Recipe(**fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.name} ({self.slug}) - Categories: {', '.join(self.categories)} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a store record; raises RecipeDataError when malformed.'''
        parsed = parse_model(RecipeInput, data)
        return Recipe(
            id=parsed.id,
            name=parsed.name,
            slug=parsed.slug,
            categories=parsed.categories,
            ingredients=[Ingredient(i.name, i.amount, i.unit) for i in parsed.ingredients],
            images=[Image(**img.model_dump()) for img in parsed.images],
            description=parsed.description,
            source=parsed.source,
            servings=parsed.servings,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "categories": list(self.categories),
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "images": [img.to_dict() for img in self.images],
            "description": self.description,
            "source": self.source,
            "servings": self.servings,
        }
