from typing import Final, Tuple

# Ingredient list movement (editor up/down buttons)
MOVE_UP: Final[int] = -1
MOVE_DOWN: Final[int] = 1
DIRECTIONS: Final[Tuple[int, int]] = (MOVE_UP, MOVE_DOWN)

UNITS: Final[Tuple[str, ...]] = ("Stück", "ml", "l", "g", "kg", "TL", "EL", "Prise(n)")

# Fields a recipe must carry before it can be submitted to the store
REQUIRED_FIELDS: Final[Tuple[str, ...]] = (
    "slug",
    "name",
    "servings",
    "description",
    "source",
    "ingredients",
    "categories",
)
