"""Ingredient domain entity: name, amount, unit."""
from typing import Tuple, Union
from kochbuch.utilities.validators import IngredientInput, parse_model

Amount = Union[int, float]


class Ingredient:
    __slots__ = ("name", "amount", "unit")

    def __init__(self, name: str = "", amount: Amount = 0, unit: str = ""):
        self.name = name
        self.amount = amount
        self.unit = unit

    @property
    def key(self) -> Tuple[str, str]:
        '''Aggregation key: lines sharing name and unit are summed on a shopping list.'''
        return (self.name, self.unit)

    def with_amount(self, amount: Amount) -> "Ingredient":
        return Ingredient(self.name, amount, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.amount, self.unit) == (other.name, other.amount, other.unit)

    def __hash__(self) -> int:
        return hash((self.name, self.amount, self.unit))

    def __str__(self) -> str:
        return f"{self.name} - {self.amount} {self.unit}"

    def __repr__(self) -> str:
        return f"Ingredient(name={self.name!r}, amount={self.amount!r}, unit={self.unit!r})"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a store record. Ignores unknown keys.'''
        parsed = parse_model(IngredientInput, data)
        return Ingredient(parsed.name, parsed.amount, parsed.unit)

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
        }
