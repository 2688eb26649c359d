"""SelectionSet: the recipes currently chosen for the shopping list, keyed by recipe id."""
from typing import Dict, Iterable, Iterator, List, Optional
from kochbuch.domain.Recipe import Recipe, RecipeId


class SelectionSet:
    __slots__ = ("_members",)

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        members: Dict[RecipeId, Recipe] = {}
        for recipe in recipes or ():
            members[recipe.id] = recipe
        self._members = members

    @classmethod
    def _of(cls, members: Dict[RecipeId, Recipe]) -> "SelectionSet":
        s = cls.__new__(cls)
        s._members = members
        return s

    def toggle(self, recipe: Recipe) -> "SelectionSet":
        '''
        Returns a new set with the recipe removed if its id is selected, added otherwise.
        '''
        members = dict(self._members)
        if recipe.id in members:
            del members[recipe.id]
        else:
            members[recipe.id] = recipe
        return SelectionSet._of(members)

    def contains(self, recipe: Recipe) -> bool:
        '''Membership by id, not by recipe content.'''
        return recipe.id in self._members

    __contains__ = contains

    def recipes(self) -> List[Recipe]:
        return list(self._members.values())

    def ids(self) -> frozenset:
        return frozenset(self._members)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._members.values()))

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return self.ids() == other.ids()

    __hash__ = None

    def __str__(self) -> str:
        names = ", ".join(r.name for r in self._members.values())
        return f"Selection ({len(self._members)}): {names}"

    __repr__ = __str__
