"""ShoppingList: read-only snapshot derived from the selected recipes."""
from typing import Iterable, Iterator, List, Optional, Tuple
from kochbuch.domain.Ingredient import Amount, Ingredient
from kochbuch.utilities.config import AMOUNT_DECIMALS, SHOPPING_LIST_TITLE


def format_amount(amount: Optional[Amount], decimals: int = AMOUNT_DECIMALS) -> str:
    '''Formats an amount for display: 2.0 -> "2", 0.5 -> "0.5", 1/3 -> "0.33".'''
    if amount is None:
        return ""
    if float(amount) == int(amount):
        return str(int(amount))
    return f"{amount:.{decimals}f}".rstrip("0").rstrip(".")


class ShoppingList:
    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[Ingredient]] = None):
        self._items: Tuple[Ingredient, ...] = tuple(items or ())

    def get_items(self) -> List[Ingredient]:
        '''
        Returns the shopping list lines (a copy).
        '''
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def lines(self) -> List[str]:
        return [" ".join(p for p in (format_amount(i.amount), i.unit, i.name) if p) for i in self._items]

    def to_text(self, title: Optional[str] = None) -> str:
        '''
        Plain-text rendering used when the list is shared.
        '''
        heading = SHOPPING_LIST_TITLE if title is None else title
        body = "\n".join(self.lines())
        if not heading:
            return body
        return f"{heading}\n\n{body}" if body else heading

    def to_dict(self):
        return [item.to_dict() for item in self._items]

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
