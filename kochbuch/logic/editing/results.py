"""Outcome of an editing operation: the resulting snapshot and whether it changed."""
from enum import Enum
from typing import Any, NamedTuple, Tuple


class EditOutcome(str, Enum):
    APPLIED = "applied"
    INVALID = "invalid"            # missing/empty field or unsupported argument
    DUPLICATE = "duplicate"        # name already present
    NOT_FOUND = "not_found"
    OUT_OF_BOUNDS = "out_of_bounds"


class EditResult(NamedTuple):
    items: Tuple[Any, ...]
    outcome: EditOutcome

    @property
    def applied(self) -> bool:
        return self.outcome is EditOutcome.APPLIED


def applied(items) -> EditResult:
    return EditResult(tuple(items), EditOutcome.APPLIED)


def rejected(items, outcome: EditOutcome) -> EditResult:
    return EditResult(tuple(items), outcome)
