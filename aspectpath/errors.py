"""Exceptions and warnings raised by aspectpath."""

from __future__ import annotations
from typing import Optional, Tuple


class AspectPathError(Exception):
    """Base class for every failure raised by this package."""


class UnknownNodeError(AspectPathError, LookupError):
    """Raised when an aspect name is not present in the loaded graph or store."""

    def __init__(self, name: str, context: Optional[str] = None):
        self.name = name
        self.context = context
        msg = f"Unknown aspect: {name!r}"
        if context:
            msg += f" ({context})"
        super().__init__(msg)


class DegenerateWeightError(AspectPathError, ValueError):
    """Raised when a base value or holding makes a node's weight uncomputable."""

    def __init__(self, name: Optional[str], field: str, value: float):
        self.name, self.field, self.value = name, field, value
        who = f"aspect {name!r}" if name is not None else "input"
        super().__init__(f"Invalid {field} for {who}: {value!r}")


class GraphCycleWarning(UserWarning):
    """Emitted when a recipe would make an aspect its own (transitive) component."""

    def __init__(self, recipe: Tuple[str, str, str]):
        self.recipe = recipe
        result, a, b = recipe
        super().__init__(f"Rejected recipe {result} = {a} + {b}: it would create a cycle")
