from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from aspectpath.config import DEFAULT_BASE_VALUE, DEFAULT_HOLDING


@dataclass(frozen=True)
class Node:
    """An aspect as read from the store."""
    name: str
    mod: Optional[str] = None
    base_value: float = DEFAULT_BASE_VALUE
    held: float = DEFAULT_HOLDING

    def pretty(self) -> str:
        return f"{self.name},{self.mod if self.mod is not None else '<>'},{self.base_value}"


@dataclass(frozen=True)
class Recipe:
    """``result = component_a + component_b``."""
    result: str
    component_a: str
    component_b: str

    @property
    def components(self) -> Tuple[str, str]:
        return self.component_a, self.component_b

    def __str__(self) -> str:
        return f"{self.result} = {self.component_a} + {self.component_b}"
