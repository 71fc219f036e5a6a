"""
Central configuration defaults for aspectpath.

Weight tunables live in :class:`WeightConfig`; everything else is a plain
module-level constant that callers may override through keyword arguments.
"""

from __future__ import annotations
from dataclasses import dataclass

DEFAULT_DATABASE = "aspects.duckdb"
"""Database file used by the CLI when neither ``--database`` nor the environment sets one."""

DATABASE_ENV_VAR = "ASPECTPATH_DATABASE"

DEFAULT_P = 0.7
"""Share of a node's weight taken from its own holding; the rest comes from its sub components."""

DEFAULT_ALPHA = 0.7
"""Value the piecewise saturation curve reaches at ``SATURATION_THRESHOLD``."""

SATURATION_THRESHOLD = 1000.0

DEFAULT_CURVE = "piecewise"

DEFAULT_BASE_VALUE = 1.0
DEFAULT_HOLDING = 0.0


@dataclass(frozen=True)
class WeightConfig:
    """Tunables of the node weight formula."""
    p: float = DEFAULT_P
    curve: str = DEFAULT_CURVE
    alpha: float = DEFAULT_ALPHA

    def __post_init__(self):
        if not 0.0 <= self.p <= 1.0:
            raise ValueError(f"p must be within [0, 1], got {self.p}")
        if not 0.0 < self.alpha < 1.0:
            raise ValueError(f"alpha must be within (0, 1), got {self.alpha}")
