"""
Saturation curves mapping a held quantity onto ``[0, 1)``.

Every curve is zero at zero, continuous, strictly increasing on
``[0, SATURATION_THRESHOLD)`` and stays strictly below one; values that
round to one in floating point are clamped to the largest double under it.
"""
from __future__ import annotations
import math
from typing import Callable, Dict
from aspectpath.config import DEFAULT_ALPHA, SATURATION_THRESHOLD
from aspectpath.errors import DegenerateWeightError

BELOW_ONE = math.nextafter(1.0, 0.0)

def _check_domain(x: float):
    if math.isnan(x) or x < 0: raise DegenerateWeightError(None, "held quantity", x)


class PiecewiseSaturation:
    """
    Linear up to the threshold, then an exponential approach to one.

    ``M(x) = alpha * x / T`` below ``T`` and
    ``M(x) = alpha + (1 - alpha) * (1 - exp(-beta * (x - T)))`` above, where
    ``beta = alpha / (T * (1 - alpha))`` makes both pieces meet with the same slope.
    """

    def __init__(self, alpha: float = DEFAULT_ALPHA, threshold: float = SATURATION_THRESHOLD):
        if not 0.0 < alpha < 1.0: raise ValueError(f"alpha must be within (0, 1), got {alpha}")
        if threshold <= 0: raise ValueError(f"threshold must be positive, got {threshold}")
        self.alpha, self.threshold = alpha, threshold
        self.beta = alpha / (threshold * (1.0 - alpha))

    def __call__(self, x: float) -> float:
        _check_domain(x)
        if x < self.threshold:
            return self.alpha * x / self.threshold
        tail = -math.expm1(-self.beta * (x - self.threshold))
        return min(self.alpha + (1.0 - self.alpha) * tail, BELOW_ONE)

    def __repr__(self) -> str:
        return f"PiecewiseSaturation(alpha={self.alpha}, threshold={self.threshold})"


class HyperbolicSaturation:
    """``M(x) = 1 - 1 / (1 + x)``."""

    def __call__(self, x: float) -> float:
        _check_domain(x)
        if math.isinf(x): return BELOW_ONE
        return min(x / (1.0 + x), BELOW_ONE)

    def __repr__(self) -> str:
        return "HyperbolicSaturation()"


CURVES: Dict[str, Callable[[float], Callable[[float], float]]] = {
    "piecewise": lambda alpha: PiecewiseSaturation(alpha=alpha),
    "hyperbolic": lambda alpha: HyperbolicSaturation(),
}

def make_curve(name: str, alpha: float = DEFAULT_ALPHA) -> Callable[[float], float]:
    if name not in CURVES: raise ValueError(f"curve must be one of {sorted(CURVES)}, got {name!r}")
    return CURVES[name](alpha)
