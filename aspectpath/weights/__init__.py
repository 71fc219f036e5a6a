from .curves import PiecewiseSaturation, HyperbolicSaturation, make_curve
from .evaluator import NodeWeightEvaluator

__all__ = ["PiecewiseSaturation", "HyperbolicSaturation", "make_curve", "NodeWeightEvaluator"]
