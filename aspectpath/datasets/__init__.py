"""
aspectpath.datasets — Ready-made aspect sets.

Each generator returns pandas DataFrames shaped like the store tables so
they can be passed straight to ``AspectPath.load``.
"""

from .thaumcraft import generate_thaumcraft_aspects, PRIMALS, COMPOUNDS

__all__ = ["generate_thaumcraft_aspects", "PRIMALS", "COMPOUNDS"]
