"""
aspectpath.datasets.thaumcraft — A compact Thaumcraft 4 aspect set.

The six primal aspects plus the compounds needed to reach tools, machines
and living things. Every aspect belongs to the ``Thaumcraft`` pack and has
base value 1.0.
"""
from __future__ import annotations
import pandas as pd
from typing import Dict, Optional, Tuple

PRIMALS = ["Aer", "Terra", "Ignis", "Aqua", "Ordo", "Perditio"]

COMPOUNDS = [
    ("Lux", "Aer", "Ignis"),
    ("Motus", "Aer", "Ordo"),
    ("Gelum", "Ignis", "Perditio"),
    ("Vitreus", "Terra", "Ordo"),
    ("Victus", "Aqua", "Terra"),
    ("Venenum", "Aqua", "Perditio"),
    ("Potentia", "Ordo", "Ignis"),
    ("Permutatio", "Motus", "Aqua"),
    ("Vacuos", "Aer", "Perditio"),
    ("Volatus", "Aer", "Motus"),
    ("Iter", "Motus", "Terra"),
    ("Metallum", "Terra", "Vitreus"),
    ("Mortuus", "Victus", "Perditio"),
    ("Tenebrae", "Vacuos", "Lux"),
    ("Praecantatio", "Vacuos", "Potentia"),
    ("Herba", "Victus", "Terra"),
    ("Bestia", "Motus", "Victus"),
    ("Sano", "Victus", "Ordo"),
    ("Spiritus", "Victus", "Mortuus"),
    ("Cognitio", "Ignis", "Spiritus"),
    ("Corpus", "Mortuus", "Bestia"),
    ("Humanus", "Bestia", "Cognitio"),
    ("Instrumentum", "Humanus", "Ordo"),
    ("Telum", "Instrumentum", "Ignis"),
    ("Machina", "Motus", "Instrumentum"),
]


def generate_thaumcraft_aspects(holdings: Optional[Dict[str, float]] = None) -> Tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """
    Build the aspect tables.

    Returns
    -------
    (elements, recipes, holdings)
        ``elements`` has ``name``, ``belongs_to_mod``, ``base_value``;
        ``recipes`` has ``name``, ``component_a``, ``component_b``;
        ``holdings`` has ``name``, ``num`` (empty unless ``holdings`` is given).

    Example
    -------
    >>> from aspectpath.datasets import generate_thaumcraft_aspects
    >>> elements, recipes, holdings = generate_thaumcraft_aspects({"Lux": 120})
    """
    names = PRIMALS + [c[0] for c in COMPOUNDS]
    elements = pd.DataFrame({"name": names, "belongs_to_mod": "Thaumcraft", "base_value": 1.0})
    recipes = pd.DataFrame(COMPOUNDS, columns=["name", "component_a", "component_b"])
    held = pd.DataFrame(sorted((holdings or {}).items()), columns=["name", "num"]).astype({"name": str, "num": float})
    return elements, recipes, held
