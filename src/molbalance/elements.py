"""Static element data used for geometry and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from molbalance.constants import (
    DUMMY_ELEMENT,
    FALLBACK_COLOR,
    FALLBACK_COVALENT_RADIUS,
    FALLBACK_RADIUS,
)


@dataclass(frozen=True)
class ElementProperties:
    atomic_number: int
    color: str  # hex RGB
    radius: float  # covalent radius, Å


ELEMENT_PROPERTIES: Mapping[str, ElementProperties] = MappingProxyType(
    {
        "H": ElementProperties(1, "#FFFFFF", 0.31),
        "He": ElementProperties(2, "#D9FFFF", 0.28),
        "Li": ElementProperties(3, "#CC80FF", 1.28),
        "Be": ElementProperties(4, "#C2FF00", 0.96),
        "B": ElementProperties(5, "#FFB5B5", 0.84),
        "C": ElementProperties(6, "#909090", 0.76),
        "N": ElementProperties(7, "#3050F8", 0.71),
        "O": ElementProperties(8, "#FF0D0D", 0.66),
        "F": ElementProperties(9, "#90E050", 0.57),
        "Ne": ElementProperties(10, "#B3E3F5", 0.58),
        "Na": ElementProperties(11, "#AB5CF2", 1.66),
        "Mg": ElementProperties(12, "#8AFF00", 1.41),
        "Al": ElementProperties(13, "#BFA6A6", 1.21),
        "Si": ElementProperties(14, "#F0C8A0", 1.11),
        "P": ElementProperties(15, "#FF8000", 1.07),
        "S": ElementProperties(16, "#FFFF30", 1.05),
        "Cl": ElementProperties(17, "#1FF01F", 1.02),
        "Ar": ElementProperties(18, "#80D1E3", 1.06),
        "K": ElementProperties(19, "#8F40D4", 2.03),
        "Ca": ElementProperties(20, "#3DFF00", 1.76),
    }
)

SYMBOLS_BY_ATOMIC_NUMBER: Mapping[int, str] = MappingProxyType(
    {props.atomic_number: symbol for symbol, props in ELEMENT_PROPERTIES.items()}
)

# Typical single-bond lengths in Å, keyed by unordered element pair.
BOND_LENGTHS: Mapping[frozenset[str], float] = MappingProxyType(
    {
        frozenset(("C", "C")): 1.54,
        frozenset(("C", "H")): 1.09,
        frozenset(("C", "O")): 1.43,
        frozenset(("C", "N")): 1.47,
        frozenset(("C", "S")): 1.82,
        frozenset(("C", "Cl")): 1.77,
        frozenset(("H", "H")): 0.74,
        frozenset(("H", "O")): 0.96,
        frozenset(("H", "N")): 1.01,
        frozenset(("O", "O")): 1.48,
        frozenset(("N", "N")): 1.45,
    }
)


def display_color(symbol: str) -> str:
    props = ELEMENT_PROPERTIES.get(symbol)
    return props.color if props else FALLBACK_COLOR


def display_radius(symbol: str) -> float:
    props = ELEMENT_PROPERTIES.get(symbol)
    return props.radius if props else FALLBACK_RADIUS


def covalent_radius(symbol: str) -> float:
    props = ELEMENT_PROPERTIES.get(symbol)
    return props.radius if props else FALLBACK_COVALENT_RADIUS


def bond_length(first: str, second: str) -> float:
    """Return a bond length estimate for an element pair (order-insensitive).

    Pairs missing from the table fall back to the sum of covalent radii.
    """
    known = BOND_LENGTHS.get(frozenset((first, second)))
    if known is not None:
        return known
    return covalent_radius(first) + covalent_radius(second)


def symbol_for(atomic_number: int) -> str:
    return SYMBOLS_BY_ATOMIC_NUMBER.get(atomic_number, DUMMY_ELEMENT)
