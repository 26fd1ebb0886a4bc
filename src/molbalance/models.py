"""Data structures for molecules, balanced equations and geometries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

ElementCount = Dict[str, int]
Position = Tuple[float, float, float]


@dataclass(frozen=True)
class Molecule:
    """A formula string and its element counts.

    Two molecules are equal when their formula text is identical.
    """

    formula: str
    elements: Mapping[str, int] = field(compare=False, hash=False)


@dataclass(frozen=True)
class BalancedEquation:
    reactants: Tuple[Molecule, ...]
    products: Tuple[Molecule, ...]
    reactant_coefficients: Tuple[int, ...]
    product_coefficients: Tuple[int, ...]
    equation: str

    @property
    def molecules(self) -> Tuple[Molecule, ...]:
        return self.reactants + self.products

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self.reactant_coefficients + self.product_coefficients

    def as_payload(self) -> Dict[str, Any]:
        return {
            "balancedEquation": self.equation,
            "reactants": [molecule.formula for molecule in self.reactants],
            "products": [molecule.formula for molecule in self.products],
            "reactantCoefficients": list(self.reactant_coefficients),
            "productCoefficients": list(self.product_coefficients),
        }


class BondOrder(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"

    @classmethod
    def from_order(cls, order: int) -> "BondOrder":
        return {1: cls.SINGLE, 2: cls.DOUBLE, 3: cls.TRIPLE}.get(order, cls.SINGLE)


@dataclass(frozen=True)
class Atom:
    element: str
    position: Position
    color: str
    radius: float


@dataclass(frozen=True)
class Bond:
    """Bond between two atoms, indexed into the owning geometry's atom list."""

    start: int
    end: int
    order: BondOrder
    distance: float


@dataclass(frozen=True)
class MoleculeGeometry:
    formula: str
    atoms: Tuple[Atom, ...] = ()
    bonds: Tuple[Bond, ...] = ()
    source: str = "heuristic"

    def as_payload(self) -> Dict[str, Any]:
        return {
            "atoms": [
                {
                    "element": atom.element,
                    "position": dict(zip("xyz", atom.position)),
                    "color": atom.color,
                    "radius": atom.radius,
                }
                for atom in self.atoms
            ],
            "bonds": [
                {
                    "from": bond.start,
                    "to": bond.end,
                    "bondType": bond.order.value,
                    "distance": bond.distance,
                }
                for bond in self.bonds
            ],
        }


@dataclass(frozen=True)
class ExternalBond:
    """Bond reported by an external structure source (0-based indices)."""

    first: int
    second: int
    order: int = 1
    distance: Optional[float] = None


@dataclass(frozen=True)
class ExternalStructure:
    """Atom and bond data supplied by a structural database."""

    atomic_numbers: Tuple[int, ...]
    coordinates: Tuple[Position, ...]
    bonds: Tuple[ExternalBond, ...] = ()

    def is_empty(self) -> bool:
        return not self.atomic_numbers
