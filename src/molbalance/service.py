"""Balance an equation and sketch every molecule in it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from molbalance.balancer import balance
from molbalance.geometry import generate_geometry
from molbalance.models import BalancedEquation, MoleculeGeometry
from molbalance.structures.base import StructureSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolvedEquation:
    input_equation: str
    balanced: BalancedEquation
    geometries: Mapping[str, MoleculeGeometry]

    @property
    def molecules(self) -> list[str]:
        return list(self.geometries)

    def as_payload(self) -> Dict[str, Any]:
        return {
            "inputEquation": self.input_equation,
            **self.balanced.as_payload(),
            "molecules": self.molecules,
            "moleculeData": {formula: geometry.as_payload() for formula, geometry in self.geometries.items()},
        }


def molecule_geometry(formula: str, source: Optional[StructureSource] = None) -> MoleculeGeometry:
    """Geometry for ``formula``, asking ``source`` first when one is given."""
    external = source.fetch(formula) if source is not None else None
    if source is not None and external is None:
        logger.info("No external structure for %s, using heuristic", formula)
    return generate_geometry(formula, external)


def solve_equation(equation: str, source: Optional[StructureSource] = None) -> SolvedEquation:
    """Balance ``equation`` and build one geometry per distinct formula.

    Raises:
        BalanceFailure: the equation could not be balanced.
    """
    balanced = balance(equation)
    geometries: Dict[str, MoleculeGeometry] = {}
    for molecule in balanced.molecules:
        if molecule.formula not in geometries:
            geometries[molecule.formula] = molecule_geometry(molecule.formula, source)
    return SolvedEquation(input_equation=equation, balanced=balanced, geometries=geometries)
