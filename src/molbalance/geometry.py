"""3D atom and bond layouts for rendering molecules.

When a structural database supplies coordinates they are used as-is.
Otherwise a deterministic sketch is built: H2, O2 and H2O use fixed
templates, anything else puts one atom of a central element at the origin
and spirals the remaining atoms around it at typical bond lengths.

The sketch is meant to look reasonable, not to be chemically accurate.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import numpy as np
from scipy.spatial.distance import euclidean

from molbalance.elements import bond_length, display_color, display_radius, symbol_for
from molbalance.errors import BalancerError
from molbalance.formula import parse_formula
from molbalance.models import (
    Atom,
    Bond,
    BondOrder,
    ExternalStructure,
    MoleculeGeometry,
    Position,
)

logger = logging.getLogger(__name__)

ATOMS_PER_RING = 8
AZIMUTH_STEP = np.pi / 4  # 45°
POLAR_STEP = np.pi / 6  # 30°
POLAR_OFFSET = np.pi / 12  # 15°

WATER_BOND_LENGTH = 0.96  # Å
WATER_BOND_ANGLE = np.deg2rad(104.5)


def generate_geometry(formula: str, external: Optional[ExternalStructure] = None) -> MoleculeGeometry:
    """Return a geometry for ``formula``, preferring ``external`` data when usable.

    Never raises: malformed external data and unparsable formulas fall back
    to the heuristic and to an empty geometry respectively.
    """
    if external is not None and not external.is_empty():
        try:
            geometry = from_external(formula, external)
        except (TypeError, ValueError):
            geometry = None
        if geometry is not None:
            return geometry
        logger.warning("Ignoring malformed structure data for %s", formula)
    return heuristic_geometry(formula)


def from_external(formula: str, structure: ExternalStructure) -> Optional[MoleculeGeometry]:
    """Convert externally supplied atoms and bonds, or return None if inconsistent."""
    if len(structure.coordinates) != len(structure.atomic_numbers):
        return None

    atoms: List[Atom] = []
    for atomic_number, coordinates in zip(structure.atomic_numbers, structure.coordinates):
        if len(coordinates) != 3:
            return None
        position = (float(coordinates[0]), float(coordinates[1]), float(coordinates[2]))
        atoms.append(_make_atom(symbol_for(atomic_number), position))

    bonds: List[Bond] = []
    for external_bond in structure.bonds:
        if not (0 <= external_bond.first < len(atoms) and 0 <= external_bond.second < len(atoms)):
            return None
        bond = _make_bond(atoms, external_bond.first, external_bond.second, BondOrder.from_order(external_bond.order))
        if external_bond.distance is not None:
            bond = Bond(bond.start, bond.end, bond.order, float(external_bond.distance))
        bonds.append(bond)

    return MoleculeGeometry(formula=formula, atoms=tuple(atoms), bonds=tuple(bonds), source="external")


def heuristic_geometry(formula: str) -> MoleculeGeometry:
    template = TEMPLATES.get(formula)
    if template is not None:
        return template()

    try:
        counts = parse_formula(formula)
    except (BalancerError, ValueError) as error:
        logger.warning("Cannot sketch %s: %s", formula, error)
        return MoleculeGeometry(formula=formula)
    if not counts:
        return MoleculeGeometry(formula=formula)

    central = next((symbol for symbol in counts if symbol != "H"), next(iter(counts)))
    remaining = dict(counts)
    remaining[central] -= 1

    atoms = [_make_atom(central, (0.0, 0.0, 0.0))]
    bonds: List[Bond] = []
    step = 0
    for symbol, count in remaining.items():
        for _ in range(count):
            radius = bond_length(central, symbol)
            phi = (step % ATOMS_PER_RING) * AZIMUTH_STEP
            theta = (step // ATOMS_PER_RING) * POLAR_STEP + POLAR_OFFSET
            position = (
                float(radius * np.sin(theta) * np.cos(phi)),
                float(radius * np.sin(theta) * np.sin(phi)),
                float(radius * np.cos(theta)),
            )
            atoms.append(_make_atom(symbol, position))
            bonds.append(_make_bond(atoms, 0, len(atoms) - 1, BondOrder.SINGLE))
            step += 1

    return MoleculeGeometry(formula=formula, atoms=tuple(atoms), bonds=tuple(bonds))


def _diatomic(symbol: str, length: float, order: BondOrder) -> Callable[[], MoleculeGeometry]:
    def build() -> MoleculeGeometry:
        atoms = [_make_atom(symbol, (0.0, 0.0, 0.0)), _make_atom(symbol, (0.0, 0.0, length))]
        return MoleculeGeometry(
            formula=f"{symbol}2",
            atoms=tuple(atoms),
            bonds=(_make_bond(atoms, 0, 1, order),),
            source="template",
        )

    return build


def _water() -> MoleculeGeometry:
    half_angle = WATER_BOND_ANGLE / 2
    x = float(WATER_BOND_LENGTH * np.sin(half_angle))
    z = float(WATER_BOND_LENGTH * np.cos(half_angle))
    atoms = [
        _make_atom("O", (0.0, 0.0, 0.0)),
        _make_atom("H", (x, 0.0, z)),
        _make_atom("H", (-x, 0.0, z)),
    ]
    bonds = (
        _make_bond(atoms, 0, 1, BondOrder.SINGLE),
        _make_bond(atoms, 0, 2, BondOrder.SINGLE),
    )
    return MoleculeGeometry(formula="H2O", atoms=tuple(atoms), bonds=bonds, source="template")


TEMPLATES: Dict[str, Callable[[], MoleculeGeometry]] = {
    "H2": _diatomic("H", 0.74, BondOrder.SINGLE),
    "O2": _diatomic("O", 1.48, BondOrder.DOUBLE),
    "H2O": _water,
}


def _make_atom(symbol: str, position: Position) -> Atom:
    return Atom(element=symbol, position=position, color=display_color(symbol), radius=display_radius(symbol))


def _make_bond(atoms: List[Atom], start: int, end: int, order: BondOrder) -> Bond:
    distance = float(euclidean(atoms[start].position, atoms[end].position))
    return Bond(start=start, end=end, order=order, distance=distance)
