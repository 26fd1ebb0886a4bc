"""Element-conservation matrix for a reaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from molbalance.formula import element_order
from molbalance.models import Molecule


@dataclass(frozen=True)
class StoichiometricMatrix:
    """Rows are elements, columns are reactants followed by products.

    Product columns are negated so that a valid coefficient vector ``x``
    satisfies ``values @ x == 0``.

    Shapes:
      values: (len(elements), len(molecules))
    """

    elements: Tuple[str, ...]
    molecules: Tuple[Molecule, ...]
    n_reactants: int
    values: NDArray[np.float64]

    def __post_init__(self):
        values = np.asarray(self.values, dtype=float).reshape(len(self.elements), len(self.molecules))
        object.__setattr__(self, "values", values)

    @property
    def n_elements(self) -> int:
        return int(self.values.shape[0])

    @property
    def n_molecules(self) -> int:
        return int(self.values.shape[1])


def build_matrix(reactants: Sequence[Molecule], products: Sequence[Molecule]) -> StoichiometricMatrix:
    molecules = tuple(reactants) + tuple(products)
    elements = tuple(element_order(molecule.elements for molecule in molecules))

    values = np.zeros((len(elements), len(molecules)))
    for row, symbol in enumerate(elements):
        for column, molecule in enumerate(molecules):
            sign = 1.0 if column < len(reactants) else -1.0
            values[row, column] = sign * molecule.elements.get(symbol, 0)

    return StoichiometricMatrix(
        elements=elements,
        molecules=molecules,
        n_reactants=len(reactants),
        values=values,
    )
