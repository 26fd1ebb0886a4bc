"""Linear system solver for element-conservation matrices.

The homogeneous system ``A x = 0`` is reduced with Gauss-Jordan elimination
and partial pivoting. Columns that never receive a pivot are free variables
and are set to 1; pivot variables are then back-substituted in reverse pivot
order.

**Limitation:** every free variable is set to 1 regardless of how many there
are. Reactions with more than one independent balance (e.g. two decoupled
sub-reactions written together) still get a solution, but it is not
necessarily the conventional minimal one.
"""

from __future__ import annotations

import logging
from typing import List, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from molbalance.constants import PIVOT_TOLERANCE
from molbalance.errors import NoSolutionError
from molbalance.stoichiometry import StoichiometricMatrix

logger = logging.getLogger(__name__)


def row_reduce(
    coefficients: NDArray[np.float64],
    tol: float = PIVOT_TOLERANCE,
) -> Tuple[NDArray[np.float64], List[int]]:
    """Reduce ``[coefficients | 0]`` and return it with its pivot columns.

    Pivot rows are scaled to a leading 1 and the pivot column is cleared in
    every other row. A column whose largest remaining entry is below ``tol``
    is skipped.
    """
    coefficients = np.asarray(coefficients, dtype=float)
    n_rows, n_cols = coefficients.shape
    augmented = np.hstack([coefficients, np.zeros((n_rows, 1))])

    pivots: List[int] = []
    rank = 0
    for col in range(n_cols):
        if rank >= n_rows:
            break
        pivot_row = rank + int(np.argmax(np.abs(augmented[rank:, col])))
        if abs(augmented[pivot_row, col]) < tol:
            continue

        if pivot_row != rank:
            augmented[[rank, pivot_row]] = augmented[[pivot_row, rank]]

        augmented[rank, col:] /= augmented[rank, col]
        for row in range(n_rows):
            factor = augmented[row, col]
            if row != rank and abs(factor) > tol:
                augmented[row, col:] -= factor * augmented[rank, col:]

        pivots.append(col)
        rank += 1

    return augmented, pivots


def solve(
    matrix: Union[StoichiometricMatrix, NDArray[np.float64]],
    tol: float = PIVOT_TOLERANCE,
) -> NDArray[np.float64]:
    """Return one real coefficient per column of ``matrix``.

    Raises:
        NoSolutionError: the system is inconsistent, has no constraints, or
            admits only the all-zero solution.
    """
    values = matrix.values if isinstance(matrix, StoichiometricMatrix) else np.asarray(matrix, dtype=float)
    n_rows, n_cols = values.shape
    if n_rows == 0:
        raise NoSolutionError("No elements found to balance")

    augmented, pivots = row_reduce(values, tol)
    rank = len(pivots)

    for row in range(rank, n_rows):
        if abs(augmented[row, -1]) > tol:
            raise NoSolutionError("System has no solution")

    free_columns = [col for col in range(n_cols) if col not in pivots]
    logger.debug("Reduced %dx%d system: rank=%d free=%s", n_rows, n_cols, rank, free_columns)
    if not free_columns:
        raise NoSolutionError("Only the trivial solution conserves every element")
    if len(free_columns) > 1:
        logger.warning(
            "System has %d free variables; setting each to 1 may not give the minimal balance",
            len(free_columns),
        )

    solution = np.ones(n_cols)
    for row in reversed(range(rank)):
        col = pivots[row]
        solution[col] = augmented[row, -1] - float(augmented[row, col + 1 : n_cols] @ solution[col + 1 :])
    return solution
