"""Splitting reaction text into reactant and product formulas."""

from __future__ import annotations

from typing import List, Tuple

from molbalance.constants import ARROW, PLUS
from molbalance.errors import InvalidEquationError


def split_equation(equation: str) -> Tuple[List[str], List[str]]:
    """Split ``"A + B -> C"`` into ``(["A", "B"], ["C"])``.

    Raises:
        InvalidEquationError: the arrow is missing or repeated, or a side has
            no molecules.
    """
    arrows = equation.count(ARROW)
    if arrows != 1:
        problem = "missing" if arrows == 0 else "repeated"
        raise InvalidEquationError(f"Reaction arrow '{ARROW}' is {problem} in {equation!r}")

    left, right = equation.split(ARROW)
    reactants = _split_side(left)
    products = _split_side(right)
    if not reactants:
        raise InvalidEquationError(f"No reactants found in {equation!r}")
    if not products:
        raise InvalidEquationError(f"No products found in {equation!r}")
    return reactants, products


def _split_side(side: str) -> List[str]:
    return [part.strip() for part in side.split(PLUS) if part.strip()]
