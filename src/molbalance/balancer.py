"""Equation balancing entry points."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from molbalance.constants import ARROW
from molbalance.equation import split_equation
from molbalance.errors import BalanceFailure, BalancerError
from molbalance.formula import parse_formula
from molbalance.models import BalancedEquation, Molecule
from molbalance.normalizer import normalize
from molbalance.solver import solve
from molbalance.stoichiometry import build_matrix

logger = logging.getLogger(__name__)


def solve_coefficients(reactants: Sequence[Molecule], products: Sequence[Molecule]) -> Tuple[int, ...]:
    """Return integer coefficients for reactants followed by products.

    Raises:
        NoSolutionError: no positive balance exists.
    """
    matrix = build_matrix(reactants, products)
    return normalize(solve(matrix))


def format_side(molecules: Sequence[Molecule], coefficients: Sequence[int]) -> str:
    return " + ".join(
        molecule.formula if coefficient == 1 else f"{coefficient}{molecule.formula}"
        for molecule, coefficient in zip(molecules, coefficients)
    )


def balance(equation: str) -> BalancedEquation:
    """Balance ``equation``, e.g. ``"H2 + O2 -> H2O"`` -> ``"2H2 + O2 -> 2H2O"``.

    Raises:
        BalanceFailure: the equation could not be parsed or balanced. The
            underlying error is available as ``cause``.
    """
    try:
        reactant_formulas, product_formulas = split_equation(equation)
        reactants = tuple(Molecule(formula, parse_formula(formula)) for formula in reactant_formulas)
        products = tuple(Molecule(formula, parse_formula(formula)) for formula in product_formulas)
        coefficients = solve_coefficients(reactants, products)
    except BalancerError as error:
        logger.info("Could not balance %r: %s", equation, error)
        raise BalanceFailure(f"Could not balance the equation: {error}", cause=error) from error

    reactant_coefficients = coefficients[: len(reactants)]
    product_coefficients = coefficients[len(reactants) :]
    rendered = (
        f"{format_side(reactants, reactant_coefficients)} {ARROW} "
        f"{format_side(products, product_coefficients)}"
    )
    return BalancedEquation(
        reactants=reactants,
        products=products,
        reactant_coefficients=reactant_coefficients,
        product_coefficients=product_coefficients,
        equation=rendered,
    )
