"""MolBalance core package."""

from molbalance.balancer import balance, solve_coefficients
from molbalance.equation import split_equation
from molbalance.errors import (
    BalanceFailure,
    BalancerError,
    InvalidEquationError,
    MalformedFormulaError,
    NoSolutionError,
)
from molbalance.formula import parse_formula
from molbalance.geometry import generate_geometry
from molbalance.models import (
    Atom,
    BalancedEquation,
    Bond,
    BondOrder,
    ExternalBond,
    ExternalStructure,
    Molecule,
    MoleculeGeometry,
)
from molbalance.normalizer import normalize
from molbalance.service import SolvedEquation, solve_equation
from molbalance.solver import solve
from molbalance.stoichiometry import StoichiometricMatrix, build_matrix

__all__ = [
    "Atom",
    "BalanceFailure",
    "BalancedEquation",
    "BalancerError",
    "Bond",
    "BondOrder",
    "ExternalBond",
    "ExternalStructure",
    "InvalidEquationError",
    "MalformedFormulaError",
    "Molecule",
    "MoleculeGeometry",
    "NoSolutionError",
    "SolvedEquation",
    "StoichiometricMatrix",
    "balance",
    "build_matrix",
    "generate_geometry",
    "normalize",
    "parse_formula",
    "solve",
    "solve_coefficients",
    "solve_equation",
    "split_equation",
]
