"""Balancing helpers for the GUI layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from molbalance.config import Settings
from molbalance.errors import BalanceFailure
from molbalance.models import MoleculeGeometry
from molbalance.service import solve_equation
from molbalance.structures import PubChemSource


@dataclass(frozen=True)
class BalanceInputs:
    equation: str
    online: bool = False


@dataclass(frozen=True)
class BalanceView:
    balanced_equation: Optional[str] = None
    error: Optional[str] = None
    geometries: Mapping[str, MoleculeGeometry] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None


def run_balance(inputs: BalanceInputs, settings: Optional[Settings] = None) -> BalanceView:
    settings = settings or Settings()
    equation = inputs.equation.strip()
    if not equation:
        return BalanceView(error="Please provide a chemical equation")

    source = None
    if inputs.online:
        source = PubChemSource(base_url=settings.pubchem_url, timeout=settings.pubchem_timeout)

    try:
        solved = solve_equation(equation, source)
    except BalanceFailure as error:
        return BalanceView(error=error.message)

    return BalanceView(balanced_equation=solved.balanced.equation, geometries=solved.geometries)
