"""GUI package for MolBalance."""

from molbalance.gui.session import BalanceInputs, BalanceView, run_balance

__all__ = ["BalanceInputs", "BalanceView", "run_balance"]
