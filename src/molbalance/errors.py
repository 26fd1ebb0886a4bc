"""Exception hierarchy for MolBalance."""

from __future__ import annotations


class BalancerError(Exception):
    """Base class for errors raised while balancing an equation."""


class MalformedFormulaError(BalancerError):
    """A parenthesized group in a formula is never closed."""


class InvalidEquationError(BalancerError):
    """The equation text cannot be split into reactants and products."""


class NoSolutionError(BalancerError):
    """No positive set of coefficients conserves every element."""


class BalanceFailure(BalancerError):
    """Single error surfaced by :func:`molbalance.balancer.balance`.

    ``cause`` holds the underlying error, which is also chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class StoreError(Exception):
    """Base class for history store errors."""


class RecordNotFoundError(StoreError):
    pass


class NotAuthorizedError(StoreError):
    pass
