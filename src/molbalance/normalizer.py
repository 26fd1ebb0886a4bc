"""Conversion of real solver output to small positive integers."""

from __future__ import annotations

import logging
from fractions import Fraction
from functools import reduce
from math import gcd, lcm
from typing import Sequence, Tuple

from molbalance.constants import MAX_DENOMINATOR
from molbalance.errors import NoSolutionError

logger = logging.getLogger(__name__)


def _gcd_list(xs: Sequence[int]) -> int:
    xs = [abs(x) for x in xs if x != 0]
    return reduce(gcd, xs, 0) if xs else 1


def rationalize(value: float, max_denominator: int = MAX_DENOMINATOR) -> Fraction:
    """Closest fraction to ``value`` with a bounded denominator (continued fractions)."""
    return Fraction(float(value)).limit_denominator(max_denominator)


def normalize(solution: Sequence[float], max_denominator: int = MAX_DENOMINATOR) -> Tuple[int, ...]:
    """Scale ``solution`` to the smallest vector of positive integers.

    Each value is rationalized, the vector is multiplied by the LCM of the
    denominators and rounded. Non-positive entries are lifted by adding
    ``|min| + 1`` to every entry, which keeps ratios intact only when the
    input was already sign-consistent. The result is divided by the GCD of
    its entries.

    Raises:
        NoSolutionError: every scaled entry is zero.
    """
    fractions = [rationalize(value, max_denominator) for value in solution]
    scale = lcm(*(fraction.denominator for fraction in fractions)) if fractions else 1
    integers = [round(fraction * scale) for fraction in fractions]

    if not any(integers):
        raise NoSolutionError("Solution vector is all zeros")

    lowest = min(integers)
    if lowest <= 0:
        offset = abs(lowest) + 1
        logger.warning("Shifting coefficients %s by %d to make them positive", integers, offset)
        integers = [value + offset for value in integers]

    divisor = _gcd_list(integers)
    return tuple(value // divisor for value in integers)
