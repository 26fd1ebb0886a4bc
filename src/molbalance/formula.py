"""Chemical formula parsing.

Formulas are scanned left to right, keeping a stack of open groups:

- an uppercase letter starts an element symbol, following lowercase letters
  extend it;
- ASCII digits directly after a symbol or a closing parenthesis multiply it;
- ``(`` opens a nested group whose counts are multiplied by the digits after
  the matching ``)``.

Any other character is skipped, so ``"Fe2 O3"`` and ``"Fe2O3"`` parse alike.
Subscript digits such as ``"H₂O"`` are skipped too.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple

from molbalance.errors import MalformedFormulaError
from molbalance.models import ElementCount


def parse_formula(formula: str) -> ElementCount:
    """Return element counts for ``formula``, e.g. ``"Ca(OH)2"`` -> ``{"Ca": 1, "O": 2, "H": 2}``.

    Raises:
        MalformedFormulaError: a ``(`` has no matching ``)``.
    """
    groups: List[ElementCount] = [{}]
    position = 0
    while position < len(formula):
        char = formula[position]
        if char == "(":
            groups.append({})
            position += 1
        elif char == ")":
            position += 1
            # a stray ")" at top level is skipped
            if len(groups) > 1:
                inner = groups.pop()
                multiplier, position = _read_multiplier(formula, position)
                _merge(groups[-1], inner, multiplier)
        elif "A" <= char <= "Z":
            end = position + 1
            while end < len(formula) and "a" <= formula[end] <= "z":
                end += 1
            symbol = formula[position:end]
            multiplier, position = _read_multiplier(formula, end)
            _merge(groups[-1], {symbol: 1}, multiplier)
        else:
            position += 1

    if len(groups) > 1:
        raise MalformedFormulaError(f"Unterminated group in formula {formula!r}")
    return groups[0]


def element_order(formulas: Iterable[Mapping[str, int]]) -> List[str]:
    """Return every element symbol in first-seen order across ``formulas``."""
    seen: dict[str, None] = {}
    for counts in formulas:
        for symbol in counts:
            seen.setdefault(symbol, None)
    return list(seen)


def _read_multiplier(text: str, position: int) -> Tuple[int, int]:
    end = position
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == position:
        return 1, position
    return int(text[position:end]), end


def _merge(target: ElementCount, source: Mapping[str, int], multiplier: int) -> None:
    for symbol, count in source.items():
        amount = count * multiplier
        if amount:
            target[symbol] = target.get(symbol, 0) + amount
