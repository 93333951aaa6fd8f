"""
Boundary checks for hypothesis sets.

The rules and the search driver assume well-formed values and never
special-case broken ones. Everything that enters solve() goes through
validate_hypotheses() first.
"""

from typing import Optional

from .proposition import Atom, Compound, Hypothesis, Operator


class InvalidHypothesis(ValueError):
    """A hypothesis (or hypothesis set) that cannot enter the search."""
    kind = "InvalidHypothesis"

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"hypothesis #{index}: {message}"
        super().__init__(message)
        self.index = index


def _check_proposition(p, index: int, where: str):
    if isinstance(p, (Atom, Compound)) and not isinstance(p.negated, bool):
        raise InvalidHypothesis(f"{where}: negated must be a bool, got {p.negated!r}", index)
    if isinstance(p, Atom):
        if not isinstance(p.name, str) or not p.name:
            raise InvalidHypothesis(f"{where}: atom name must be a non-empty string", index)
        return
    if isinstance(p, Compound):
        if not isinstance(p.operator, Operator):
            raise InvalidHypothesis(f"{where}: unknown operator {p.operator!r}", index)
        _check_proposition(p.operand1, index, f"{where}.operand1")
        _check_proposition(p.operand2, index, f"{where}.operand2")
        return
    raise InvalidHypothesis(f"{where}: expected Atom or Compound, got {type(p).__name__}", index)


def validate_hypothesis(h, index: int = 0):
    if not isinstance(h, Hypothesis):
        raise InvalidHypothesis(f"expected Hypothesis, got {type(h).__name__}", index)
    if h.operand2 is not None and h.operator is None:
        raise InvalidHypothesis("operand2 given without an operator", index)
    if h.operator is not None and h.operand2 is None:
        raise InvalidHypothesis("operator given without operand2", index)
    if h.operator is not None and not isinstance(h.operator, Operator):
        raise InvalidHypothesis(f"unknown operator {h.operator!r}", index)
    _check_proposition(h.operand1, index, "operand1")
    if h.operand2 is not None:
        _check_proposition(h.operand2, index, "operand2")


def validate_hypotheses(hypotheses) -> list:
    """
    Check a whole input set and return it as a list.

    Raises InvalidHypothesis on the first problem found.
    """
    hypotheses = list(hypotheses)
    if not hypotheses:
        raise InvalidHypothesis("at least one hypothesis is required")
    for index, h in enumerate(hypotheses):
        validate_hypothesis(h, index)
    return hypotheses
