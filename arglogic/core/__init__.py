from .proposition import (
    Operator, Atom, Compound, Proposition, Hypothesis,
    is_atomic, negate, same_proposition, same_hypothesis,
    is_bare, is_implication, is_conjunction, is_disjunction,
)
from .validation import InvalidHypothesis, validate_hypothesis, validate_hypotheses
from .state import (
    SearchState, SolveStatus,
    proposition_to_dict, proposition_from_dict,
    hypothesis_to_dict, hypothesis_from_dict, load_hypotheses,
)
from .engine import Derivation, SolveResult, find_derivation, search_step, run_search, solve

__all__ = [
    "Operator", "Atom", "Compound", "Proposition", "Hypothesis",
    "is_atomic", "negate", "same_proposition", "same_hypothesis",
    "is_bare", "is_implication", "is_conjunction", "is_disjunction",
    "InvalidHypothesis", "validate_hypothesis", "validate_hypotheses",
    "SearchState", "SolveStatus",
    "proposition_to_dict", "proposition_from_dict",
    "hypothesis_to_dict", "hypothesis_from_dict", "load_hypotheses",
    "Derivation", "SolveResult", "find_derivation", "search_step", "run_search", "solve",
]
