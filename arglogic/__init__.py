"""
arglogic: propositional inference by pairwise rule application.

Hypotheses are combined two at a time with modus ponens, modus tollens
and transitivity (helped along by contrapositive and or-to-implication
rewriting, and by splitting conjunctions) until a single conclusion is
left or nothing more can be derived.

Usage:
    python -m arglogic --problem exo1
    python -m arglogic --problem exo2
    python -m arglogic --load hypotheses.json
    python -m arglogic --list
"""

from .core.proposition import (
    Operator, Atom, Compound, Proposition, Hypothesis,
    is_atomic, negate, same_proposition, same_hypothesis,
    is_bare, is_implication, is_conjunction, is_disjunction,
)
from .core.validation import InvalidHypothesis, validate_hypotheses
from .core.state import SearchState, SolveStatus, load_hypotheses
from .core.engine import SolveResult, find_derivation, search_step, run_search, solve
from .inference.rules import (
    modus_ponens, modus_tollens, transitivity,
    or_to_implication, contrapositivity, apply_rules,
)
from .problems import PROBLEMS

__all__ = [
    "Operator", "Atom", "Compound", "Proposition", "Hypothesis",
    "is_atomic", "negate", "same_proposition", "same_hypothesis",
    "is_bare", "is_implication", "is_conjunction", "is_disjunction",
    "InvalidHypothesis", "validate_hypotheses",
    "SearchState", "SolveStatus", "load_hypotheses",
    "SolveResult", "find_derivation", "search_step", "run_search", "solve",
    "modus_ponens", "modus_tollens", "transitivity",
    "or_to_implication", "contrapositivity", "apply_rules",
    "PROBLEMS",
]
