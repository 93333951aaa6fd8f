"""
The search driver.

Scan every ordered pair of hypotheses in the working set, normalize
disjunctions into implications, split conjunctions, and try the rule
library on each candidate pair (falling back to contrapositive forms).
The first derivation wins: both parents leave the working set, the
derived hypothesis goes in at the front, and the scan starts over.

The search ends when one hypothesis is left (solved) or a full pass over
all pairs derives nothing (stuck). Each successful step shrinks the
working set by exactly one, so at most len(working_set) - 1 steps are
ever needed.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .proposition import Hypothesis, same_hypothesis, is_conjunction
from .state import SearchState, SolveStatus
from .validation import validate_hypotheses
from ..inference.rules import apply_rules, contrapositivity, or_to_implication


@dataclass(frozen=True)
class Derivation:
    """A successful rule application found at working-set indices i, j."""
    i: int
    j: int
    hypothesis: Hypothesis
    attempt: str = "direct"   # which form of the pair fired, e.g. "contrapositive of first"


@dataclass
class SolveResult:
    hypothesis: Hypothesis
    status: SolveStatus
    state: SearchState

    @property
    def solved(self):
        return self.status is SolveStatus.SOLVED


def _candidate_pairs(hyp1: Hypothesis, hyp2: Hypothesis):
    # Either conjunct may be used on its own.
    if is_conjunction(hyp1):
        yield Hypothesis(hyp1.operand1), hyp2, "left conjunct of first"
        yield Hypothesis(hyp1.operand2), hyp2, "right conjunct of first"
    if is_conjunction(hyp2):
        yield hyp1, Hypothesis(hyp2.operand1), "left conjunct of second"
        yield hyp1, Hypothesis(hyp2.operand2), "right conjunct of second"
    yield hyp1, hyp2, ""


def _try_pair(h1: Hypothesis, h2: Hypothesis) -> Optional[tuple]:
    """Returns (derived, variant) or None."""
    result = apply_rules(h1, h2)
    if result is not None:
        return result, ""
    cp1 = contrapositivity(h1)
    if cp1 is not None:
        result = apply_rules(cp1, h2)
        if result is not None:
            return result, "contrapositive of first"
    cp2 = contrapositivity(h2)
    if cp2 is not None:
        result = apply_rules(h1, cp2)
        if result is not None:
            return result, "contrapositive of second"
    return None


def find_derivation(working_set: list) -> Optional[Derivation]:
    """
    One full pass over all ordered pairs. Read-only.

    Returns the first derivation found, or None if no rule applies to any
    pair (a true fixpoint).
    """
    for i, first in enumerate(working_set):
        hyp1 = or_to_implication(first) or first
        for j, second in enumerate(working_set):
            hyp2 = or_to_implication(second) or second
            if same_hypothesis(hyp1, hyp2):
                continue
            for h1, h2, split in _candidate_pairs(hyp1, hyp2):
                found = _try_pair(h1, h2)
                if found is not None:
                    derived, variant = found
                    attempt = ", ".join(part for part in (split, variant) if part)
                    return Derivation(i, j, derived, attempt or "direct")
    return None


def _halt(state: SearchState, reason: str, verbose: bool):
    state.halted = True
    state.halt_reason = reason
    if verbose:
        print(f"  [halt] {reason}")


def search_step(state: SearchState, verbose: bool = True) -> SearchState:
    """
    Execute one step of the search.

    One step = one pass looking for a derivation. On success the two
    parents are replaced by the derived hypothesis; otherwise the state
    halts as stuck.
    """
    if len(state.working_set) <= 1:
        _halt(state, "solved", verbose)
        return state

    derivation = find_derivation(state.working_set)
    if derivation is None:
        _halt(state, "no rule applies", verbose)
        return state

    state.step += 1
    first = state.working_set[derivation.i]
    second = state.working_set[derivation.j]
    derived = replace(derivation.hypothesis,
                      source=(first.name, second.name), step=state.step)

    if verbose:
        print(f"\n--- Step {state.step}: {first.name}  +  {second.name} ---")
        print(f"  [derived] {derived.name} (rule: {derived.rule}, via {derivation.attempt})")

    rest = [h for index, h in enumerate(state.working_set)
            if index not in (derivation.i, derivation.j)]
    state.working_set = [derived] + rest

    state.history.append({
        "step": state.step,
        "combined": [first.name, second.name],
        "rule": derived.rule,
        "attempt": derivation.attempt,
        "produced": derived.name,
        "working_set_size": len(state.working_set),
    })

    if verbose:
        print(f"  Working set: {len(state.working_set)}")

    if len(state.working_set) == 1:
        _halt(state, "solved", verbose)
    return state


def run_search(
    state: SearchState,
    max_steps: int = 100,
    verbose: bool = True,
) -> SearchState:
    """
    Run the search until halted or max_steps passes have been made.

    Args:
        state:      initial state; mutated and returned
        max_steps:  safety limit on passes
        verbose:    print progress
    """
    for _ in range(max_steps):
        if state.halted:
            break
        state = search_step(state, verbose=verbose)
    if not state.halted:
        if len(state.working_set) <= 1:
            _halt(state, "solved", verbose)
        else:
            _halt(state, "max_steps reached", verbose)
    return state


def solve(
    hypotheses,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> SolveResult:
    """
    Reduce a hypothesis set to a single conclusion.

    Args:
        hypotheses: non-empty sequence of Hypothesis
        max_steps:  pass limit; default len(hypotheses) - 1, which always
                    suffices since every step removes one hypothesis
        verbose:    print progress

    Returns:
        SolveResult. hypothesis is the first element of the final working
        set whether or not the search succeeded; check status (or .solved)
        to tell a conclusion from a leftover.

    Raises:
        InvalidHypothesis if the input is empty or malformed.
    """
    hypotheses = validate_hypotheses(hypotheses)
    state = SearchState(working_set=list(hypotheses))

    if len(hypotheses) == 1:
        state.halted = True
        state.halt_reason = "solved"
    else:
        if max_steps is None:
            max_steps = len(hypotheses) - 1
        state = run_search(state, max_steps=max_steps, verbose=verbose)

    return SolveResult(state.result, state.status, state)
