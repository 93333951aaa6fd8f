"""
Inference rules over pairs of hypotheses.

Each rule looks at one or two hypotheses and returns either a derived
Hypothesis or None when it does not apply. Rules are pure: inputs are
never modified, negation always builds a new proposition.

    modus_ponens       p,  p => q        |-  q
    modus_tollens      ~q, p => q        |-  ~p
    transitivity       p => q, q => r    |-  p => r
    or_to_implication  a V b             ->  ~a => b     (normalization)
    contrapositivity   a => b            ->  ~b => ~a    (normalization)
"""

from dataclasses import replace
from typing import Optional

from ..core.proposition import (
    Hypothesis, Operator,
    negate, same_proposition,
    is_bare, is_implication, is_disjunction,
)


def modus_ponens(h1: Hypothesis, h2: Hypothesis) -> Optional[Hypothesis]:
    """A fact matching an implication's antecedent yields its consequent."""
    if is_implication(h2) and is_bare(h1) and same_proposition(h1.operand1, h2.operand1):
        return Hypothesis.of(h2.operand2)
    if is_implication(h1) and is_bare(h2) and same_proposition(h1.operand1, h2.operand1):
        return Hypothesis.of(h1.operand2)
    return None


def _denies_consequent(implication: Hypothesis, fact: Hypothesis) -> bool:
    # Both sides are forced to negated form before comparing; the fact
    # itself must be a negation.
    return (
        is_bare(fact)
        and fact.operand1.negated
        and same_proposition(
            replace(implication.operand2, negated=True),
            replace(fact.operand1, negated=True),
        )
    )


def modus_tollens(h1: Hypothesis, h2: Hypothesis) -> Optional[Hypothesis]:
    """A denied consequent yields the denied antecedent."""
    if is_implication(h1) and _denies_consequent(h1, h2):
        return Hypothesis.of(negate(h1.operand1))
    if is_implication(h2) and _denies_consequent(h2, h1):
        return Hypothesis.of(negate(h2.operand1))
    return None


def transitivity(h1: Hypothesis, h2: Hypothesis) -> Optional[Hypothesis]:
    """
    Hypothetical syllogism: (a => b), (b => c) gives (a => c).

    Order matters; the search tries both transitivity(h1, h2) and
    transitivity(h2, h1).
    """
    if (is_implication(h1) and is_implication(h2)
            and same_proposition(h1.operand2, h2.operand1)):
        return Hypothesis(h1.operand1, Operator.IMPLIES, h2.operand2)
    return None


def or_to_implication(h: Hypothesis) -> Optional[Hypothesis]:
    """Rewrite a V b as ~a => b. None for anything but a disjunction."""
    if is_disjunction(h):
        return replace(h, operand1=negate(h.operand1), operator=Operator.IMPLIES)
    return None


def contrapositivity(h: Hypothesis) -> Optional[Hypothesis]:
    """Rewrite a => b as ~b => ~a. None for anything but an implication."""
    if is_implication(h):
        return replace(h, operand1=negate(h.operand2), operand2=negate(h.operand1))
    return None


# Fixed priority: the first rule that fires wins.
RULES = [
    ("modus_ponens",        modus_ponens),
    ("modus_tollens",       modus_tollens),
    ("transitivity",        transitivity),
    ("transitivity",        lambda h1, h2: transitivity(h2, h1)),
]


def apply_rules(h1: Hypothesis, h2: Hypothesis) -> Optional[Hypothesis]:
    """
    Try every rule on the pair in priority order.

    The result is stamped with the rule that fired and the names of
    both parents.
    """
    for rule_name, rule in RULES:
        result = rule(h1, h2)
        if result is not None:
            return replace(result, rule=rule_name, source=(h1.name, h2.name))
    return None
