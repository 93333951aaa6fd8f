"""
Core data structures: Atom, Compound, Hypothesis.

These are the atoms of the whole system. Nothing in here depends on
inference rules or the search driver.

Propositions:
    Atom:      a named symbol, possibly negated  -- p, ~q
    Compound:  two propositions joined by an operator -- (p => q), ~(a ^ b)

Hypotheses:
    Bare:      a single standalone proposition   -- p
    Binary:    operand1 <operator> operand2      -- p => q, t V ~s, a ^ b

Every value is frozen. Negation is always an explicit field; flipping it
builds a new value, so two hypotheses never share a mutable sub-proposition.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union


class Operator(Enum):
    IMPLIES = "=>"
    AND = "^"
    OR = "V"


@dataclass(frozen=True)
class Atom:
    """An indivisible named statement."""
    name: str
    negated: bool = False

    def __str__(self):
        return f"~{self.name}" if self.negated else self.name


@dataclass(frozen=True)
class Compound:
    """Two propositions joined by IMPLIES, AND or OR."""
    operand1: "Proposition"
    operator: Operator
    operand2: "Proposition"
    negated: bool = False

    def __str__(self):
        inner = f"({self.operand1} {self.operator.value} {self.operand2})"
        return f"~{inner}" if self.negated else inner


Proposition = Union[Atom, Compound]


def is_atomic(p: Proposition) -> bool:
    return isinstance(p, Atom)


def negate(p: Proposition) -> Proposition:
    """A new proposition with the negation flag inverted."""
    return replace(p, negated=not p.negated)


def same_proposition(p1: Proposition, p2: Proposition) -> bool:
    """
    Structural equality.

    Two atoms match on (name, negated). Anything else, compound or mixed,
    is compared field by field all the way down: type, operator, both
    operands and negation.
    """
    if is_atomic(p1) and is_atomic(p2):
        return p1.name == p2.name and p1.negated == p2.negated
    if is_atomic(p1) or is_atomic(p2):
        return False
    return (
        p1.operator == p2.operator
        and p1.negated == p2.negated
        and same_proposition(p1.operand1, p2.operand1)
        and same_proposition(p1.operand2, p2.operand2)
    )


@dataclass(frozen=True)
class Hypothesis:
    """
    A unit of inference: a bare proposition or a binary relation.

    source, rule, step and label are bookkeeping and never take part in
    equality.
    """
    operand1: Proposition
    operator: Optional[Operator] = None
    operand2: Optional[Proposition] = None
    source: tuple = field(default=(), compare=False)
    rule: str = field(default="", compare=False)
    step: int = field(default=0, compare=False)
    label: str = field(default="", compare=False)

    @classmethod
    def of(cls, p: Proposition) -> "Hypothesis":
        """
        Promote a derived proposition to a hypothesis.

        A non-negated compound is unwrapped into the equivalent binary
        hypothesis so it can be used as an implication, split as a
        conjunction, or rewritten as a disjunction later on. A negated
        compound has no binary form and stays bare.
        """
        if isinstance(p, Compound) and not p.negated:
            return cls(p.operand1, p.operator, p.operand2)
        return cls(p)

    @property
    def name(self):
        if self.operand2 is None:
            return str(self.operand1)
        return f"{self.operand1} {self.operator.value} {self.operand2}"

    def __str__(self):
        return self.name


def same_hypothesis(h1: Hypothesis, h2: Hypothesis) -> bool:
    if h1.operand2 is not None and h2.operand2 is not None:
        return (same_proposition(h1.operand1, h2.operand1)
                and same_proposition(h1.operand2, h2.operand2))
    if h1.operand2 is not None or h2.operand2 is not None:
        return False
    return same_proposition(h1.operand1, h2.operand1)


def is_bare(h: Hypothesis) -> bool:
    return h.operator is None and h.operand2 is None


def is_implication(h: Hypothesis) -> bool:
    return h.operator is Operator.IMPLIES and h.operand2 is not None


def is_conjunction(h: Hypothesis) -> bool:
    return h.operator is Operator.AND and h.operand2 is not None


def is_disjunction(h: Hypothesis) -> bool:
    return h.operator is Operator.OR and h.operand2 is not None
