"""
Bundled hypothesis sets.

exo1 -- p, p => q, q => r                          proves r
exo2 -- p => r, r => s, t V ~s, ~t V u, ~u         proves ~p
exo3 -- p => r, ~p => q, q => s                    proves ~r => s
"""

from ..core.proposition import Atom, Hypothesis, Operator


def _implies(a, b, label=""):
    return Hypothesis(a, Operator.IMPLIES, b, label=label)


def make_exo1() -> list:
    """Two chained implications from a single fact."""
    p, q, r = Atom("p"), Atom("q"), Atom("r")
    return [
        Hypothesis(p, label="p holds"),
        _implies(p, q, label="p implies q"),
        _implies(q, r, label="q implies r"),
    ]


def make_exo2() -> list:
    """
    Disjunctive syllogism through rewriting.

    Both disjunctions are read as implications (t V ~s as ~t => ~s,
    ~t V u as t => u); chaining them with the two implications and
    denying u gives ~p.
    """
    p, r, s, t, u = (Atom(n) for n in "prstu")
    return [
        _implies(p, r, label="p implies r"),
        _implies(r, s, label="r implies s"),
        Hypothesis(t, Operator.OR, Atom("s", negated=True), label="t or not s"),
        Hypothesis(Atom("t", negated=True), Operator.OR, u, label="not t or u"),
        Hypothesis(Atom("u", negated=True), label="not u"),
    ]


def make_exo3() -> list:
    """Needs a contrapositive to link p => r with ~p => q."""
    p, q, r, s = (Atom(n) for n in "pqrs")
    return [
        _implies(p, r, label="p implies r"),
        _implies(Atom("p", negated=True), q, label="not p implies q"),
        _implies(q, s, label="q implies s"),
    ]


def make_modus_ponens() -> list:
    p, q = Atom("p"), Atom("q")
    return [Hypothesis(p), _implies(p, q)]


def make_modus_tollens() -> list:
    p, q = Atom("p"), Atom("q")
    return [_implies(p, q), Hypothesis(Atom("q", negated=True))]


def make_conjunction() -> list:
    """Either conjunct can feed an implication."""
    p, q, r = Atom("p"), Atom("q"), Atom("r")
    return [
        Hypothesis(p, Operator.AND, q, label="p and q"),
        _implies(q, r, label="q implies r"),
    ]


def make_unrelated() -> list:
    """Nothing shared between the hypotheses: the search gets stuck."""
    return [Hypothesis(Atom("a")), Hypothesis(Atom("b")), Hypothesis(Atom("c", negated=True))]
