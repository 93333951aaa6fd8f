"""
Problem registry.

Each problem is a dict:
    make_hypotheses:  () -> list[Hypothesis]
    description:      str
"""

from .examples import (
    make_exo1, make_exo2, make_exo3,
    make_modus_ponens, make_modus_tollens,
    make_conjunction, make_unrelated,
)


PROBLEMS = {
    "exo1": {
        "make_hypotheses": make_exo1,
        "description": "Chain two implications from a fact: proves r",
    },
    "exo2": {
        "make_hypotheses": make_exo2,
        "description": "Disjunctive syllogism via or-to-implication rewriting: proves ~p",
    },
    "exo3": {
        "make_hypotheses": make_exo3,
        "description": "Contrapositive chaining: proves ~r => s",
    },
    "modus_ponens": {
        "make_hypotheses": make_modus_ponens,
        "description": "p, p => q: proves q",
    },
    "modus_tollens": {
        "make_hypotheses": make_modus_tollens,
        "description": "p => q, ~q: proves ~p",
    },
    "conjunction": {
        "make_hypotheses": make_conjunction,
        "description": "p ^ q, q => r: proves r",
    },
    "unrelated": {
        "make_hypotheses": make_unrelated,
        "description": "Unrelated atoms: no rule applies, search is stuck",
    },
}
