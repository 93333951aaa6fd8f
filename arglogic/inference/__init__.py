from .rules import (
    modus_ponens, modus_tollens, transitivity,
    or_to_implication, contrapositivity,
    RULES, apply_rules,
)

__all__ = [
    "modus_ponens", "modus_tollens", "transitivity",
    "or_to_implication", "contrapositivity",
    "RULES", "apply_rules",
]
