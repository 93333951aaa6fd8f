"""
Search state: the working set of hypotheses plus a derivation log.

Serializable for continuity. The JSON shape of a proposition is

    atom:      {"value": "p", "no": true}
    compound:  {"operand1": ..., "operator": "=>", "operand2": ..., "no": false}

and a hypothesis is {"operand1": ..., "operator": "V", "operand2": ...},
with operator/operand2 omitted for a bare one. "no" may be omitted and
defaults to false.
"""

from dataclasses import dataclass, field
from enum import Enum
import json

from .proposition import Atom, Compound, Hypothesis, Operator
from .validation import InvalidHypothesis


class SolveStatus(Enum):
    RUNNING = "running"
    SOLVED = "solved"
    STUCK = "stuck"


@dataclass
class SearchState:
    """
    Full state of the search, owned by the driver for the length of a run.

    working_set: hypotheses not yet combined; shrinks by one per step
    history:     log of what happened at each step
    """
    working_set: list = field(default_factory=list)
    history: list = field(default_factory=list)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""

    @property
    def status(self) -> SolveStatus:
        if len(self.working_set) <= 1:
            return SolveStatus.SOLVED
        if self.halted:
            return SolveStatus.STUCK
        return SolveStatus.RUNNING

    @property
    def result(self):
        return self.working_set[0] if self.working_set else None

    def to_dict(self):
        return {
            "working_set": [hypothesis_to_dict(h) for h in self.working_set],
            "history": self.history,
            "step": self.step,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
        }

    @classmethod
    def from_dict(cls, d):
        try:
            state = cls()
            state.working_set = [hypothesis_from_dict(h) for h in d["working_set"]]
            state.history = d.get("history", [])
            state.step = d.get("step", 0)
            state.halted = d.get("halted", False)
            state.halt_reason = d.get("halt_reason", "")
        except (KeyError, TypeError) as e:
            raise InvalidHypothesis(f"malformed state: {e}") from e
        return state

    def save(self, path="arglogic_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="arglogic_state.json"):
        return cls.from_dict(_read_json(path))


def _read_json(path):
    with open(path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidHypothesis(f"{path}: not valid JSON ({e})") from e


# ── Propositions and hypotheses <-> plain dicts ─────────────────────────────

def proposition_to_dict(p):
    if isinstance(p, Atom):
        return {"value": p.name, "no": p.negated}
    return {
        "operand1": proposition_to_dict(p.operand1),
        "operator": p.operator.value,
        "operand2": proposition_to_dict(p.operand2),
        "no": p.negated,
    }


def _operator_from_symbol(symbol):
    try:
        return Operator(symbol)
    except (ValueError, TypeError):
        raise InvalidHypothesis(f"unknown operator {symbol!r}") from None


def proposition_from_dict(d):
    if not isinstance(d, dict):
        raise InvalidHypothesis(f"expected a proposition object, got {d!r}")
    negated = d.get("no", False)
    if not isinstance(negated, bool):
        raise InvalidHypothesis(f"\"no\" must be true or false, got {negated!r}")
    if "value" in d:
        return Atom(d["value"], negated)
    try:
        return Compound(
            proposition_from_dict(d["operand1"]),
            _operator_from_symbol(d["operator"]),
            proposition_from_dict(d["operand2"]),
            negated,
        )
    except KeyError as e:
        raise InvalidHypothesis(f"compound proposition missing {e.args[0]!r}") from None


def hypothesis_to_dict(h: Hypothesis):
    d = {"operand1": proposition_to_dict(h.operand1)}
    if h.operator is not None:
        d["operator"] = h.operator.value
    if h.operand2 is not None:
        d["operand2"] = proposition_to_dict(h.operand2)
    if h.source:
        d["source"] = list(h.source)
    if h.rule:
        d["rule"] = h.rule
    if h.step:
        d["step"] = h.step
    if h.label:
        d["label"] = h.label
    return d


def hypothesis_from_dict(d) -> Hypothesis:
    if not isinstance(d, dict) or "operand1" not in d:
        raise InvalidHypothesis(f"expected a hypothesis object with operand1, got {d!r}")
    operator = d.get("operator")
    operand2 = d.get("operand2")
    source = d.get("source", [])
    if not isinstance(source, list) or not all(isinstance(s, str) for s in source):
        raise InvalidHypothesis(f"\"source\" must be a list of names, got {source!r}")
    for key in ("rule", "label"):
        if not isinstance(d.get(key, ""), str):
            raise InvalidHypothesis(f"{key!r} must be a string, got {d[key]!r}")
    step = d.get("step", 0)
    if not isinstance(step, int) or isinstance(step, bool):
        raise InvalidHypothesis(f"\"step\" must be an integer, got {step!r}")
    return Hypothesis(
        proposition_from_dict(d["operand1"]),
        _operator_from_symbol(operator) if operator is not None else None,
        proposition_from_dict(operand2) if operand2 is not None else None,
        source=tuple(source),
        rule=d.get("rule", ""),
        step=step,
        label=d.get("label", ""),
    )


def load_hypotheses(path) -> list:
    """
    Read a JSON file holding either a bare list of hypotheses or a saved
    SearchState; returns the list of hypotheses.
    """
    data = _read_json(path)
    if isinstance(data, list):
        return [hypothesis_from_dict(h) for h in data]
    return SearchState.from_dict(data).working_set
