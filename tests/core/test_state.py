"""
Unit tests for SearchState and its JSON form.
"""

import json
import pytest

from arglogic.core.proposition import Atom, Compound, Hypothesis, Operator
from arglogic.core.state import (
    SearchState, SolveStatus,
    proposition_from_dict, hypothesis_from_dict, hypothesis_to_dict,
    load_hypotheses,
)
from arglogic.core.engine import solve
from arglogic.core.validation import InvalidHypothesis


p, q = Atom("p"), Atom("q")


class TestStatus:
    def test_running(self):
        assert SearchState([Hypothesis(p), Hypothesis(q)]).status is SolveStatus.RUNNING

    def test_stuck(self):
        state = SearchState([Hypothesis(p), Hypothesis(q)], halted=True)
        assert state.status is SolveStatus.STUCK

    def test_solved(self):
        state = SearchState([Hypothesis(p)])
        assert state.status is SolveStatus.SOLVED
        assert state.result == Hypothesis(p)


class TestPropositionDicts:
    def test_missing_no_defaults_to_false(self):
        assert proposition_from_dict({"value": "p"}) == Atom("p")

    def test_compound(self):
        d = {"operand1": {"value": "a"}, "operator": "^",
             "operand2": {"value": "b", "no": True}, "no": True}
        assert proposition_from_dict(d) == Compound(
            Atom("a"), Operator.AND, Atom("b", True), negated=True)

    def test_unknown_operator(self):
        with pytest.raises(InvalidHypothesis, match="unknown operator"):
            proposition_from_dict({"operand1": {"value": "a"}, "operator": "->",
                                   "operand2": {"value": "b"}})

    @pytest.mark.parametrize("flag", ["false", "0", 0, 1, [], None])
    def test_no_must_be_a_boolean(self, flag):
        with pytest.raises(InvalidHypothesis, match="must be true or false"):
            proposition_from_dict({"value": "p", "no": flag})

    def test_compound_no_must_be_a_boolean(self):
        with pytest.raises(InvalidHypothesis, match="must be true or false"):
            proposition_from_dict({"operand1": {"value": "a"}, "operator": "^",
                                   "operand2": {"value": "b"}, "no": "true"})

    def test_missing_key(self):
        with pytest.raises(InvalidHypothesis, match="operand2"):
            proposition_from_dict({"operand1": {"value": "a"}, "operator": "^"})


class TestHypothesisDicts:
    def test_bare_omits_operator(self):
        assert hypothesis_to_dict(Hypothesis(p)) == {"operand1": {"value": "p", "no": False}}

    def test_bookkeeping_survives(self):
        h = Hypothesis(p, Operator.IMPLIES, q, source=("a", "b"), rule="transitivity",
                       step=2, label="chain")
        restored = hypothesis_from_dict(hypothesis_to_dict(h))
        assert restored == h
        assert restored.source == ("a", "b")
        assert restored.rule == "transitivity"
        assert restored.step == 2
        assert restored.label == "chain"

    @pytest.mark.parametrize("key, value", [
        ("source", 5),
        ("source", "ab"),
        ("source", [1, 2]),
        ("rule", 3),
        ("label", ["x"]),
        ("step", "2"),
        ("step", True),
    ])
    def test_bookkeeping_types_checked(self, key, value):
        with pytest.raises(InvalidHypothesis, match=key):
            hypothesis_from_dict({"operand1": {"value": "p"}, key: value})

    def test_unhashable_operator(self):
        with pytest.raises(InvalidHypothesis, match="unknown operator"):
            hypothesis_from_dict({"operand1": {"value": "p"}, "operator": ["=>"],
                                  "operand2": {"value": "q"}})

    def test_requires_operand1(self):
        with pytest.raises(InvalidHypothesis):
            hypothesis_from_dict({"operator": "=>"})


class TestStateSerialization:
    def test_json_round_trip(self, tmp_path):
        result = solve([Hypothesis(p), Hypothesis(p, Operator.IMPLIES, q), Hypothesis(Atom("s"))])
        path = str(tmp_path / "state.json")
        result.state.save(path)
        restored = SearchState.load(path)
        assert restored.working_set == result.state.working_set
        assert restored.history == result.state.history
        assert restored.step == result.state.step
        assert restored.status is SolveStatus.STUCK

    def test_malformed_state(self):
        with pytest.raises(InvalidHypothesis, match="malformed state"):
            SearchState.from_dict({"history": []})


class TestLoadHypotheses:
    def test_plain_list(self, tmp_path):
        data = [
            {"operand1": {"value": "p"}, "operator": "=>", "operand2": {"value": "r"}},
            {"operand1": {"value": "r"}, "operator": "=>", "operand2": {"value": "s"}},
            {"operand1": {"value": "t"}, "operator": "V", "operand2": {"value": "s", "no": True}},
            {"operand1": {"value": "t", "no": True}, "operator": "V", "operand2": {"value": "u"}},
            {"operand1": {"value": "u", "no": True}},
        ]
        path = tmp_path / "exo2.json"
        path.write_text(json.dumps(data))
        hyps = load_hypotheses(str(path))
        assert len(hyps) == 5
        assert solve(hyps).hypothesis == Hypothesis(Atom("p", negated=True))

    def test_not_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{not json")
        with pytest.raises(InvalidHypothesis, match="not valid JSON"):
            load_hypotheses(str(path))

    def test_state_not_json(self, tmp_path):
        path = tmp_path / "broken_state.json"
        path.write_text("{")
        with pytest.raises(InvalidHypothesis, match="not valid JSON"):
            SearchState.load(str(path))

    def test_saved_state(self, tmp_path):
        path = str(tmp_path / "state.json")
        SearchState([Hypothesis(p), Hypothesis(q)]).save(path)
        assert load_hypotheses(path) == [Hypothesis(p), Hypothesis(q)]
