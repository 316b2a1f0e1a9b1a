import pytest

from bugslang.parser.recognizer import NOT_MATCHED, RULES
from tests.conftest import cursor, recognizer_for


NON_STARTERS = ["}\n", ", x\n", ") x\n", "! x\n"]


@pytest.mark.parametrize("rule", sorted(RULES))
@pytest.mark.parametrize("source", NON_STARTERS)
def test_failed_match_leaves_cursor_untouched(rule, source):
    recognizer = recognizer_for(source, track_lines=True)
    before = cursor(recognizer)
    assert recognizer.attempt(rule).kind == NOT_MATCHED
    assert cursor(recognizer) == before


@pytest.mark.parametrize("rule", sorted(RULES))
def test_retrying_a_failed_match_gives_the_same_answer(rule):
    recognizer = recognizer_for("}\n")
    first = recognizer.attempt(rule)
    second = recognizer.attempt(rule)
    assert first == second


def test_unknown_rule_is_rejected():
    with pytest.raises(KeyError):
        recognizer_for("move 1\n").attempt("statement_list")
