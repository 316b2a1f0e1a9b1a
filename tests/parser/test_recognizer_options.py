import pytest

from bugslang.errors.base import BugsSyntaxError
from tests.conftest import cursor, recognizer_for


def test_dangling_sign_is_dropped_by_default():
    recognizer = recognizer_for("- )")
    assert not recognizer.is_arithmetic_expression()
    assert cursor(recognizer) == (1, 1)


def test_dangling_sign_is_restored_on_request():
    recognizer = recognizer_for("- )", restore_sign=True)
    assert not recognizer.is_arithmetic_expression()
    assert cursor(recognizer) == (0, 1)


def test_signed_operand_still_matches_with_restore_sign():
    recognizer = recognizer_for("-5 + -x", restore_sign=True)
    assert recognizer.is_arithmetic_expression()
    assert recognizer.stream.peek().kind == "EOF"


def test_diagnostics_report_line_one_by_default():
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for("Bug A {\nturn 1\nmove\n}\n").is_program()
    err = excinfo.value
    assert err.line == 1
    assert err.column is None
    assert str(err) == "Line 1: Incomplete move action, expected an expression"


def test_diagnostics_follow_consumed_lines_when_tracking():
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for("Bug A {\nturn 1\nmove\n}\n", track_lines=True).is_program()
    err = excinfo.value
    assert err.line == 3
    assert err.column == 5
    assert err.details["token_kind"] == "EOL"


def test_line_number_property_tracks_the_stream():
    recognizer = recognizer_for("Bug A {\nmove 1\n}\n", track_lines=True)
    assert recognizer.line_number == 1
    assert recognizer.is_program()
    assert recognizer.line_number == 4
