import pytest

from bugslang.errors.base import BugsSyntaxError
from bugslang.parser.recognizer import NOT_MATCHED
from tests.conftest import cursor, recognizer_for, remaining_kinds


def test_function_without_parameters():
    recognizer = recognizer_for("define spin {\nturn 360\n}\n")
    assert recognizer.is_function_definition()
    assert remaining_kinds(recognizer) == ["EOF"]


def test_function_with_parameters():
    recognizer = recognizer_for("define grow using a, b {\nreturn a + b\n}\n")
    assert recognizer.is_function_definition()
    assert remaining_kinds(recognizer) == ["EOF"]


@pytest.mark.parametrize(
    "source, fragment",
    [
        ("define grow using {\nmove 1\n}\n", "after 'using'"),
        ("define grow using a, {\nmove 1\n}\n", "after ','"),
        ("define grow\nmove 1\n", "function body"),
    ],
)
def test_broken_function_definitions_are_fatal(source, fragment):
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for(source).is_function_definition()
    assert fragment in str(excinfo.value)


def test_function_definitions_follow_commands_in_a_bug():
    source = "Bug A {\nmove 1\ndefine spin {\nturn 1\n}\ndefine hop using n {\nmove n\n}\n}\n"
    assert recognizer_for(source).is_program()


def test_commands_after_function_definitions_are_fatal():
    source = "Bug A {\nmove 1\ndefine spin {\nturn 1\n}\nmove 2\n}\n"
    with pytest.raises(BugsSyntaxError):
        recognizer_for(source).is_program()


def test_define_without_a_name_is_not_a_function_definition():
    recognizer = recognizer_for("define {\nmove 1\n}\n")
    assert recognizer.attempt("function_definition").kind == NOT_MATCHED
    assert cursor(recognizer) == (0, 1)
    assert remaining_kinds(recognizer)[0] == "KEYWORD"


def test_nameless_define_inside_a_bug_reports_the_missing_brace():
    source = "Bug A {\nmove 1\ndefine {\nturn 1\n}\n}\n"
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for(source).is_program()
    assert "'}'" in str(excinfo.value)
