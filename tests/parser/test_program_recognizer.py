import pytest

from bugslang.errors.base import BugsSyntaxError
from bugslang.parser.recognizer import FATAL, MATCHED, NOT_MATCHED, check_source
from tests.conftest import recognizer_for, remaining_kinds


FULL_PROGRAM = "\n".join(
    [
        "// shared state",
        "Allbugs {",
        "var speed, size",
        "define grow using amount {",
        "size = size + amount",
        "return size",
        "}",
        "}",
        "Bug Sally {",
        "var x",
        "initially {",
        "x = 0",
        "color red",
        "}",
        "loop {",
        "moveto x, -5",
        "x = x + speed * 2 /* faster */",
        "exit if x >= 100",
        "}",
        "switch {",
        "case x != 3",
        "line 0, 0, x, 3",
        "turnto 90",
        "case 1",
        "}",
        "do grow(2)",
        "define spin {",
        "turn 360",
        "}",
        "}",
        "Bug Fred {",
        "move Sally.x",
        "}",
    ]
) + "\n"


def test_minimal_program_is_accepted():
    assert recognizer_for("Bug A {\nmove 1\n}\n").recognize_program()


def test_missing_closing_brace_is_fatal():
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for("Bug A {\nmove 1\n").is_program()
    assert excinfo.value.line == 1


def test_full_program_is_accepted():
    # the leading comment line still leaves its newline behind
    source = FULL_PROGRAM.split("\n", 1)[1]
    assert recognizer_for(source).is_program()


def test_leading_blank_line_rejects_program():
    assert not recognizer_for(FULL_PROGRAM).is_program()


def test_empty_source_is_not_a_program():
    assert not recognizer_for("").is_program()


def test_keywords_are_case_sensitive_at_top_level():
    assert not recognizer_for("bug A {\nmove 1\n}\n").is_program()


def test_allbugs_without_bug_is_fatal():
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for("Allbugs {\n}\n").is_program()
    assert "Bug definition" in str(excinfo.value)


def test_tokens_after_last_bug_are_fatal():
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for("Bug A {\nmove 1\n}\nmove 2\n").is_program()
    assert "end of program" in str(excinfo.value)


def test_blank_line_after_last_bug_is_fatal():
    with pytest.raises(BugsSyntaxError):
        recognizer_for("Bug A {\nmove 1\n}\n\n").is_program()


@pytest.mark.parametrize(
    "source, fragment",
    [
        ("Bug {\nmove 1\n}\n", "name after 'Bug'"),
        ("Bug A\nmove 1\n}\n", "Expected '{'"),
        ("Bug A { move 1\n}\n", "end of line"),
        ("Bug A {\n}\n", "at least one command"),
        ("Bug A {\ninitially {\nmove 1\n}\n}\n", "at least one command"),
        ("Bug A {\nmove 1\n} turn\n", "end of line"),
    ],
)
def test_broken_bug_definitions_are_fatal(source, fragment):
    with pytest.raises(BugsSyntaxError) as excinfo:
        recognizer_for(source).is_bug_definition()
    assert fragment in str(excinfo.value)


def test_allbugs_block_pieces_are_required():
    assert recognizer_for("Allbugs {\nvar a\n}\n").is_allbugs_code()
    with pytest.raises(BugsSyntaxError):
        recognizer_for("Allbugs\n").is_allbugs_code()
    with pytest.raises(BugsSyntaxError):
        recognizer_for("Allbugs {\nmove 1\n}\n").is_allbugs_code()


def test_var_declarations():
    assert recognizer_for("var a, b, c\n").is_var_declaration()
    for source in ("var\n", "var a,\n", "var a b\n"):
        with pytest.raises(BugsSyntaxError):
            recognizer_for(source).is_var_declaration()


def test_initialization_block():
    assert recognizer_for("initially {\nmove 1\n}\n").is_initialization_block()
    with pytest.raises(BugsSyntaxError):
        recognizer_for("initially\n").is_initialization_block()


def test_check_source_reports_tri_state_outcomes():
    assert check_source("Bug A {\nmove 1\n}\n").kind == MATCHED
    assert check_source("").kind == NOT_MATCHED
    outcome = check_source("Bug A {\nmove 1\n")
    assert outcome.kind == FATAL
    assert not outcome.ok
    assert outcome.to_dict()["line"] == 1


def test_stray_characters_leave_the_valid_prefix_to_the_matchers():
    recognizer = recognizer_for('x = 1\n"oops\n')
    assert recognizer.is_assignment_statement()
    assert remaining_kinds(recognizer) == ["QUOTED", "EOL", "EOF"]
    recognizer = recognizer_for("move 1\n\u20ac\n")
    assert recognizer.is_move_action()
    assert remaining_kinds(recognizer) == ["NAME", "EOL", "EOF"]


def test_quoted_text_in_an_action_is_a_matcher_diagnostic():
    outcome = check_source('Bug A {\nmove "x\n}\n')
    assert outcome.kind == FATAL
    assert "expected an expression" in outcome.diagnostic.message
    assert outcome.diagnostic.line == 1


def test_carriage_return_lines_and_trailing_dot_numbers_are_accepted():
    assert check_source("Bug A {\rmove 1\r}\r").kind == MATCHED
    assert check_source("Bug A {\r\nmove 1.\r\n}\r\n").kind == MATCHED
