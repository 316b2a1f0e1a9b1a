from bugslang.errors.base import BugsError, BugsSyntaxError
from bugslang.errors.guidance import build_guidance_message
from bugslang.errors.render import format_error


SOURCE = "Bug A {\nmove\n}\n"


def test_error_string_includes_line_when_known():
    assert str(BugsSyntaxError("Bad thing", line=4)) == "Line 4: Bad thing"
    assert str(BugsError("No line")) == "No line"


def test_format_error_points_at_column():
    err = BugsSyntaxError("Incomplete move action", line=2, column=5)
    assert format_error(err, SOURCE) == "Line 2: Incomplete move action\nmove\n    ^"


def test_format_error_without_column_shows_the_line():
    err = BugsSyntaxError("Incomplete move action", line=1)
    assert format_error(err, SOURCE) == "Line 1: Incomplete move action\nBug A {"


def test_format_error_ignores_out_of_range_lines():
    err = BugsSyntaxError("Oops", line=40, column=1)
    assert format_error(err, SOURCE) == "Line 40: Oops"
    assert format_error(err) == "Line 40: Oops"


def test_guidance_message_skips_missing_parts():
    message = build_guidance_message(what="Broken.", fix="Repair it.")
    assert message == "What happened: Broken.\nFix: Repair it."
