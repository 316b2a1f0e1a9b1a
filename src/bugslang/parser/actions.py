from __future__ import annotations

from bugslang.parser.core.errors import raise_syntax_error
from bugslang.parser.core.helpers import begin, eol, symbol
from bugslang.parser.expressions import is_expression


def is_action(stream) -> bool:
    """<action> ::= <move action> | <moveto action> | <turn action> | <turnto action> | <line action>"""
    return (
        is_move_action(stream)
        or is_move_to_action(stream)
        or is_turn_action(stream)
        or is_turn_to_action(stream)
        or is_line_action(stream)
    )


def is_move_action(stream) -> bool:
    if not begin(stream, "move", "move action"):
        return False
    _expect_expression(stream, "move")
    _expect_eol(stream, "move")
    return True


def is_move_to_action(stream) -> bool:
    if not begin(stream, "moveto", "moveto action"):
        return False
    _expect_arguments(stream, "moveto", 2)
    _expect_eol(stream, "moveto")
    return True


def is_turn_action(stream) -> bool:
    if not begin(stream, "turn", "turn action"):
        return False
    _expect_expression(stream, "turn")
    _expect_eol(stream, "turn")
    return True


def is_turn_to_action(stream) -> bool:
    if not begin(stream, "turnto", "turnto action"):
        return False
    _expect_expression(stream, "turnto")
    _expect_eol(stream, "turnto")
    return True


def is_line_action(stream) -> bool:
    """<line action> ::= "line" <expression> "," <expression> "," <expression> "," <expression> <eol>"""
    if not begin(stream, "line", "line action"):
        return False
    _expect_arguments(stream, "line", 4)
    _expect_eol(stream, "line")
    return True


def _expect_arguments(stream, action: str, count: int) -> None:
    _expect_expression(stream, action)
    for _ in range(count - 1):
        if not symbol(stream, ","):
            raise_syntax_error(stream, f"Expected ',' between the expressions of a {action} action")
        _expect_expression(stream, action)


def _expect_expression(stream, action: str) -> None:
    if not is_expression(stream):
        raise_syntax_error(stream, f"Incomplete {action} action, expected an expression")


def _expect_eol(stream, action: str) -> None:
    if not eol(stream):
        raise_syntax_error(stream, f"Expected end of line after the {action} action")


__all__ = [
    "is_action",
    "is_line_action",
    "is_move_action",
    "is_move_to_action",
    "is_turn_action",
    "is_turn_to_action",
]
