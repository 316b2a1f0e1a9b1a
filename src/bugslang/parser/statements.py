from __future__ import annotations

from bugslang.parser.actions import is_action
from bugslang.parser.core.errors import raise_syntax_error
from bugslang.parser.core.helpers import begin, eol, keyword, symbol
from bugslang.parser.expressions import is_expression, is_parameter_list, is_variable


def is_command(stream) -> bool:
    """<command> ::= <action> | <statement>"""
    return is_action(stream) or is_statement(stream)


def is_statement(stream) -> bool:
    return (
        is_assignment_statement(stream)
        or is_loop_statement(stream)
        or is_exit_if_statement(stream)
        or is_switch_statement(stream)
        or is_return_statement(stream)
        or is_do_statement(stream)
        or is_color_statement(stream)
    )


def is_assignment_statement(stream) -> bool:
    """<assignment statement> ::= <variable> "=" <expression> <eol>

    No other command starts with a name, so the variable is the commit point.
    """
    if not is_variable(stream):
        return False
    if not symbol(stream, "="):
        raise_syntax_error(stream, "Incomplete assignment statement, expected '='")
    if not is_expression(stream):
        raise_syntax_error(stream, "Expected an expression after '='")
    _expect_eol(stream, "assignment statement")
    return True


def is_loop_statement(stream) -> bool:
    if not begin(stream, "loop", "loop statement"):
        return False
    if not is_block(stream):
        raise_syntax_error(stream, "Expected a block after 'loop'")
    return True


def is_exit_if_statement(stream) -> bool:
    """<exit if statement> ::= "exit" "if" <expression> <eol>"""
    if not begin(stream, "exit", "exit if statement"):
        return False
    if not keyword(stream, "if"):
        raise_syntax_error(stream, "Expected 'if' after 'exit'")
    if not is_expression(stream):
        raise_syntax_error(stream, "Expected a condition after 'exit if'")
    _expect_eol(stream, "exit if statement")
    return True


def is_switch_statement(stream) -> bool:
    """<switch statement> ::= "switch" "{" <eol>
                              { "case" <expression> <eol> { <command> } }
                              "}" <eol>
    """
    if not begin(stream, "switch", "switch statement"):
        return False
    if not symbol(stream, "{"):
        raise_syntax_error(stream, "Expected '{' after 'switch'")
    _expect_eol(stream, "'switch {'")
    while keyword(stream, "case"):
        if not is_expression(stream):
            raise_syntax_error(stream, "Incomplete case, expected an expression")
        _expect_eol(stream, "case expression")
        while is_command(stream):
            pass
    if not symbol(stream, "}"):
        raise_syntax_error(stream, "Switch statement must end with '}'")
    _expect_eol(stream, "switch statement")
    return True


def is_return_statement(stream) -> bool:
    if not begin(stream, "return", "return statement"):
        return False
    if not is_expression(stream):
        raise_syntax_error(stream, "Expected an expression after 'return'")
    _expect_eol(stream, "return statement")
    return True


def is_do_statement(stream) -> bool:
    """<do statement> ::= "do" <variable> [ <parameter list> ] <eol>"""
    if not begin(stream, "do", "do statement"):
        return False
    if not is_variable(stream):
        raise_syntax_error(stream, "Expected a function name after 'do'")
    is_parameter_list(stream)
    _expect_eol(stream, "do statement")
    return True


def is_color_statement(stream) -> bool:
    if not begin(stream, "color", "color statement"):
        return False
    if not keyword(stream):
        raise_syntax_error(stream, "Expected a color name after 'color'")
    _expect_eol(stream, "color statement")
    return True


def is_block(stream) -> bool:
    """<block> ::= "{" <eol> { <command> } "}" <eol>"""
    if not symbol(stream, "{"):
        return False
    if not is_eol_group(stream):
        raise_syntax_error(stream, "Expected end of line after '{'")
    while True:
        if is_command(stream):
            continue
        if symbol(stream, "}"):
            break
        raise_syntax_error(stream, "Incomplete block, expected a command or '}'")
    if not is_eol_group(stream):
        raise_syntax_error(stream, "Expected end of line after '}'")
    return True


def is_eol_group(stream) -> bool:
    """One or more consecutive end-of-line tokens."""
    if not eol(stream):
        return False
    while eol(stream):
        pass
    return True


def _expect_eol(stream, after: str) -> None:
    if not eol(stream):
        raise_syntax_error(stream, f"Expected end of line after the {after}")


__all__ = [
    "is_assignment_statement",
    "is_block",
    "is_color_statement",
    "is_command",
    "is_do_statement",
    "is_eol_group",
    "is_exit_if_statement",
    "is_loop_statement",
    "is_return_statement",
    "is_statement",
    "is_switch_statement",
]
