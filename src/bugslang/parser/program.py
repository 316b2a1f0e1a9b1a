from __future__ import annotations

from bugslang.parser.core.errors import raise_syntax_error
from bugslang.parser.core.helpers import begin, eof, eol, keyword, name, symbol, trace_begin
from bugslang.parser.expressions import is_variable
from bugslang.parser.statements import is_block, is_command


def is_program(stream) -> bool:
    """<program> ::= [ <allbugs code> ] <bug definition> { <bug definition> } EOF"""
    if is_allbugs_code(stream):
        if not is_bug_definition(stream):
            raise_syntax_error(stream, "Expected a Bug definition after the Allbugs block")
    elif not is_bug_definition(stream):
        return False
    while is_bug_definition(stream):
        pass
    if not eof(stream):
        raise_syntax_error(stream, "Expected end of program after the last Bug definition")
    return True


def is_allbugs_code(stream) -> bool:
    """<allbugs code> ::= "Allbugs" "{" <eol> { <var declaration> } { <function definition> } "}" <eol>"""
    if not begin(stream, "Allbugs", "Allbugs block"):
        return False
    _expect_open_brace(stream, "Allbugs")
    while is_var_declaration(stream):
        pass
    while is_function_definition(stream):
        pass
    _expect_close_brace(stream, "Allbugs block")
    return True


def is_bug_definition(stream) -> bool:
    """<bug definition> ::= "Bug" <name> "{" <eol>
                            { <var declaration> }
                            [ <initialization block> ]
                            <command> { <command> }
                            { <function definition> }
                            "}" <eol>
    """
    if not begin(stream, "Bug", "Bug definition"):
        return False
    if not name(stream):
        raise_syntax_error(stream, "Expected a name after 'Bug'")
    _expect_open_brace(stream, "the Bug name")
    while is_var_declaration(stream):
        pass
    is_initialization_block(stream)
    if not is_command(stream):
        raise_syntax_error(stream, "A Bug definition needs at least one command")
    while is_command(stream):
        pass
    while is_function_definition(stream):
        pass
    _expect_close_brace(stream, "Bug definition")
    return True


def is_var_declaration(stream) -> bool:
    """<var declaration> ::= "var" <name> { "," <name> } <eol>"""
    if not begin(stream, "var", "var declaration"):
        return False
    if not name(stream):
        raise_syntax_error(stream, "Expected a variable name after 'var'")
    while symbol(stream, ","):
        if not name(stream):
            raise_syntax_error(stream, "Expected a variable name after ','")
    if not eol(stream):
        raise_syntax_error(stream, "Expected end of line after the var declaration")
    return True


def is_initialization_block(stream) -> bool:
    if not begin(stream, "initially", "initialization block"):
        return False
    if not is_block(stream):
        raise_syntax_error(stream, "Expected a block after 'initially'")
    return True


def is_function_definition(stream) -> bool:
    """<function definition> ::= "define" <name> [ "using" <variable> { "," <variable> } ] <block>"""
    start = stream.mark()
    if not keyword(stream, "define"):
        return False
    if not name(stream):
        # the name, not "define", commits the definition
        stream.reset(start)
        return False
    trace_begin(stream, "function definition")
    if keyword(stream, "using"):
        if not is_variable(stream):
            raise_syntax_error(stream, "Expected a parameter name after 'using'")
        while symbol(stream, ","):
            if not is_variable(stream):
                raise_syntax_error(stream, "Expected a parameter name after ','")
    if not is_block(stream):
        raise_syntax_error(stream, "Expected a block as the function body")
    return True


def _expect_open_brace(stream, after: str) -> None:
    if not symbol(stream, "{"):
        raise_syntax_error(stream, f"Expected '{{' after {after}")
    if not eol(stream):
        raise_syntax_error(stream, "Expected end of line after '{'")


def _expect_close_brace(stream, construct: str) -> None:
    if not symbol(stream, "}"):
        raise_syntax_error(stream, f"Missing '}}' at the end of the {construct}")
    if not eol(stream):
        raise_syntax_error(stream, f"Expected end of line after the {construct}")


__all__ = [
    "is_allbugs_code",
    "is_bug_definition",
    "is_function_definition",
    "is_initialization_block",
    "is_program",
    "is_var_declaration",
]
