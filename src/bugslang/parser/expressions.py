from __future__ import annotations

from bugslang.parser.core.errors import raise_syntax_error
from bugslang.parser.core.helpers import name, number, symbol


def is_expression(stream) -> bool:
    """<expression> ::= <arithmetic expression> { <comparator> <arithmetic expression> }"""
    if not is_arithmetic_expression(stream):
        return False
    while is_comparator(stream):
        if not is_arithmetic_expression(stream):
            raise_syntax_error(stream, "Expected an arithmetic expression after the comparator")
    return True


def is_arithmetic_expression(stream) -> bool:
    """<arithmetic expression> ::= [ <add operator> ] <term> { <add operator> <term> }

    A leading sign that is not followed by a term is dropped unless the
    stream's ``restore_sign`` option is set.
    """
    start = stream.mark()
    signed = symbol(stream, "+") or symbol(stream, "-")
    if not is_term(stream):
        if signed and stream.options.restore_sign:
            stream.reset(start)
        return False
    while is_add_operator(stream):
        if not is_term(stream):
            raise_syntax_error(stream, "Expected a term after '+' or '-'")
    return True


def is_term(stream) -> bool:
    """<term> ::= <factor> { <multiply operator> <term> }"""
    if not is_factor(stream):
        return False
    while is_multiply_operator(stream):
        if not is_term(stream):
            raise_syntax_error(stream, "Expected a term after '*' or '/'")
    return True


def is_factor(stream) -> bool:
    """<factor> ::= [ <add operator> ] <unsigned factor>"""
    if symbol(stream, "+") or symbol(stream, "-"):
        if is_unsigned_factor(stream):
            return True
        raise_syntax_error(stream, "Expected a factor after unary '+' or '-'")
    return is_unsigned_factor(stream)


def is_unsigned_factor(stream) -> bool:
    """<unsigned factor> ::= <variable> [ "." <name> | <parameter list> ]
                           | <number>
                           | "(" <expression> ")"
    """
    if is_variable(stream):
        if symbol(stream, "."):
            if name(stream):
                return True
            raise_syntax_error(stream, "Expected a name after '.'")
        is_parameter_list(stream)
        return True
    if number(stream):
        return True
    if symbol(stream, "("):
        if not is_expression(stream):
            raise_syntax_error(stream, "Expected an expression after '('")
        if not symbol(stream, ")"):
            raise_syntax_error(stream, "Unclosed parenthesized expression, expected ')'")
        return True
    return False


def is_parameter_list(stream) -> bool:
    """<parameter list> ::= "(" [ <expression> { "," <expression> } ] ")" """
    if not symbol(stream, "("):
        return False
    if is_expression(stream):
        while symbol(stream, ","):
            if not is_expression(stream):
                raise_syntax_error(stream, "Expected an expression after ','")
    if not symbol(stream, ")"):
        raise_syntax_error(stream, "Parameter list must end with ')'")
    return True


def is_function_call(stream) -> bool:
    """<function call> ::= <name> <parameter list>"""
    start = stream.mark()
    if not name(stream):
        return False
    if not is_parameter_list(stream):
        stream.reset(start)
        return False
    return True


def is_add_operator(stream) -> bool:
    return symbol(stream, "+") or symbol(stream, "-")


def is_multiply_operator(stream) -> bool:
    return symbol(stream, "*") or symbol(stream, "/")


def is_variable(stream) -> bool:
    return name(stream)


def is_comparator(stream) -> bool:
    """<comparator> ::= "<" | ">" | "<=" | ">=" | "=" | "!="

    Each comparator arrives as one or two single-character symbols.
    """
    if symbol(stream, "<") or symbol(stream, ">"):
        symbol(stream, "=")
        return True
    if symbol(stream, "="):
        return True
    start = stream.mark()
    if symbol(stream, "!"):
        if symbol(stream, "="):
            return True
        stream.reset(start)
    return False


__all__ = [
    "is_add_operator",
    "is_arithmetic_expression",
    "is_comparator",
    "is_expression",
    "is_factor",
    "is_function_call",
    "is_multiply_operator",
    "is_parameter_list",
    "is_term",
    "is_unsigned_factor",
    "is_variable",
]
