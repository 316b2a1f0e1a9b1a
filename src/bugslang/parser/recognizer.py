from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from bugslang.errors.base import BugsSyntaxError
from bugslang.lang.keywords import Lexicon
from bugslang.observability.trace_log import TraceLog
from bugslang.parser import actions, expressions, program, statements
from bugslang.parser.core.stream import RecognizerOptions, TokenStream


MATCHED = "matched"
NOT_MATCHED = "not_matched"
FATAL = "fatal"

RULES: dict[str, Callable[[TokenStream], bool]] = {
    "program": program.is_program,
    "allbugs_code": program.is_allbugs_code,
    "bug_definition": program.is_bug_definition,
    "var_declaration": program.is_var_declaration,
    "initialization_block": program.is_initialization_block,
    "function_definition": program.is_function_definition,
    "command": statements.is_command,
    "statement": statements.is_statement,
    "assignment_statement": statements.is_assignment_statement,
    "loop_statement": statements.is_loop_statement,
    "exit_if_statement": statements.is_exit_if_statement,
    "switch_statement": statements.is_switch_statement,
    "return_statement": statements.is_return_statement,
    "do_statement": statements.is_do_statement,
    "color_statement": statements.is_color_statement,
    "block": statements.is_block,
    "eol_group": statements.is_eol_group,
    "action": actions.is_action,
    "move_action": actions.is_move_action,
    "move_to_action": actions.is_move_to_action,
    "turn_action": actions.is_turn_action,
    "turn_to_action": actions.is_turn_to_action,
    "line_action": actions.is_line_action,
    "expression": expressions.is_expression,
    "arithmetic_expression": expressions.is_arithmetic_expression,
    "term": expressions.is_term,
    "factor": expressions.is_factor,
    "unsigned_factor": expressions.is_unsigned_factor,
    "parameter_list": expressions.is_parameter_list,
    "function_call": expressions.is_function_call,
    "comparator": expressions.is_comparator,
    "add_operator": expressions.is_add_operator,
    "multiply_operator": expressions.is_multiply_operator,
    "variable": expressions.is_variable,
}


@dataclass(frozen=True)
class Outcome:
    kind: str
    diagnostic: Optional[BugsSyntaxError] = None

    @property
    def ok(self) -> bool:
        return self.kind == MATCHED

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"ok": self.ok, "outcome": self.kind}
        if self.diagnostic is not None:
            payload["line"] = self.diagnostic.line
            payload["column"] = self.diagnostic.column
            payload["message"] = self.diagnostic.message
        return payload


class Recognizer:
    """Checks one Bugs source text against the grammar.

    Each ``is_*`` method returns True after consuming exactly the tokens of
    its nonterminal, returns False without consuming anything, or raises
    ``BugsSyntaxError`` once the construct is committed. An instance is bound
    to its text for life and keeps its position between calls.
    """

    def __init__(
        self,
        text: str,
        *,
        lexicon: Optional[Lexicon] = None,
        options: Optional[RecognizerOptions] = None,
        trace: Optional[TraceLog] = None,
    ) -> None:
        self.text = text
        self.stream = TokenStream.from_source(text, lexicon=lexicon, options=options, trace=trace)

    @property
    def line_number(self) -> int:
        return self.stream.line

    def attempt(self, rule: str = "program") -> Outcome:
        matcher = RULES.get(rule)
        if matcher is None:
            raise KeyError(f"unknown grammar rule {rule!r}")
        try:
            matched = matcher(self.stream)
        except BugsSyntaxError as err:
            return Outcome(kind=FATAL, diagnostic=err)
        return Outcome(kind=MATCHED if matched else NOT_MATCHED)

    def recognize_program(self) -> bool:
        return self.is_program()

    def is_program(self) -> bool:
        return program.is_program(self.stream)

    def is_allbugs_code(self) -> bool:
        return program.is_allbugs_code(self.stream)

    def is_bug_definition(self) -> bool:
        return program.is_bug_definition(self.stream)

    def is_var_declaration(self) -> bool:
        return program.is_var_declaration(self.stream)

    def is_initialization_block(self) -> bool:
        return program.is_initialization_block(self.stream)

    def is_function_definition(self) -> bool:
        return program.is_function_definition(self.stream)

    def is_command(self) -> bool:
        return statements.is_command(self.stream)

    def is_statement(self) -> bool:
        return statements.is_statement(self.stream)

    def is_assignment_statement(self) -> bool:
        return statements.is_assignment_statement(self.stream)

    def is_loop_statement(self) -> bool:
        return statements.is_loop_statement(self.stream)

    def is_exit_if_statement(self) -> bool:
        return statements.is_exit_if_statement(self.stream)

    def is_switch_statement(self) -> bool:
        return statements.is_switch_statement(self.stream)

    def is_return_statement(self) -> bool:
        return statements.is_return_statement(self.stream)

    def is_do_statement(self) -> bool:
        return statements.is_do_statement(self.stream)

    def is_color_statement(self) -> bool:
        return statements.is_color_statement(self.stream)

    def is_block(self) -> bool:
        return statements.is_block(self.stream)

    def is_eol(self) -> bool:
        return statements.is_eol_group(self.stream)

    def is_action(self) -> bool:
        return actions.is_action(self.stream)

    def is_move_action(self) -> bool:
        return actions.is_move_action(self.stream)

    def is_move_to_action(self) -> bool:
        return actions.is_move_to_action(self.stream)

    def is_turn_action(self) -> bool:
        return actions.is_turn_action(self.stream)

    def is_turn_to_action(self) -> bool:
        return actions.is_turn_to_action(self.stream)

    def is_line_action(self) -> bool:
        return actions.is_line_action(self.stream)

    def is_expression(self) -> bool:
        return expressions.is_expression(self.stream)

    def is_arithmetic_expression(self) -> bool:
        return expressions.is_arithmetic_expression(self.stream)

    def is_term(self) -> bool:
        return expressions.is_term(self.stream)

    def is_factor(self) -> bool:
        return expressions.is_factor(self.stream)

    def is_unsigned_factor(self) -> bool:
        return expressions.is_unsigned_factor(self.stream)

    def is_parameter_list(self) -> bool:
        return expressions.is_parameter_list(self.stream)

    def is_function_call(self) -> bool:
        return expressions.is_function_call(self.stream)

    def is_comparator(self) -> bool:
        return expressions.is_comparator(self.stream)

    def is_add_operator(self) -> bool:
        return expressions.is_add_operator(self.stream)

    def is_multiply_operator(self) -> bool:
        return expressions.is_multiply_operator(self.stream)

    def is_variable(self) -> bool:
        return expressions.is_variable(self.stream)


def check_source(
    text: str,
    *,
    lexicon: Optional[Lexicon] = None,
    options: Optional[RecognizerOptions] = None,
    trace: Optional[TraceLog] = None,
) -> Outcome:
    return Recognizer(text, lexicon=lexicon, options=options, trace=trace).attempt("program")


__all__ = ["FATAL", "MATCHED", "NOT_MATCHED", "Outcome", "RULES", "Recognizer", "check_source"]
