import re

from wgsl_plus.errors import ConditionalSyntaxError

from .evaluator import evaluate_expression
from .macro import Macro, MacroTable
from .macro_expander import expand_macros

NAME = r"[a-zA-Z_]\w*"

FUNCTION_DEFINE = re.compile(
    rf"^#define\s+({NAME})\(\s*({NAME}(?:\s*,\s*{NAME})*)?\s*\)\s*(.*)$"
)
OBJECT_DEFINE = re.compile(rf"^#define\s+({NAME})(?:\s+(.*))?$")
UNDEF = re.compile(rf"^#undef\s+({NAME})$")
IFDEF = re.compile(rf"^#ifdef\s+({NAME})")
IFNDEF = re.compile(rf"^#ifndef\s+({NAME})")


class ConditionalState:
    including: bool
    has_been_true: bool
    has_else: bool

    def __init__(self, including: bool) -> None:
        self.including = including
        self.has_been_true = including
        self.has_else = False


class ConditionalProcessor:
    """
    Line based `#define`/`#undef`/`#if` state machine.
    A line is kept only while every open conditional frame is including.
    """

    macros: MacroTable
    stack: list[ConditionalState]
    output: list[str]

    def __init__(self, macros: MacroTable | None = None) -> None:
        self.macros = macros if macros is not None else {}
        self.stack = []
        self.output = []

    @property
    def including(self) -> bool:
        return all(state.including for state in self.stack)

    @property
    def parent_including(self) -> bool:
        return all(state.including for state in self.stack[:-1])

    def process(self, lines: list[str]) -> list[str]:
        for line in lines:
            self.process_line(line)

        if self.stack:
            raise ConditionalSyntaxError("Unmatched #if, #ifdef, or #ifndef")
        return self.output

    def process_line(self, line: str):
        stripped = line.strip()
        if not stripped.startswith("#"):
            if self.including:
                self.output.append(expand_macros(line, self.macros))
            return

        directive = stripped.split("//", 1)[0].strip()

        if re.match(r"^#define\s+", directive):
            self._define(directive)
        elif re.match(r"^#undef\s+", directive):
            self._undef(directive)
        elif re.match(r"^#if\s+", directive):
            self._push(lambda: evaluate_expression(directive[3:], self.macros))
        elif re.match(r"^#ifdef\s+", directive):
            self._push(lambda: self._is_defined(IFDEF, directive))
        elif re.match(r"^#ifndef\s+", directive):
            self._push(lambda: not self._is_defined(IFNDEF, directive))
        elif re.match(r"^#elif\s+", directive):
            self._elif(directive[5:])
        elif re.match(r"^#else(?:\s|$)", directive):
            self._else()
        elif re.match(r"^#endif(?:\s|$)", directive):
            if not self.stack:
                raise ConditionalSyntaxError("Unexpected #endif without matching #if")
            self.stack.pop()
        elif self.including:
            # Custom directives such as `#binding` are left for later stages.
            self.output.append(line)

    def _define(self, directive: str):
        if not self.including:
            return

        match = FUNCTION_DEFINE.match(directive)
        if match:
            name, params, body = match.groups()
            params = [p.strip() for p in params.split(",")] if params else []
            self.macros[name] = Macro(body.strip(), params)
            return

        match = OBJECT_DEFINE.match(directive)
        if match is None:
            return
        name, value = match.groups()
        value = (value or "").strip()
        self.macros[name] = Macro(expand_macros(value, dict(self.macros)))

    def _undef(self, directive: str):
        if not self.including:
            return
        match = UNDEF.match(directive)
        if match:
            self.macros.pop(match.group(1), None)

    def _is_defined(self, pattern: re.Pattern, directive: str) -> bool:
        match = pattern.match(directive)
        return match is not None and match.group(1) in self.macros

    def _push(self, condition):
        # Conditions inside an excluded region are never evaluated.
        result = condition() if self.including else False
        self.stack.append(ConditionalState(result))

    def _elif(self, expression: str):
        if not self.stack:
            raise ConditionalSyntaxError("Unexpected #elif without matching #if")
        state = self.stack[-1]
        if state.has_else:
            raise ConditionalSyntaxError("Unexpected #elif after #else")

        if state.has_been_true or not self.parent_including:
            state.including = False
            return

        state.including = evaluate_expression(expression, self.macros)
        if state.including:
            state.has_been_true = True

    def _else(self):
        if not self.stack:
            raise ConditionalSyntaxError("Unexpected #else without matching #if")
        state = self.stack[-1]
        if state.has_else:
            raise ConditionalSyntaxError(
                "Multiple #else directives for the same conditional"
            )
        state.has_else = True

        if state.has_been_true:
            state.including = False
        else:
            state.including = self.parent_including
            state.has_been_true = True


def process_conditionals(lines: list[str], macros: MacroTable | None = None) -> list[str]:
    """
    Runs the conditional state machine over `lines`, returning the lines that survive with
    macros expanded. `macros` is updated in place by `#define` and `#undef`.
    """
    return ConditionalProcessor(macros).process(lines)
