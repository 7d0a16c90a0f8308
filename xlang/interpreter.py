"""Tree-walking interpreter for the xlang language.

The interpreter executes a list of statements directly against a flat
`Environment`; there is no compilation step. A few rules differ from what a
reader might expect and are part of the language:

* `return` produces a value but does not stop the enclosing statement list.
  A function call yields the value of the last statement of its body.
* `and` / `or` always evaluate both operands before combining them.
* Calling a user function runs a fresh `Interpreter` over the body with a
  flat snapshot of the caller's bindings, so callees cannot change the
  caller's variables and do not capture anything by reference.
"""

from __future__ import annotations

import time
from typing import Any, List, Mapping, Optional, TextIO

from .ast import (
    Assign, Binary, BlockStmt, Call, Expr, ExpressionStmt, ForStmt,
    FunctionExpr, FunctionStmt, Grouping, Identifier, IfStmt, Literal,
    Logical, ReturnStmt, Stmt, Unary, VarStmt, WhileStmt,
)
from .builtin_function import BuiltinFunction, default_builtins
from .environment import Environment
from .errors import ScriptRuntimeError
from .lexer import lex
from .parser import parse
from .tokens import Token, TokenType
from .types import (
    divide, is_number, is_truthy, remainder, strict_equals, to_string, type_name,
)


class Interpreter:
    """Executes one statement list against one environment."""
    def __init__(
        self,
        statements: List[Stmt],
        env: Optional[Environment] = None,
        builtins: Optional[Mapping[str, Any]] = None,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
        debug_fp: Optional[TextIO] = None,
    ):
        self.statements = list(statements)
        if env is None:
            env = Environment(default_builtins() if builtins is None else builtins)
        elif builtins is not None:
            env.values.update(builtins)
        self.env = env
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.elapsed_ms: Optional[float] = None
        # nested call interpreters write to their caller's handle
        self.owns_debug_fp = debug_fp is None and debug_level > 0
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if self.owns_debug_fp else debug_fp

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp is None or self.debug_fp.closed:
                self.debug_fp = open(self.debug_file, 'a', encoding='utf-8')
                self.owns_debug_fp = True
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def run(self) -> Any:
        """Execute every statement and return the last statement's value."""
        start = time.perf_counter()
        result = None
        try:
            for stmt in self.statements:
                result = self.execute(stmt)
        finally:
            self.elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.debug(f"Execution time: {self.elapsed_ms:.3f}ms")
            if self.owns_debug_fp and self.debug_fp is not None:
                self.debug_fp.close()
        return result

    def execute(self, node: Stmt) -> Any:
        if isinstance(node, ExpressionStmt):
            return self.evaluate(node.expression)
        if isinstance(node, VarStmt):
            value = self.evaluate(node.initializer) if node.initializer is not None else None
            self.env.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name.lexeme} = {to_string(value)}")
            return None
        if isinstance(node, BlockStmt):
            result = None
            for stmt in node.statements:
                result = self.execute(stmt)
            return result
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition)
            if self.debug_level >= 3:
                self.debug(f"if condition {to_string(cond)} -> {is_truthy(cond)}")
            if is_truthy(cond):
                self.execute(node.then_branch)
            elif node.else_branch is not None:
                self.execute(node.else_branch)
            return None
        if isinstance(node, WhileStmt):
            while True:
                cond = self.evaluate(node.condition)
                if self.debug_level >= 3:
                    self.debug(f"while condition {to_string(cond)} -> {is_truthy(cond)}")
                if not is_truthy(cond):
                    break
                self.execute(node.body)
            return None
        if isinstance(node, ForStmt):
            if node.initializer is not None:
                self.execute(node.initializer)
            while True:
                # a missing condition never stops the loop
                if node.condition is not None:
                    cond = self.evaluate(node.condition)
                    if self.debug_level >= 3:
                        self.debug(f"for condition {to_string(cond)} -> {is_truthy(cond)}")
                    if not is_truthy(cond):
                        break
                self.execute(node.body)
                if node.increment is not None:
                    self.evaluate(node.increment)
            return None
        if isinstance(node, FunctionStmt):
            self.env.define(node.name.lexeme, node)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name.lexeme}")
            return None
        if isinstance(node, ReturnStmt):
            # no early exit: the value is just this statement's result
            return self.evaluate(node.value) if node.value is not None else None
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression)
        if isinstance(node, Identifier):
            return self.env.get(node.name.lexeme)
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.env.assign(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name.lexeme} = {to_string(value)}")
            return value
        if isinstance(node, Logical):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            if node.operator.kind == TokenType.OR:
                return left if is_truthy(left) else right
            return right if is_truthy(left) else left
        if isinstance(node, Binary):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Unary):
            operand = self.evaluate(node.operand)
            return self.apply_unary_op(node.operator, operand)
        if isinstance(node, Call):
            callee = self.evaluate(node.callee)
            args = [self.evaluate(arg) for arg in node.args]
            return self.call_function(callee, args)
        if isinstance(node, FunctionExpr):
            raise ScriptRuntimeError('Function expressions are not supported.')
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, func: Any, args: List[Any]) -> Any:
        if isinstance(func, BuiltinFunction):
            return func(args)
        if isinstance(func, FunctionStmt):
            call_env = self.env.snapshot()
            for i, param in enumerate(func.params):
                # missing arguments are null, extra ones are ignored
                call_env.define(param.lexeme, args[i] if i < len(args) else None)
            if self.debug_level >= 3:
                self.debug(f"call {func.name.lexeme}({', '.join(to_string(a) for a in args)})")
            nested = Interpreter(
                func.body.statements,
                call_env,
                debug_level=self.debug_level,
                debug_file=self.debug_file,
                debug_fp=self.debug_fp,
            )
            return nested.run()
        if callable(func):
            return func(*args)
        raise ScriptRuntimeError('Can only call functions and builtins.')

    def apply_unary_op(self, operator: Token, operand: Any) -> Any:
        if operator.kind == TokenType.BANG:
            return not is_truthy(operand)
        if operator.kind in (TokenType.MINUS, TokenType.PLUS):
            if not is_number(operand):
                raise ScriptRuntimeError(
                    f"unary {operator.lexeme} expects a number, got {type_name(operand)}")
            return -operand if operator.kind == TokenType.MINUS else operand
        # '++' and '--' are accepted by the parser but have no runtime meaning
        raise ScriptRuntimeError(f"Unsupported operator: {operator.lexeme}")

    def apply_binary_op(self, operator: Token, a: Any, b: Any) -> Any:
        kind = operator.kind
        if kind == TokenType.PLUS:
            if isinstance(a, str) or isinstance(b, str):
                return to_string(a) + to_string(b)
            self.check_numbers(operator, a, b)
            return a + b
        if kind == TokenType.MINUS:
            self.check_numbers(operator, a, b)
            return a - b
        if kind == TokenType.STAR:
            self.check_numbers(operator, a, b)
            return a * b
        if kind == TokenType.SLASH:
            self.check_numbers(operator, a, b)
            return divide(a, b)
        if kind == TokenType.PERCENT:
            self.check_numbers(operator, a, b)
            return remainder(a, b)
        if kind in (TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL):
            if not ((is_number(a) and is_number(b)) or (isinstance(a, str) and isinstance(b, str))):
                raise ScriptRuntimeError(
                    f"comparison {operator.lexeme} not supported for {type_name(a)} and {type_name(b)}")
            if kind == TokenType.GREATER:
                return a > b
            if kind == TokenType.GREATER_EQUAL:
                return a >= b
            if kind == TokenType.LESS:
                return a < b
            return a <= b
        if kind == TokenType.EQUAL_EQUAL:
            return strict_equals(a, b)
        if kind == TokenType.BANG_EQUAL:
            return not strict_equals(a, b)
        raise ScriptRuntimeError(f"Unknown operator: {kind.name}")

    def check_numbers(self, operator: Token, a: Any, b: Any):
        if not (is_number(a) and is_number(b)):
            raise ScriptRuntimeError(
                f"unsupported {operator.lexeme} for {type_name(a)} and {type_name(b)} "
                f"at line {operator.line}")


def parse_program(source: str) -> List[Stmt]:
    """Lex and parse source text into top-level statements."""
    return parse(lex(source))


def evaluate(statements: List[Stmt], env: Optional[Environment] = None) -> Any:
    """Run parsed statements and return the last statement's value."""
    return Interpreter(statements, env).run()


def run_program(
    source: str,
    env: Optional[Environment] = None,
    builtins: Optional[Mapping[str, Any]] = None,
    debug_level: int = 0,
) -> Any:
    """Convenience function to lex, parse and run an xlang program."""
    statements = parse_program(source)
    interpreter = Interpreter(statements, env, builtins=builtins, debug_level=debug_level)
    return interpreter.run()
