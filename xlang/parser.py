"""Recursive-descent parser for the xlang language.

The parser consumes the token list produced by `xlang.lexer` with one token
of lookahead and never backtracks. Statements are chosen by their first
token; expressions are parsed by one method per precedence level, lowest
first:

    assignment -> or -> and -> equality -> comparison -> term -> factor
    -> pre_unary -> unary -> call -> primary

Blocks have their own, narrower entry point: `block_body_statement` accepts
expression statements only, so `var`, `if`, `while`, `for` and `return` can
only appear at the top level or as the single-statement body of `if`,
`while` and `for`.

The first grammar mismatch raises `ScriptSyntaxError`; there is no
statement-level recovery. An invalid assignment target is the one error that
is reported without stopping the parse: it is collected in `Parser.reported`
and written to stderr as a warning.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .ast import (
    Assign, Binary, BlockStmt, Call, Expr, ExpressionStmt, ForStmt,
    FunctionStmt, Grouping, Identifier, IfStmt, Literal, Logical, ReturnStmt,
    Stmt, Unary, VarStmt, WhileStmt,
)
from .errors import ScriptSyntaxError
from .tokens import Token, TokenType


PREFIX_OPERATORS = (
    TokenType.BANG, TokenType.MINUS, TokenType.PLUS,
    TokenType.INCREMENT, TokenType.DECREMENT,
)


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.current = 0
        self.reported: List[ScriptSyntaxError] = []

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            statements.append(self.statement())
        return statements

    # Statements

    def statement(self) -> Stmt:
        if self.match(TokenType.VAR):
            return self.var_declaration()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.RETURN):
            return self.return_statement()
        if self.match(TokenType.LEFT_BRACE):
            return self.block()
        if self.match(TokenType.FUN):
            return self.function_declaration()
        return self.expression_statement()

    def block_body_statement(self) -> Stmt:
        return self.expression_statement()

    def block(self) -> BlockStmt:
        # the opening '{' has already been consumed
        statements: List[Stmt] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            statements.append(self.block_body_statement())
        self.consume(TokenType.RIGHT_BRACE, "Expected '}' after block.")
        return BlockStmt(tuple(statements))

    def var_declaration(self) -> VarStmt:
        name = self.consume(TokenType.IDENTIFIER, 'Expected variable name.')
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after variable declaration.")
        return VarStmt(name, initializer)

    def if_statement(self) -> IfStmt:
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'if'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after if condition.")
        then_branch = self.statement()
        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
        return IfStmt(condition, then_branch, else_branch)

    def while_statement(self) -> WhileStmt:
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'while'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after while condition.")
        return WhileStmt(condition, self.statement())

    def for_statement(self) -> ForStmt:
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'for'.")
        if self.match(TokenType.SEMICOLON):
            initializer = None
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after loop condition.")

        increment = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after for clauses.")

        return ForStmt(initializer, condition, increment, self.statement())

    def return_statement(self) -> ReturnStmt:
        keyword = self.previous()
        value = None
        if not self.check(TokenType.SEMICOLON):
            value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after return value.")
        return ReturnStmt(keyword, value)

    def function_declaration(self) -> FunctionStmt:
        name = self.consume(TokenType.IDENTIFIER, 'Expected function name.')
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after function name.")
        params: List[Token] = []
        if not self.check(TokenType.RIGHT_PAREN):
            params.append(self.consume(TokenType.IDENTIFIER, 'Expected parameter name.'))
            while self.match(TokenType.COMMA):
                params.append(self.consume(TokenType.IDENTIFIER, 'Expected parameter name.'))
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, "Expected '{' before function body.")
        return FunctionStmt(name, tuple(params), self.block())

    def expression_statement(self) -> ExpressionStmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after expression.")
        return ExpressionStmt(expr)

    # Expressions

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.logic_or()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if isinstance(expr, Identifier):
                return Assign(expr.name, value)
            self.report(self.error(equals, 'Invalid assignment target.'))
        return expr

    def logic_or(self) -> Expr:
        expr = self.logic_and()
        while self.match(TokenType.OR):
            operator = self.previous()
            expr = Logical(expr, operator, self.logic_and())
        return expr

    def logic_and(self) -> Expr:
        expr = self.equality()
        while self.match(TokenType.AND):
            operator = self.previous()
            expr = Logical(expr, operator, self.equality())
        return expr

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            expr = Binary(expr, operator, self.comparison())
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            expr = Binary(expr, operator, self.term())
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            expr = Binary(expr, operator, self.factor())
        return expr

    def factor(self) -> Expr:
        expr = self.pre_unary()
        while self.match(TokenType.SLASH, TokenType.STAR, TokenType.PERCENT):
            operator = self.previous()
            expr = Binary(expr, operator, self.pre_unary())
        return expr

    def pre_unary(self) -> Expr:
        if self.check(*PREFIX_OPERATORS):
            return self.unary()
        expr = self.primary()
        if self.match(TokenType.INCREMENT, TokenType.DECREMENT):
            return Unary(self.previous(), expr)
        return self.finish_calls(expr)

    def unary(self) -> Expr:
        if self.match(*PREFIX_OPERATORS):
            operator = self.previous()
            return Unary(operator, self.pre_unary())
        return self.call()

    def call(self) -> Expr:
        return self.finish_calls(self.primary())

    def finish_calls(self, expr: Expr) -> Expr:
        while self.match(TokenType.LEFT_PAREN):
            args: List[Expr] = []
            if not self.check(TokenType.RIGHT_PAREN):
                args.append(self.expression())
                while self.match(TokenType.COMMA):
                    args.append(self.expression())
            paren = self.consume(TokenType.RIGHT_PAREN, "Expected ')' after arguments.")
            expr = Call(expr, paren, tuple(args))
        return expr

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NULL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.IDENTIFIER):
            return Identifier(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expected ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), 'Expected expression.')

    # Token helpers

    def match(self, *kinds: TokenType) -> bool:
        if self.check(*kinds):
            self.advance()
            return True
        return False

    def consume(self, kind: TokenType, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def check(self, *kinds: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind in kinds

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def error(self, token: Token, message: str) -> ScriptSyntaxError:
        return ScriptSyntaxError(message, token.line, token.column, token.lexeme)

    def report(self, err: ScriptSyntaxError) -> None:
        self.reported.append(err)
        print(f"Warning: {err}", file=sys.stderr)


def parse(tokens: List[Token]) -> List[Stmt]:
    """Parse a token list into the program's top-level statements."""
    return Parser(tokens).parse()
