"""Abstract Syntax Tree (AST) definitions for the xlang language.

Expressions and statements are two closed families of frozen dataclasses.
Every node owns its children outright, so a parsed program is an acyclic,
immutable tree. Operators and names keep their originating `Token` so that
diagnostics can point back into the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from .tokens import Token


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # bool, None, float or str


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    operand: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Identifier(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: Token  # AND or OR
    right: Expr


@dataclass(frozen=True)
class Call(Expr):
    callee: Expr
    paren: Token  # closing ')', used for error positions
    args: Tuple[Expr, ...]


@dataclass(frozen=True)
class FunctionExpr(Expr):
    # Reserved: the grammar has no production for it yet.
    name: Optional[Token]
    params: Tuple[Token, ...]
    body: 'BlockStmt'


# Statements

@dataclass(frozen=True)
class Stmt(Node):
    pass


@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    expression: Expr


@dataclass(frozen=True)
class VarStmt(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class BlockStmt(Stmt):
    statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]


@dataclass(frozen=True)
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class ForStmt(Stmt):
    initializer: Optional[Union[VarStmt, ExpressionStmt]]
    condition: Optional[Expr]
    increment: Optional[Expr]
    body: Stmt


@dataclass(frozen=True)
class ReturnStmt(Stmt):
    keyword: Token
    value: Optional[Expr]


@dataclass(frozen=True)
class FunctionStmt(Stmt):
    name: Token
    params: Tuple[Token, ...]
    body: BlockStmt

    def __repr__(self) -> str:
        return f"<fn {self.name.lexeme}>"


Program = List[Stmt]
