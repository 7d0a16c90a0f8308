"""JSON serialization/deserialization for the xlang AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. Every node is written as
`{"type": "<NodeClass>", <field>: ...}` and every token as
`{"type": "Token", "kind": "<KIND>", ...}`, so a parsed program survives a
full round trip.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, List, Type

from . import ast as nodes
from .tokens import Token, TokenType


NODE_TYPES: Dict[str, Type[nodes.Node]] = {
    cls.__name__: cls
    for cls in (
        nodes.Literal, nodes.Unary, nodes.Binary, nodes.Grouping,
        nodes.Identifier, nodes.Assign, nodes.Logical, nodes.Call,
        nodes.FunctionExpr, nodes.ExpressionStmt, nodes.VarStmt,
        nodes.BlockStmt, nodes.IfStmt, nodes.WhileStmt, nodes.ForStmt,
        nodes.ReturnStmt, nodes.FunctionStmt,
    )
}


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {
        "type": "Token",
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
        "column": token.column,
    }


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["kind"]], o["lexeme"], o.get("literal"), o["line"], o["column"])


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None or isinstance(node, (int, float, str, bool)):
        return node
    if isinstance(node, (list, tuple)):
        return [ast_to_obj(n) for n in node]
    if isinstance(node, Token):
        return token_to_obj(node)
    if type(node).__name__ in NODE_TYPES:
        obj: Dict[str, Any] = {"type": type(node).__name__}
        for f in fields(node):
            obj[f.name] = ast_to_obj(getattr(node, f.name))
        return obj
    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (int, float, str, bool)):
        return obj
    if isinstance(obj, list):
        # sequence fields on nodes are tuples
        return tuple(ast_from_obj(o) for o in obj)
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Token":
        return token_from_obj(obj)
    cls = NODE_TYPES.get(t)
    if cls is None:
        raise ValueError(f"Unknown AST node type: {t}")
    return cls(**{f.name: ast_from_obj(obj.get(f.name)) for f in fields(cls)})


def program_to_obj(statements: List[nodes.Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[nodes.Stmt]:
    if obj.get("type") != "Program":
        raise ValueError("Expected a Program object")
    return [ast_from_obj(s) for s in obj["body"]]
