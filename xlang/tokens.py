"""Token definitions for the xlang lexer.

A token is a classified, positioned slice of the source text. The set of
token kinds is closed: the parser dispatches on `TokenType` members only and
never on raw lexemes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class TokenType(Enum):
    EOF = auto()

    # Equality and comparison
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    ARROW = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    IF = auto()
    NULL = auto()
    OR = auto()
    RETURN = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    FUN = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()
    PERCENT = auto()

    # Increment / decrement
    INCREMENT = auto()
    DECREMENT = auto()


# Keys are uppercase: identifiers are uppercased before the lookup.
KEYWORDS: Dict[str, TokenType] = {
    'AND': TokenType.AND,
    'ELSE': TokenType.ELSE,
    'FALSE': TokenType.FALSE,
    'FOR': TokenType.FOR,
    'IF': TokenType.IF,
    'NULL': TokenType.NULL,
    'OR': TokenType.OR,
    'RETURN': TokenType.RETURN,
    'THIS': TokenType.THIS,
    'TRUE': TokenType.TRUE,
    'VAR': TokenType.VAR,
    'WHILE': TokenType.WHILE,
    'FUN': TokenType.FUN,
}


SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
    '%': TokenType.PERCENT,
}


@dataclass(frozen=True)
class Token:
    """A lexical unit with its 1-based start position."""
    kind: TokenType
    lexeme: str
    literal: Any
    line: int
    column: int

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.literal!r}, {self.line}:{self.column})"
