"""Lexer for the xlang language.

The lexer makes a single pass over the source text and produces a list of
tokens terminated by exactly one EOF token. There is no error recovery: an
unterminated string or an unrecognised character aborts the whole lex with a
`LexicalError`.
"""

from __future__ import annotations

from typing import Any, List

from .errors import LexicalError
from .tokens import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenType


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.column = 1
        # position of the token being scanned
        self.start_line = 1
        self.start_column = 1

    def lex(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.start_column = self.column
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line, self.column))
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c == '+':
            self.add_token(TokenType.INCREMENT if self.match('+') else TokenType.PLUS)
        elif c == '-':
            self.add_token(TokenType.DECREMENT if self.match('-') else TokenType.MINUS)
        elif c == '!':
            self.add_token(TokenType.BANG_EQUAL if self.match('=') else TokenType.BANG)
        elif c == '=':
            if self.match('='):
                self.add_token(TokenType.EQUAL_EQUAL)
            elif self.match('>'):
                self.add_token(TokenType.ARROW)
            else:
                self.add_token(TokenType.EQUAL)
        elif c == '<':
            self.add_token(TokenType.LESS_EQUAL if self.match('=') else TokenType.LESS)
        elif c == '>':
            self.add_token(TokenType.GREATER_EQUAL if self.match('=') else TokenType.GREATER)
        elif c == '/':
            if self.match('/'):
                # line comment, the newline itself is left for the main loop
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.newline()
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            raise LexicalError(f"Unexpected character {c!r}", self.start_line, self.start_column)

    def string(self) -> None:
        while self.peek() != '"' and not self.is_at_end():
            if self.advance() == '\n':
                self.newline()
        if self.is_at_end():
            raise LexicalError('Unterminated string', self.line, self.column)
        self.advance()  # closing quote
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self) -> None:
        while is_digit(self.peek()):
            self.advance()
        # a '.' only belongs to the number when a digit follows it
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self) -> None:
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text.upper(), TokenType.IDENTIFIER))

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.advance()
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        self.column += 1
        return c

    def newline(self) -> None:
        self.line += 1
        self.column = 1

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def add_token(self, kind: TokenType, literal: Any = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(kind, text, literal, self.start_line, self.start_column))


def lex(source: str) -> List[Token]:
    """Convert source text into a list of tokens ending with EOF."""
    return Lexer(source).lex()
