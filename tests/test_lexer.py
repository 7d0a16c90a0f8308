import pytest

from xlang.errors import LexicalError
from xlang.lexer import lex
from xlang.tokens import TokenType


def kinds(source):
    return [t.kind for t in lex(source)]


def test_arithmetic_tokens():
    tokens = lex('1 + 2 * 3')
    assert [t.kind for t in tokens] == [
        TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER,
        TokenType.STAR, TokenType.NUMBER, TokenType.EOF,
    ]
    assert [t.literal for t in tokens[::2]] == [1.0, 2.0, 3.0]


def test_empty_source_is_just_eof():
    tokens = lex('')
    assert len(tokens) == 1
    assert tokens[0].kind == TokenType.EOF
    assert tokens[0].lexeme == ''


def test_unterminated_string():
    with pytest.raises(LexicalError) as excinfo:
        lex('"abc')
    assert 'Unterminated string' in str(excinfo.value)
    assert excinfo.value.line == 1


def test_unexpected_character_reports_position():
    with pytest.raises(LexicalError) as excinfo:
        lex('var a = 1;\n  @')
    assert excinfo.value.line == 2
    assert excinfo.value.column == 3


def test_one_and_two_character_operators():
    assert kinds('! != = == < <= > >= =>')[:-1] == [
        TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL,
        TokenType.EQUAL_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
        TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.ARROW,
    ]
    assert kinds('++ -- + - / %')[:-1] == [
        TokenType.INCREMENT, TokenType.DECREMENT, TokenType.PLUS,
        TokenType.MINUS, TokenType.SLASH, TokenType.PERCENT,
    ]


def test_keywords_are_matched_on_uppercased_text():
    assert kinds('var VAR Var fun while')[:-1] == [
        TokenType.VAR, TokenType.VAR, TokenType.VAR, TokenType.FUN, TokenType.WHILE,
    ]
    tokens = lex('variable _tmp1 eof')
    assert [t.kind for t in tokens[:-1]] == [TokenType.IDENTIFIER] * 3
    assert all(t.literal is None for t in tokens)


def test_line_comment_is_skipped():
    tokens = lex('1 // one\n2')
    assert [t.kind for t in tokens] == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert (tokens[1].line, tokens[1].column) == (2, 1)


def test_numbers():
    tokens = lex('3.14 1.')
    assert tokens[0].literal == 3.14
    assert tokens[0].lexeme == '3.14'
    # a trailing '.' is not part of the number
    assert [t.kind for t in tokens[1:]] == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
    assert tokens[1].literal == 1.0


def test_string_literal_strips_quotes_and_counts_lines():
    tokens = lex('"a\nb" x')
    assert tokens[0].kind == TokenType.STRING
    assert tokens[0].literal == 'a\nb'
    assert tokens[0].lexeme == '"a\nb"'
    assert tokens[1].line == 2


def test_token_positions():
    tokens = lex('var x = 10;\n  print(x);')
    x = tokens[1]
    assert (x.line, x.column) == (1, 5)
    print_token = tokens[5]
    assert print_token.lexeme == 'print'
    assert (print_token.line, print_token.column) == (2, 3)
