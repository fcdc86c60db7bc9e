import pytest

from formalkit.lexer import Lexer, Token, TokenType


def types(text):
    return [token.type for token in Lexer(text).tokenize()]


def test_block_program_tokens():
    tokens = Lexer("begin x = 1; end").tokenize()
    assert tokens == [
        Token(TokenType.BEGIN, "begin"),
        Token(TokenType.IDENT, "x"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.NUMBER, "1"),
        Token(TokenType.SEMICOLON, ";"),
        Token(TokenType.END, "end"),
        Token(TokenType.EOF, ""),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("==", TokenType.EQ),
        ("<=", TokenType.LE),
        (">=", TokenType.GE),
        ("<>", TokenType.NE),
        ("<", TokenType.LT),
        (">", TokenType.GT),
        ("=", TokenType.ASSIGN),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.MULT),
        ("/", TokenType.DIV),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
    ],
)
def test_operators(text, expected):
    tokens = Lexer(text).tokenize()
    assert tokens == [Token(expected, text), Token(TokenType.EOF)]


def test_two_character_operator_preferred():
    assert types("a<=b") == [TokenType.IDENT, TokenType.LE, TokenType.IDENT, TokenType.EOF]


def test_equals_then_assign():
    tokens = Lexer("===").tokenize()
    assert [t.literal for t in tokens] == ["==", "=", ""]


def test_identifier_with_digits_and_underscore():
    tokens = Lexer("a_b1 + c").tokenize()
    assert tokens[0] == Token(TokenType.IDENT, "a_b1")


def test_keywords_are_case_sensitive():
    assert types("Begin end") == [TokenType.IDENT, TokenType.END, TokenType.EOF]


def test_number_then_identifier():
    tokens = Lexer("12ab").tokenize()
    assert tokens == [
        Token(TokenType.NUMBER, "12"),
        Token(TokenType.IDENT, "ab"),
        Token(TokenType.EOF),
    ]


def test_error_token_stops_tokenizing():
    tokens = Lexer("x $ y").tokenize()
    assert tokens == [Token(TokenType.IDENT, "x"), Token(TokenType.ERROR, "$")]


def test_leading_underscore_is_error():
    tokens = Lexer("_a").tokenize()
    assert tokens == [Token(TokenType.ERROR, "_")]


def test_empty_input_gives_eof():
    assert Lexer("   \n\t").tokenize() == [Token(TokenType.EOF)]


def test_eof_repeats():
    lexer = Lexer("a")
    lexer.next_token()
    assert lexer.next_token() == Token(TokenType.EOF)
    assert lexer.next_token() == Token(TokenType.EOF)


def test_line_and_column_tracking():
    lexer = Lexer("a\n\n  bc")
    lexer.tokenize()
    assert lexer.line == 3
    assert lexer.column == 5


def test_tokenize_ends_with_eof_or_error():
    for text in ["begin a = (b + 2) * c; end", "a ? b", ""]:
        tokens = Lexer(text).tokenize()
        assert tokens[-1].type in (TokenType.EOF, TokenType.ERROR)
        assert all(t.type not in (TokenType.EOF, TokenType.ERROR) for t in tokens[:-1])