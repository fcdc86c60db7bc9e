"""Lexical analysis of the small block language and its expressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable


class TokenType(IntEnum):
    """Kinds of tokens produced by the lexer."""

    EOF = 0
    ERROR = 1
    IDENT = 2
    NUMBER = 3
    BEGIN = 4
    END = 5
    SEMICOLON = 6
    ASSIGN = 7
    EQ = 8
    PLUS = 9
    MINUS = 10
    MULT = 11
    DIV = 12
    LT = 13
    LE = 14
    GT = 15
    GE = 16
    NE = 17
    LPAREN = 18
    RPAREN = 19


KEYWORDS = {
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
}

OPERATORS = {
    ";": TokenType.SEMICOLON,
    "=": TokenType.ASSIGN,
    "==": TokenType.EQ,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULT,
    "/": TokenType.DIV,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "<": TokenType.LT,
    "<=": TokenType.LE,
    ">": TokenType.GT,
    ">=": TokenType.GE,
    "<>": TokenType.NE,
}


@dataclass(frozen=True)
class Token:
    """A token kind with the text it was read from."""

    type: TokenType
    literal: str = ""


class Lexer:
    """Splits source text into tokens, tracking line and column."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def _advance(self, length: int) -> str:
        chunk = self._text[self.pos:self.pos + length]
        self.pos += length
        self.column += length
        return chunk

    def _skip_whitespace(self) -> None:
        while self.pos < len(self._text):
            char = self._text[self.pos]
            if char == "\n":
                self.line += 1
                self.column = 1
                self.pos += 1
            elif char.isspace():
                self._advance(1)
            else:
                break

    def _operator(self) -> Token | None:
        for width in (2, 1):
            chunk = self._text[self.pos:self.pos + width]
            if len(chunk) == width and chunk in OPERATORS:
                return Token(OPERATORS[self._advance(width)], chunk)
        return None

    def _take_while(self, accept: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self._text) and accept(self._text[self.pos]):
            self._advance(1)
        return self._text[start:self.pos]

    def next_token(self) -> Token:
        """Read the next token; EOF once the text is used up."""
        self._skip_whitespace()
        if self.pos >= len(self._text):
            return Token(TokenType.EOF)

        operator = self._operator()
        if operator is not None:
            return operator

        char = self._text[self.pos]
        if char.isalpha():
            word = self._take_while(lambda c: c.isalpha() or c.isdecimal() or c == "_")
            return Token(KEYWORDS.get(word, TokenType.IDENT), word)
        if char.isdecimal():
            return Token(TokenType.NUMBER, self._take_while(str.isdecimal))

        return Token(TokenType.ERROR, self._advance(1))

    def tokenize(self) -> list[Token]:
        """Read tokens up to and including the first EOF or ERROR token."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type in (TokenType.EOF, TokenType.ERROR):
                return tokens