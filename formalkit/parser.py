"""Recursive-descent parsers building abstract syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from formalkit.lexer import Token, TokenType

_ADD_OPS = {TokenType.PLUS, TokenType.MINUS}
_MUL_OPS = {TokenType.MULT, TokenType.DIV}
_REL_OPS = {
    TokenType.LT,
    TokenType.LE,
    TokenType.GT,
    TokenType.GE,
    TokenType.EQ,
    TokenType.NE,
}


@dataclass
class ASTNode:
    """A syntax tree node: its kind, optional value, children and source token."""

    kind: str
    value: str = ""
    children: list[ASTNode] = field(default_factory=list)
    token: Token | None = None


class ParseError(ValueError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, token: Token) -> None:
        super().__init__(f"Неожиданный токен: {token.literal}")
        self.token = token


class _ExpressionRules:
    """Grammar rules shared by both parsers: expressions down to factors."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _current(self) -> Token:
        if self._pos >= len(self._tokens):
            return Token(TokenType.EOF)
        return self._tokens[self._pos]

    def _expect(self, token_type: TokenType) -> Token:
        token = self._current()
        if token.type != token_type:
            raise ParseError(token)
        self._pos += 1
        return token

    def _factor(self) -> ASTNode:
        token = self._current()
        if token.type in (TokenType.IDENT, TokenType.NUMBER):
            self._pos += 1
            return ASTNode("Factor", token.literal, token=token)
        if token.type == TokenType.LPAREN:
            self._pos += 1
            inner = self._arith_expr()
            self._expect(TokenType.RPAREN)
            return ASTNode("Factor", children=[inner], token=token)
        raise ParseError(token)

    def _binary(self, kind: str, op_kind: str, ops: set[TokenType], operand) -> ASTNode:
        left = operand()
        while (token := self._current()).type in ops:
            self._pos += 1
            right = operand()
            op = ASTNode(op_kind, token.literal, token=token)
            left = ASTNode(kind, children=[left, op, right], token=token)
        return left

    def _term(self) -> ASTNode:
        return self._binary("Term", "MulOp", _MUL_OPS, self._factor)

    def _arith_expr(self) -> ASTNode:
        return self._binary("ArithExpr", "AddOp", _ADD_OPS, self._term)

    def _expression(self) -> ASTNode:
        left = self._arith_expr()
        token = self._current()
        if token.type not in _REL_OPS:
            return ASTNode("Expression", children=[left], token=token)
        self._pos += 1
        right = self._arith_expr()
        op = ASTNode("RelOp", token.literal, token=token)
        return ASTNode("Expression", children=[left, op, right], token=token)


class Parser(_ExpressionRules):
    """Parses a program: begin, a list of ';'-terminated assignments, end."""

    def _operator(self) -> ASTNode:
        ident = self._expect(TokenType.IDENT)
        self._expect(TokenType.ASSIGN)
        expression = self._expression()
        target = ASTNode("Identifier", ident.literal, token=ident)
        return ASTNode("Operator", children=[target, expression], token=ident)

    def _statement(self) -> ASTNode:
        operator = self._operator()
        self._expect(TokenType.SEMICOLON)
        return operator

    def _operator_tail(self) -> ASTNode:
        operators = []
        while self._current().type != TokenType.END:
            operators.append(self._statement())
        tail = ASTNode("OperatorTail")
        for operator in reversed(operators):
            tail = ASTNode("OperatorTail", children=[operator, tail])
        return tail

    def _stmt_list(self) -> ASTNode:
        first = self._statement()
        return ASTNode("StmtList", children=[first, self._operator_tail()])

    def _block(self) -> ASTNode:
        self._expect(TokenType.BEGIN)
        statements = self._stmt_list()
        self._expect(TokenType.END)
        return ASTNode("Block", children=[statements])

    def parse(self) -> ASTNode:
        """Parse the tokens as a program and return its Program node."""
        return ASTNode("Program", children=[self._block()])


class ExpressionParser(_ExpressionRules):
    """Parses a single expression that must use up every token."""

    def parse(self) -> ASTNode:
        """Parse the tokens as one expression followed by end of input."""
        expression = self._expression()
        token = self._current()
        if token.type != TokenType.EOF:
            raise ParseError(token)
        return expression