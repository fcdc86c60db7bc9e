import pytest

from formalkit.lexer import Lexer, TokenType
from formalkit.parser import ExpressionParser, ParseError, Parser


def parse_program(text):
    return Parser(Lexer(text).tokenize()).parse()


def parse_expression(text):
    return ExpressionParser(Lexer(text).tokenize()).parse()


def kinds(node):
    return [child.kind for child in node.children]


def test_program_structure():
    program = parse_program("begin x = 1; end")
    assert program.kind == "Program"
    block = program.children[0]
    assert block.kind == "Block"
    stmt_list = block.children[0]
    assert kinds(stmt_list) == ["Operator", "OperatorTail"]
    operator, tail = stmt_list.children
    assert kinds(operator) == ["Identifier", "Expression"]
    assert operator.children[0].value == "x"
    assert tail.children == []


def test_operator_tail_is_right_nested():
    program = parse_program("begin a = 1; b = 2; c = 3; end")
    tail = program.children[0].children[0].children[1]
    names = []
    while tail.children:
        operator, tail = tail.children
        names.append(operator.children[0].value)
    assert names == ["b", "c"]


def test_relational_assignment():
    program = parse_program("begin x = a + 1 <> b; end")
    expression = program.children[0].children[0].children[0].children[1]
    assert kinds(expression) == ["ArithExpr", "RelOp", "Factor"]
    assert expression.children[1].value == "<>"


def test_missing_semicolon_reports_token():
    with pytest.raises(ParseError) as info:
        parse_program("begin x = 1 end")
    assert info.value.token.type == TokenType.END
    assert info.value.token.literal == "end"


def test_empty_block_rejected():
    with pytest.raises(ParseError) as info:
        parse_program("begin end")
    assert info.value.token.literal == "end"


def test_missing_begin_rejected():
    with pytest.raises(ParseError) as info:
        parse_program("x = 1; end")
    assert info.value.token.literal == "x"


def test_missing_end_reports_eof():
    with pytest.raises(ParseError) as info:
        parse_program("begin x = 1;")
    assert info.value.token.type == TokenType.EOF


def test_program_ignores_trailing_tokens():
    program = parse_program("begin x = 1; end y")
    assert program.kind == "Program"


def test_expression_precedence():
    expression = parse_expression("a + b * c")
    assert expression.kind == "Expression"
    arith = expression.children[0]
    assert kinds(arith) == ["Factor", "AddOp", "Term"]
    term = arith.children[2]
    assert [c.value for c in term.children] == ["b", "*", "c"]


def test_expression_left_associative():
    arith = parse_expression("a - b - c").children[0]
    assert arith.kind == "ArithExpr"
    assert arith.children[0].kind == "ArithExpr"
    assert arith.children[2].value == "c"


def test_relational_expression():
    expression = parse_expression("a < b")
    assert [c.value for c in expression.children] == ["a", "<", "b"]
    assert expression.children[1].kind == "RelOp"


def test_parenthesised_factor():
    factor = parse_expression("(a + 1)").children[0]
    assert factor.kind == "Factor"
    assert factor.token.type == TokenType.LPAREN
    assert kinds(factor) == ["ArithExpr"]


def test_relation_inside_parentheses_rejected():
    with pytest.raises(ParseError) as info:
        parse_expression("(a < b)")
    assert info.value.token.literal == "<"


def test_trailing_tokens_rejected():
    with pytest.raises(ParseError) as info:
        parse_expression("a b")
    assert info.value.token.literal == "b"


def test_lexer_error_token_rejected():
    with pytest.raises(ParseError) as info:
        parse_expression("a $ b")
    assert info.value.token.type == TokenType.ERROR
    assert info.value.token.literal == "$"


def test_unclosed_parenthesis_reports_eof():
    with pytest.raises(ParseError) as info:
        parse_expression("(a + b")
    assert info.value.token.type == TokenType.EOF


def test_empty_expression_rejected():
    with pytest.raises(ParseError) as info:
        parse_expression("")
    assert info.value.token.type == TokenType.EOF


def test_error_message_names_token():
    with pytest.raises(ParseError, match="Неожиданный токен: \\)"):
        parse_expression(")")