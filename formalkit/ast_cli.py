"""Command-line front ends that parse a program file and draw its syntax tree."""

from __future__ import annotations

import sys
from typing import Sequence

from formalkit.dot import generate_dot
from formalkit.files import RenderError, read_program_file, render_dot
from formalkit.lexer import Lexer
from formalkit.parser import ASTNode, ExpressionParser, Parser, ParseError
from formalkit.rpn import ast_to_rpn

DOT_FILE = "ast.dot"
PNG_FILE = "ast.png"
USAGE = "Используйте: formalkit-ast <filename>"


def _read_source(argv: Sequence[str] | None) -> str | None:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return None
    try:
        return read_program_file(args[0])
    except OSError as exc:
        print(f"ошибка открытия файла: {exc}")
        return None


def _parse(source: str, parser_class: type[Parser] | type[ExpressionParser]) -> ASTNode | None:
    try:
        return parser_class(Lexer(source).tokenize()).parse()
    except ParseError as exc:
        print(f"Неожиданный токен: {exc.token.literal}")
        return None


def _save(tree: ASTNode, failure: str) -> bool:
    try:
        render_dot(generate_dot(tree), DOT_FILE, PNG_FILE)
    except (RenderError, OSError) as exc:
        print(f"{failure}: {exc}")
        return False
    print(f"AST сохранено: {DOT_FILE}, {PNG_FILE}")
    return True


def block_main(argv: Sequence[str] | None = None) -> int:
    """Parse a begin/end program file and render its syntax tree."""
    source = _read_source(argv)
    if source is None:
        return 1
    tree = _parse(source, Parser)
    if tree is None:
        return 0
    print("Успешно обработано")
    _save(tree, "Ошибка сохранения DOT файла")
    return 0


def rpn_main(argv: Sequence[str] | None = None) -> int:
    """Parse an expression file, render its syntax tree and print it in RPN."""
    source = _read_source(argv)
    if source is None:
        return 1
    tree = _parse(source, ExpressionParser)
    if tree is None:
        return 0
    print("\nУспешно обработано")
    rpn = ast_to_rpn(tree)
    if _save(tree, "Ошибка сохранения "):
        print("Обратная польская нотация:", " ".join(rpn))
    return 0