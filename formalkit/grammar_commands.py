"""Commands that load a grammar, transform it and save the result."""

from __future__ import annotations

import os
from typing import Callable

from formalkit.files import add_suffix_to_filename, write_text
from formalkit.grammar import Grammar, GrammarError, read_grammar
from formalkit.grammar_transforms import (
    eliminate_left_recursion,
    eliminate_useless_symbols,
    remove_cycles,
)

LEFT_RECURSION_SUFFIX = "_lr"
INDIRECT_LEFT_RECURSION_SUFFIX = "_ilr"
USELESS_SYMBOLS_SUFFIX = "_us"


class GrammarCommands:
    """Keeps a loaded grammar and writes transformed versions next to its file."""

    def __init__(self) -> None:
        self.grammar: Grammar | None = None
        self.grammar_path: str | None = None

    def load_grammar(self, path: str | os.PathLike) -> str:
        """Load the grammar from path and report success."""
        try:
            grammar = read_grammar(path)
        except (OSError, GrammarError) as exc:
            raise GrammarError(f"ошибка при чтении файла {path}: {exc}\n") from exc
        self.grammar = grammar
        self.grammar_path = os.fspath(path)
        return f"Грамматика {path} прочитана успешно"

    def _apply(self, title: str, transform: Callable[[Grammar], Grammar], suffix: str) -> str:
        if self.grammar is None or self.grammar_path is None:
            raise RuntimeError("Сначала введите грамматику!")
        header = f"{title}\n"
        text = str(transform(self.grammar.copy()))
        filename = add_suffix_to_filename(self.grammar_path, suffix)
        try:
            write_text(text, filename)
        except OSError as exc:
            raise OSError(f"{header}Ошибка при записи файла {filename}: {exc}\n") from exc
        return f"{header}Грамматика записана в файл {filename}\n"

    def eliminate_left_recursion(self) -> str:
        """Remove left recursion and save the grammar with the _lr suffix."""
        return self._apply(
            "Вызов устранения левой рекурсии",
            eliminate_left_recursion,
            LEFT_RECURSION_SUFFIX,
        )

    def eliminate_indirect_left_recursion(self) -> str:
        """Remove indirect left recursion and save with the _ilr suffix."""
        return self._apply(
            "Вызов устранения косвенной левой рекурсии",
            lambda grammar: eliminate_left_recursion(remove_cycles(grammar)),
            INDIRECT_LEFT_RECURSION_SUFFIX,
        )

    def eliminate_useless_symbols(self) -> str:
        """Remove useless symbols and save the grammar with the _us suffix."""
        return self._apply(
            "Вызов устранения бесполезных символов",
            eliminate_useless_symbols,
            USELESS_SYMBOLS_SUFFIX,
        )