"""Context-free grammars and their plain-text file format."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterator

EMPTY = "eps"

_COUNT = re.compile(r"[+-]?[0-9]+")
_SYMBOL = re.compile(r".'?", re.DOTALL)


class GrammarError(ValueError):
    """Raised when a grammar description cannot be read."""


@dataclass
class Grammar:
    """A grammar: symbols, start symbol and productions per nonterminal."""

    nonterminals: list[str] = field(default_factory=list)
    terminals: list[str] = field(default_factory=list)
    start: str = ""
    rules: dict[str, list[list[str]]] = field(default_factory=dict)

    def __str__(self) -> str:
        total = sum(len(productions) for productions in self.rules.values())
        lines = [
            str(len(self.nonterminals)),
            " ".join(self.nonterminals),
            str(len(self.terminals)),
            " ".join(self.terminals),
            str(total),
        ]
        lines.extend(
            f"{self.start} -> {' '.join(rule)}" for rule in self.rules.get(self.start, [])
        )
        for head, productions in self.rules.items():
            if head == self.start:
                continue
            lines.extend(f"{head} -> {' '.join(rule)}" for rule in productions)
        lines.append(self.start)
        return "\n".join(lines)

    def copy(self) -> Grammar:
        """Return a deep copy that shares no lists with this grammar."""
        return Grammar(
            nonterminals=list(self.nonterminals),
            terminals=list(self.terminals),
            start=self.start,
            rules={
                head: [list(rule) for rule in productions]
                for head, productions in self.rules.items()
            },
        )


def split_symbols(text: str) -> list[str]:
    """Split a right-hand side into symbols; a trailing quote joins its symbol."""
    return _SYMBOL.findall(text)


class _Lines:
    def __init__(self, text: str) -> None:
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        self._lines: Iterator[str] = (line.removesuffix("\r") for line in lines)

    def next(self) -> str | None:
        return next(self._lines, None)

    def next_nonblank(self) -> str | None:
        for line in self._lines:
            if line.strip():
                return line
        return None


def _parse_count(line: str) -> int | None:
    return int(line) if _COUNT.fullmatch(line) else None


def _read_symbols(lines: _Lines, what: str) -> list[str]:
    count_line = lines.next_nonblank()
    if count_line is None:
        raise GrammarError("неожиданный конец файла")
    count = _parse_count(count_line)
    if count is None:
        raise GrammarError(f'{what}: некорретный счетчик: "{count_line}"')
    symbols_line = lines.next()
    if symbols_line is None:
        raise GrammarError(f"{what}: неожиданный конец файла")
    symbols = symbols_line.split()
    if len(symbols) != count:
        raise GrammarError(
            f"{what}: несовпадение количества: ожидалось {count}, прочитано {len(symbols)}"
        )
    return symbols


def parse_grammar(text: str) -> Grammar:
    """Parse a grammar description given as text."""
    lines = _Lines(text)
    nonterminals = _read_symbols(lines, "нетерминал")
    terminals = _read_symbols(lines, "терминал")

    count_line = lines.next_nonblank()
    if count_line is None:
        raise GrammarError("неожиданный конец файла")
    count = _parse_count(count_line)
    if count is None:
        raise GrammarError(f'некорректное количество правил: "{count_line}"')

    rules: dict[str, list[list[str]]] = {}
    for number in range(1, count + 1):
        line = lines.next()
        if line is None:
            raise GrammarError(f"правило {number}: неожиданный конец файла")
        line = line.replace(" ", "")
        parts = line.split("->")
        if len(parts) != 2:
            raise GrammarError(f"некорректный формат правил: {line}")
        head, body = parts
        rhs = [EMPTY] if body == EMPTY else split_symbols(body)
        rules.setdefault(head, []).append(rhs)

    start_line = lines.next_nonblank()
    if start_line is None:
        raise GrammarError("неожиданный конец файла")
    return Grammar(nonterminals, terminals, start_line.strip(), rules)


def read_grammar(filename: str | os.PathLike) -> Grammar:
    """Read a grammar description from a file."""
    with open(filename, encoding="utf-8", newline="") as handle:
        return parse_grammar(handle.read())