"""Interactive console for loading a grammar and transforming it."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Protocol, TextIO

from formalkit.grammar_commands import GrammarCommands

_QUIT = {"q", "quit", "exit"}
_LOGIC_ERRORS = (ValueError, RuntimeError, OSError)


class GrammarLogic(Protocol):
    def load_grammar(self, path: str) -> str: ...

    def eliminate_left_recursion(self) -> str: ...

    def eliminate_indirect_left_recursion(self) -> str: ...

    def eliminate_useless_symbols(self) -> str: ...


class GrammarApp:
    """Menu-driven session: load a grammar file, then apply transformations to it."""

    TITLE = "Устранение различных штук"
    MENU = (
        "Ввести путь до файла с грамматикой",
        "Устранить левую рекурсию",
        "Устранить левую косвенную рекурсию",
        "Устранить бесполезные символы",
    )
    NEED_GRAMMAR = "Сначала введите грамматику!"

    def __init__(
        self,
        logic: GrammarLogic,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.logic = logic
        self.grammar_path = ""
        self.last_result = ""
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read(self, prompt: str) -> str | None:
        self._write(prompt)
        line = self._in.readline()
        if not line:
            self._write("\n")
            return None
        return line.rstrip("\r\n")

    def _render_menu(self) -> str:
        lines = [self.TITLE, ""]
        lines.extend(f"  {number}. {item}" for number, item in enumerate(self.MENU, 1))
        if self.last_result:
            lines.append("")
            lines.append(self.last_result)
        lines.append("")
        lines.append("1-4 - выбор • q - выход")
        return "\n".join(lines) + "\n"

    def _call(self, action: Callable[[], str]) -> None:
        try:
            self.last_result = action()
        except _LOGIC_ERRORS as exc:
            self.last_result = str(exc)

    def _enter_path(self) -> None:
        self._write(
            "Введите путь до файла с грамматикой\nEnter - подтвердить • Ctrl+D - отмена\n"
        )
        value = self._read("> ")
        if value is None:
            return
        self.grammar_path = value
        self._call(lambda: self.logic.load_grammar(value))

    def _transform(self, action: Callable[[], str]) -> None:
        if not self.grammar_path:
            self.last_result = self.NEED_GRAMMAR
            return
        self._call(action)

    def run(self) -> None:
        """Show the menu and serve choices until the user quits or input ends."""
        actions = {
            "1": self._enter_path,
            "2": lambda: self._transform(self.logic.eliminate_left_recursion),
            "3": lambda: self._transform(self.logic.eliminate_indirect_left_recursion),
            "4": lambda: self._transform(self.logic.eliminate_useless_symbols),
        }
        try:
            while True:
                self._write(self._render_menu())
                choice = self._read("> ")
                if choice is None or choice.strip().lower() in _QUIT:
                    return
                action = actions.get(choice.strip())
                if action is not None:
                    action()
        except KeyboardInterrupt:
            self._write("\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive grammar session."""
    parser = argparse.ArgumentParser(
        prog="formalkit-grammar",
        description="Remove left recursion and useless symbols from grammars.",
    )
    parser.parse_args(argv)
    GrammarApp(GrammarCommands()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())