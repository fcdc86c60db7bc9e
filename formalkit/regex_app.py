"""Interactive console for building automata from a regular expression."""

from __future__ import annotations

import argparse
import sys
from typing import Protocol, TextIO

from formalkit.automata_commands import AutomataCommands
from formalkit.files import reset_graphs_dir

_QUIT = {"q", "quit", "exit"}
_LOGIC_ERRORS = (ValueError, RuntimeError, OSError)


class AutomataLogic(Protocol):
    def regular_to_automata(self, regex: str) -> str: ...

    def emulate(self, text: str) -> str: ...


class RegexApp:
    """Menu-driven session: enter a regular expression, then test strings against it."""

    TITLE = "Регулярный мастер 3000"
    MENU = ("Ввести регулярку", "Промоделировать выражение")
    NEED_REGEX = "Сначала введите регулярное выражение!"

    def __init__(
        self,
        logic: AutomataLogic,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.logic = logic
        self.regex = ""
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
        lines.append("")
        lines.append(f"Текущая регулярка: {self.regex}")
        if self.last_result:
            lines.append("")
            lines.append(self.last_result)
        lines.append("")
        lines.append("1/2 - выбор • q - выход")
        return "\n".join(lines) + "\n"

    def _call(self, action, argument: str) -> None:
        try:
            self.last_result = action(argument)
        except _LOGIC_ERRORS as exc:
            self.last_result = str(exc)

    def _enter_regex(self) -> None:
        self._write("Введите регулярное выражение\nEnter - подтвердить • Ctrl+D - отмена\n")
        value = self._read("> ")
        if value is None:
            return
        self.regex = value
        self._call(self.logic.regular_to_automata, value)

    def _enter_expression(self) -> None:
        if not self.regex:
            self.last_result = self.NEED_REGEX
            return
        self._write(
            "Проверка выражения\n"
            f"Используется регулярка: {self.regex}\n"
            "Enter - подтвердить • Ctrl+D - отмена\n"
        )
        value = self._read("> ")
        if value is None:
            return
        self._call(self.logic.emulate, value)

    def run(self) -> None:
        """Show the menu and serve choices until the user quits or input ends."""
        actions = {"1": self._enter_regex, "2": self._enter_expression}
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
    """Prepare the graphs directory and start the interactive session."""
    parser = argparse.ArgumentParser(
        prog="formalkit-regex",
        description="Build NFA, DFA and minimal DFA graphs from a regular expression.",
    )
    parser.parse_args(argv)
    try:
        reset_graphs_dir()
    except OSError as exc:
        print(f"Error: {exc}")
        return 1
    RegexApp(AutomataCommands()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())