"""Commands that turn a regular expression into automata and run them."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from formalkit.dfa import DFA, build_dfa
from formalkit.files import EMULATE_DIR, GRAPHS_DIR, RenderError, recreate_emulate_dir, render_dot
from formalkit.minimize import minimize
from formalkit.nfa import build_nfa
from formalkit.regex import infix_to_postfix

Renderer = Callable[[str, "str | os.PathLike", "str | os.PathLike"], None]


class AutomataCommands:
    """Builds NFA, DFA and minimal DFA graphs and emulates the minimal DFA."""

    def __init__(self, root: str | os.PathLike = ".", render: Renderer = render_dot) -> None:
        self.root = Path(root)
        self.dfa: DFA | None = None
        self._render = render

    @property
    def graphs_dir(self) -> Path:
        return self.root / GRAPHS_DIR

    def _save(self, name: str, dot: str, directory: Path, stem: str) -> None:
        dot_path = directory / f"{stem}.dot"
        png_path = directory / f"{stem}.png"
        try:
            self._render(dot, dot_path, png_path)
        except RenderError as exc:
            raise RenderError(
                f"❌ Ошибка Graphviz для {name}: {exc}\nВывод: {exc.output}\n", exc.output
            ) from exc
        except OSError as exc:
            raise RenderError(f"❌ ошибка при записи файла {name}: {exc}\n") from exc

    def regular_to_automata(self, regex: str) -> str:
        """Build and render the automata for regex; keep the minimal DFA."""
        nfa = build_nfa(infix_to_postfix(regex))
        self._save("NFA", nfa.to_graphviz(), self.graphs_dir, "nfa")

        dfa = build_dfa(nfa)
        self._save("DFA", dfa.to_graphviz(), self.graphs_dir, "dfa")

        minimized = minimize(dfa)
        self._save("Minimized DFA", minimized.to_graphviz(), self.graphs_dir, "min")

        self.dfa = minimized
        return ""

    def emulate(self, text: str) -> str:
        """Run the minimal DFA on text, render every step and report acceptance."""
        if self.dfa is None:
            raise RuntimeError("регулярное выражение ещё не задано")
        emulate_dir = recreate_emulate_dir(self.root)
        steps, accepted = self.dfa.simulate(text)
        for number, step in enumerate(steps):
            name = f"step_{number}"
            self._save(name, step, emulate_dir, name)

        if accepted:
            return f"✅ Строка {text} допускается ДКА"
        return f"❌ Строка {text} НЕ допускается ДКА"


__all__ = ["AutomataCommands", "EMULATE_DIR"]