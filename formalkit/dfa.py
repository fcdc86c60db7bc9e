"""Deterministic finite automata built by the subset construction."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from formalkit.nfa import NFA


@dataclass
class DFAState:
    """A DFA state, with the NFA states it stands for."""

    id: int
    nfa_states: frozenset[int] = frozenset()
    transitions: dict[str, int] = field(default_factory=dict)
    is_final: bool = False


@dataclass
class DFA:
    """A deterministic automaton keyed by state id."""

    start: int = 0
    states: dict[int, DFAState] = field(default_factory=dict)
    alphabet: list[str] = field(default_factory=list)

    def _render(self, marks: Iterable[str] = ()) -> str:
        lines = [
            "digraph DFA {",
            "  rankdir=LR;",
            "  node [shape = circle];",
            "  start [shape = point];",
            f"  start -> {self.start};",
        ]
        for state in self.states.values():
            shape = "doublecircle" if state.is_final else "circle"
            lines.append(f"  {state.id} [shape = {shape}];")
        lines.extend(marks)
        for state in self.states.values():
            for symbol, target in state.transitions.items():
                lines.append(f'  {state.id} -> {target} [label="{symbol}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def to_graphviz(self) -> str:
        return self._render()

    def to_graphviz_highlight(self, current: int, description: str) -> str:
        """Render the automaton with one state marked and a caption."""
        return self._render(
            [
                f"  {current} [color=red, fontcolor=red];",
                '  labelloc="t";',
                f'  label="{description}";',
            ]
        )

    def to_graphviz_error(self, current: int, symbol: str) -> str:
        """Render the automaton with a missing transition shown as an error."""
        return self._render(
            [
                f"  {current} [color=red, fontcolor=red];",
                f'  {current} -> ошибка [label="{symbol}"];',
                "  ошибка [shape=box, color=red, fontcolor=red];",
                '  labelloc="t";',
                f"  label=\"Ошибка: нет перехода для символа '{symbol}'\";",
            ]
        )

    def simulate(self, text: str) -> tuple[list[str], bool]:
        """Run the automaton on text; return one graph per step and acceptance."""
        current = self.start
        state = self.states[current]
        steps = [self.to_graphviz_highlight(current, "Начало")]

        for position, symbol in enumerate(text, 1):
            target = state.transitions.get(symbol)
            if target is None:
                steps.append(self.to_graphviz_error(current, symbol))
                return steps, False
            current = target
            state = self.states[current]
            steps.append(
                self.to_graphviz_highlight(current, f"Шаг {position} -- символ '{symbol}'")
            )

        accepted = state.is_final
        steps.append(
            self.to_graphviz_highlight(current, "Допускается" if accepted else "НЕ допускается")
        )
        return steps, accepted


def build_dfa(nfa: NFA) -> DFA:
    """Build a DFA equivalent to the NFA by the subset construction."""
    alphabet = nfa.alphabet()
    index = {state.id: state for state in nfa}
    dfa = DFA(start=0, alphabet=alphabet)

    start_set = frozenset(nfa.epsilon_closure({nfa.start.id}))
    dfa.states[0] = DFAState(0, start_set, is_final=nfa.is_final(start_set))
    known = {start_set: 0}
    queue = deque([0])

    while queue:
        current = dfa.states[queue.popleft()]
        for symbol in alphabet:
            moved = {
                target.id
                for nfa_id in current.nfa_states
                for target in index[nfa_id].transitions.get(symbol, ())
            }
            target_set = frozenset(nfa.epsilon_closure(moved))
            if not target_set:
                continue
            target_id = known.get(target_set)
            if target_id is None:
                target_id = len(dfa.states)
                known[target_set] = target_id
                dfa.states[target_id] = DFAState(
                    target_id, target_set, is_final=nfa.is_final(target_set)
                )
                queue.append(target_id)
            current.transitions[symbol] = target_id

    return dfa