"""Thompson construction of nondeterministic finite automata."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterable, Iterator

EPSILON = "ε"


@dataclass(eq=False)
class NFAState:
    """A state with labelled transitions to other states."""

    id: int
    transitions: dict[str, list[NFAState]] = field(default_factory=dict)
    is_final: bool = False


def _link(state: NFAState, symbol: str, *targets: NFAState) -> None:
    state.transitions.setdefault(symbol, []).extend(targets)


@dataclass(eq=False)
class NFA:
    """An automaton given by its start and end states."""

    start: NFAState
    end: NFAState

    def __iter__(self) -> Iterator[NFAState]:
        """Yield every reachable state once, in depth-first order."""
        seen: set[int] = set()
        stack = [self.start]
        while stack:
            state = stack.pop()
            if state.id in seen:
                continue
            seen.add(state.id)
            yield state
            for targets in state.transitions.values():
                stack.extend(targets)

    def alphabet(self) -> list[str]:
        """Return the sorted input symbols, without epsilon."""
        return sorted(
            {symbol for state in self for symbol in state.transitions if symbol != EPSILON}
        )

    def to_graphviz(self) -> str:
        lines = [
            "digraph NFA {",
            "  rankdir=LR;",
            "  node [shape = circle];",
            "  start [shape = point];",
            f"  start -> {self.start.id};",
            f"  {self.end.id} [shape = doublecircle];",
        ]
        for state in self:
            lines.append(f'  {state.id} [label="{state.id}"];')
            for symbol, targets in state.transitions.items():
                for target in targets:
                    lines.append(f'  {state.id} -> {target.id} [label="{symbol}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def state_by_id(self, state_id: int) -> NFAState | None:
        """Return the reachable state with this id, or None."""
        return next((state for state in self if state.id == state_id), None)

    def _index(self) -> dict[int, NFAState]:
        return {state.id: state for state in self}

    @staticmethod
    def _lookup(index: dict[int, NFAState], state_id: int) -> NFAState:
        try:
            return index[state_id]
        except KeyError:
            raise KeyError(f"no NFA state with id {state_id}") from None

    def is_final(self, states: Iterable[int]) -> bool:
        """Tell whether any of the given states is final."""
        index = self._index()
        return any(self._lookup(index, state_id).is_final for state_id in states)

    def epsilon_closure(self, states: Iterable[int]) -> set[int]:
        """Return the ids reachable from the given ones by epsilon moves."""
        index = self._index()
        closure = set(states)
        stack = list(closure)
        while stack:
            state = self._lookup(index, stack.pop())
            for target in state.transitions.get(EPSILON, ()):
                if target.id not in closure:
                    closure.add(target.id)
                    stack.append(target.id)
        return closure


def build_nfa(postfix: str) -> NFA:
    """Build an NFA from a postfix regular expression."""
    stack: list[NFA] = []
    ids = count()

    def pop() -> NFA:
        if not stack:
            raise ValueError(f"malformed postfix expression: {postfix!r}")
        return stack.pop()

    def fresh() -> NFAState:
        return NFAState(next(ids))

    for char in postfix:
        if char == ".":
            right = pop()
            left = pop()
            _link(left.end, EPSILON, right.start)
            stack.append(NFA(left.start, right.end))
            continue

        if char == "|":
            right = pop()
            left = pop()
            start, end = fresh(), fresh()
            _link(start, EPSILON, left.start, right.start)
            _link(left.end, EPSILON, end)
            _link(right.end, EPSILON, end)
        elif char == "?":
            inner = pop()
            start, end = fresh(), fresh()
            _link(start, EPSILON, inner.start, end)
            _link(inner.end, EPSILON, end)
        elif char == "*":
            inner = pop()
            start, end = fresh(), fresh()
            _link(start, EPSILON, inner.start, end)
            _link(inner.end, EPSILON, inner.start, end)
        elif char == "+":
            inner = pop()
            start, end = fresh(), fresh()
            _link(start, EPSILON, inner.start)
            _link(inner.end, EPSILON, inner.start, end)
        else:
            start, end = fresh(), fresh()
            _link(start, char, end)
        stack.append(NFA(start, end))

    if not stack:
        raise ValueError(f"malformed postfix expression: {postfix!r}")
    result = stack[0]
    result.end.is_final = True
    return result