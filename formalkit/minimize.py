"""Minimisation of deterministic finite automata by the table-filling method."""

from __future__ import annotations

from collections import defaultdict, deque
from itertools import product

from formalkit.dfa import DFA, DFAState

TRAP = 0

_Reverse = dict[int, dict[str, list[int]]]
_Pairs = set[tuple[int, int]]


def _with_trap(dfa: DFA) -> DFA:
    """Shift every state id up by one and add a trap state 0 completing the DFA."""
    extended = DFA(start=dfa.start + 1, alphabet=list(dfa.alphabet))
    extended.states[TRAP] = DFAState(
        TRAP, transitions={symbol: TRAP for symbol in dfa.alphabet}
    )
    for old_id, state in dfa.states.items():
        transitions = {symbol: target + 1 for symbol, target in state.transitions.items()}
        for symbol in dfa.alphabet:
            transitions.setdefault(symbol, TRAP)
        extended.states[old_id + 1] = DFAState(
            old_id + 1, transitions=transitions, is_final=state.is_final
        )
    return extended


def _reverse_transitions(dfa: DFA) -> _Reverse:
    reverse: _Reverse = defaultdict(lambda: defaultdict(list))
    for source, state in dfa.states.items():
        for symbol, target in state.transitions.items():
            reverse[target][symbol].append(source)
    return reverse


def _reachable(dfa: DFA) -> set[int]:
    reachable = {dfa.start}
    queue = deque([dfa.start])
    while queue:
        for target in dfa.states[queue.popleft()].transitions.values():
            if target not in reachable:
                reachable.add(target)
                queue.append(target)
    return reachable


def _distinguishable_pairs(dfa: DFA, reverse: _Reverse) -> _Pairs:
    """Return every ordered pair of states that some input tells apart."""
    ids = sorted(dfa.states)
    marked: _Pairs = set()
    queue: deque[tuple[int, int]] = deque()

    for first, second in product(ids, repeat=2):
        if (first, second) in marked:
            continue
        if dfa.states[first].is_final != dfa.states[second].is_final:
            marked.update({(first, second), (second, first)})
            queue.append((first, second))

    while queue:
        left, right = queue.popleft()
        for symbol in dfa.alphabet:
            sources = product(reverse[left].get(symbol, ()), reverse[right].get(symbol, ()))
            for r, s in sources:
                if (r, s) not in marked:
                    marked.update({(r, s), (s, r)})
                    queue.append((r, s))
    return marked


def _components(dfa: DFA, marked: _Pairs, reachable: set[int]) -> dict[int, int | None]:
    """Assign each state its equivalence class; None for states left out."""
    ids = sorted(dfa.states)
    component: dict[int, int | None] = {
        state_id: (None if (TRAP, state_id) in marked else 0) for state_id in ids
    }
    rest = [state_id for state_id in ids if state_id != TRAP]
    current = 0
    for position, state_id in enumerate(rest):
        if state_id not in reachable or component[state_id] is not None:
            continue
        current += 1
        component[state_id] = current
        for other in rest[position + 1:]:
            if (state_id, other) not in marked:
                component[other] = current
    return component


def _collapse(dfa: DFA, component: dict[int, int | None]) -> DFA:
    members: dict[int, list[int]] = defaultdict(list)
    for state_id in sorted(component):
        comp = component[state_id]
        if comp is not None:
            members[comp].append(state_id)

    collapsed = DFA(alphabet=dfa.alphabet)
    for comp, group in members.items():
        sample = dfa.states[group[0]]
        transitions = {
            symbol: component[target]
            for symbol, target in sample.transitions.items()
            if component[target] is not None
        }
        collapsed.states[comp] = DFAState(
            comp,
            transitions=transitions,
            is_final=any(dfa.states[member].is_final for member in group),
        )
    start = component[dfa.start]
    collapsed.start = TRAP if start is None else start
    return collapsed


def _without_trap(dfa: DFA) -> DFA:
    cleaned = DFA(start=dfa.start, alphabet=dfa.alphabet)
    for state_id, state in dfa.states.items():
        if state_id == TRAP:
            continue
        cleaned.states[state_id] = DFAState(
            state.id,
            transitions={
                symbol: target
                for symbol, target in state.transitions.items()
                if target != TRAP
            },
            is_final=state.is_final,
        )
    return cleaned


def minimize(dfa: DFA) -> DFA:
    """Return the minimal DFA accepting the same language, without a trap state."""
    extended = _with_trap(dfa)
    reverse = _reverse_transitions(extended)
    reachable = _reachable(extended)
    marked = _distinguishable_pairs(extended, reverse)
    component = _components(extended, marked, reachable)
    return _without_trap(_collapse(extended, component))