"""Grammar transformations: left recursion and useless symbol elimination."""

from __future__ import annotations

from formalkit.grammar import EMPTY, Grammar

_Productions = list[list[str]]


def _expand(productions: _Productions, head: str, replacements: _Productions) -> _Productions:
    """Replace every production starting with head by each replacement plus its tail."""
    expanded: _Productions = []
    for production in productions:
        if production and production[0] == head:
            tail = production[1:]
            expanded.extend(list(replacement) + tail for replacement in replacements)
        else:
            expanded.append(production)
    return expanded


def _eliminate_immediate(grammar: Grammar, nonterminal: str) -> None:
    productions = grammar.rules.get(nonterminal, [])
    recursive = [p for p in productions if p and p[0] == nonterminal]
    if not recursive:
        return
    others = [p for p in productions if not (p and p[0] == nonterminal)]

    fresh = nonterminal + "'"
    grammar.nonterminals.append(fresh)
    grammar.rules[nonterminal] = [beta + [fresh] for beta in others]
    grammar.rules[fresh] = [alpha[1:] + [fresh] for alpha in recursive] + [[EMPTY]]


def eliminate_left_recursion(grammar: Grammar) -> Grammar:
    """Return a copy of the grammar with left recursion removed."""
    result = grammar.copy()
    ordered = list(result.nonterminals)
    for position, current in enumerate(ordered):
        for previous in ordered[:position]:
            if current in result.rules:
                result.rules[current] = _expand(
                    result.rules[current], previous, result.rules.get(previous, [])
                )
        _eliminate_immediate(result, current)
    return result


def remove_cycles(grammar: Grammar) -> Grammar:
    """Return a copy where no production of Ai starts with an earlier Aj."""
    result = grammar.copy()
    ordered = list(result.nonterminals)
    for position, current in enumerate(ordered):
        for previous in ordered[:position]:
            result.rules[current] = _expand(
                result.rules.get(current, []), previous, result.rules.get(previous, [])
            )
    return result


def _collect_symbols(
    grammar: Grammar, rules: dict[str, _Productions]
) -> tuple[list[str], list[str]]:
    known_nonterminals = set(grammar.nonterminals)
    known_terminals = set(grammar.terminals)
    nonterminals = set(rules)
    terminals: set[str] = set()
    for productions in rules.values():
        for production in productions:
            for symbol in production:
                if symbol == EMPTY:
                    continue
                if symbol in known_nonterminals:
                    nonterminals.add(symbol)
                elif symbol in known_terminals:
                    terminals.add(symbol)
    return sorted(nonterminals), sorted(terminals)


def eliminate_useless_symbols(grammar: Grammar) -> Grammar:
    """Return a grammar without the productions of symbols found useless."""
    terminals = set(grammar.terminals)
    useful: set[str] = set()
    grown = {grammar.start}
    while useful != grown:
        useful = grown
        grown = {
            symbol
            for head, productions in grammar.rules.items()
            if head in useful
            for production in productions
            for symbol in production
            if symbol in terminals
        } | useful

    for head, productions in grammar.rules.items():
        if head not in useful:
            continue
        useful.update(
            symbol
            for production in productions
            for symbol in production
            if symbol not in terminals
        )

    rules = {
        head: [list(production) for production in productions]
        for head, productions in grammar.rules.items()
        if head in useful
    }
    nonterminals, used_terminals = _collect_symbols(grammar, rules)
    return Grammar(nonterminals, used_terminals, grammar.start, rules)