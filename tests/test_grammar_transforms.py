from formalkit.grammar import EMPTY, Grammar
from formalkit.grammar_transforms import (
    eliminate_left_recursion,
    eliminate_useless_symbols,
    remove_cycles,
)


def _has_immediate_left_recursion(grammar):
    return any(
        production and production[0] == head
        for head, productions in grammar.rules.items()
        for production in productions
    )


def _expression_grammar():
    return Grammar(
        nonterminals=["E", "T"],
        terminals=["+", "a"],
        start="E",
        rules={"E": [["E", "+", "T"], ["T"]], "T": [["a"]]},
    )


def test_direct_left_recursion_removed():
    grammar = _expression_grammar()
    result = eliminate_left_recursion(grammar)
    assert not _has_immediate_left_recursion(result)
    assert "E'" in result.nonterminals
    assert result.rules["E'"][-1] == [EMPTY]
    assert result.rules["E"] == [["T", "E'"]]


def test_input_grammar_is_not_modified():
    grammar = _expression_grammar()
    eliminate_left_recursion(grammar)
    assert grammar == _expression_grammar()


def test_grammar_without_recursion_is_unchanged():
    grammar = Grammar(["S"], ["a"], "S", {"S": [["a", "S"], ["a"]]})
    assert eliminate_left_recursion(grammar) == grammar


def test_remove_cycles_substitutes_earlier_nonterminal():
    grammar = Grammar(
        nonterminals=["B", "A"],
        terminals=["a", "b", "c"],
        start="A",
        rules={"A": [["B", "a"]], "B": [["b"], ["c"]]},
    )
    result = remove_cycles(grammar)
    assert result.rules["A"] == [["b", "a"], ["c", "a"]]
    assert result.rules["B"] == grammar.rules["B"]


def test_remove_cycles_registers_nonterminal_without_rules():
    grammar = Grammar(["A", "B"], ["a"], "A", {"A": [["a"]]})
    result = remove_cycles(grammar)
    assert result.rules["B"] == []
    assert result.rules["A"] == [["a"]]
    assert "B" not in grammar.rules


def test_indirect_left_recursion_removed():
    grammar = Grammar(
        nonterminals=["A", "B"],
        terminals=["a", "b", "c", "d"],
        start="A",
        rules={"A": [["B", "a"], ["c"]], "B": [["A", "b"], ["d"]]},
    )
    result = eliminate_left_recursion(remove_cycles(grammar))
    assert not _has_immediate_left_recursion(result)
    assert "B'" in result.nonterminals
    assert result == eliminate_left_recursion(grammar)


def test_useless_symbols_dropped():
    grammar = Grammar(
        nonterminals=["S", "A", "B"],
        terminals=["a", "b", "c"],
        start="S",
        rules={"S": [["a"], ["A"]], "A": [["b"]], "B": [["c"]]},
    )
    result = eliminate_useless_symbols(grammar)
    assert set(result.rules) == {"S", "A"}
    assert "c" not in result.terminals
    assert result.terminals == ["a", "b"]
    assert result.nonterminals == sorted(result.nonterminals)
    assert result.start == "S"


def test_useless_symbols_skip_epsilon():
    grammar = Grammar(["S", "X"], ["x"], "S", {"S": [[EMPTY]], "X": [["x"]]})
    result = eliminate_useless_symbols(grammar)
    assert result.nonterminals == ["S"]
    assert result.terminals == []
    assert result.rules == {"S": [[EMPTY]]}