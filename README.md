# formalkit

A small toolkit for working with formal languages:

- regular expressions to NFA (Thompson construction), NFA to DFA (subset
  construction) and DFA minimisation (table filling), with step-by-step
  simulation of a string on the minimised DFA;
- context-free grammar transformations: removal of left recursion (direct and
  indirect) and of useless symbols;
- a lexer and recursive-descent parsers for a tiny `begin ... end` block
  language and for arithmetic/relational expressions, export of syntax trees
  to Graphviz DOT and conversion of expressions to reverse Polish notation.

Pictures are produced by running the Graphviz `dot` program, which must be on
your `PATH` for PNG files to be written. The `.dot` file is written before
`dot` is run, so it is there even when rendering fails.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Commands

### `formalkit-regex`

A line-based menu read from standard input. On start the `graphs` directory in
the current directory is deleted and created again with an empty
`graphs/emulate` inside.

- `1` asks for a regular expression. The NFA, DFA and minimised DFA are written
  to `graphs/nfa.dot`/`.png`, `graphs/dfa.dot`/`.png` and
  `graphs/min.dot`/`.png`.
- `2` asks for a string and simulates it on the minimised DFA. Each step is
  drawn into `graphs/emulate/step_N.dot` / `.png`, and the result says whether
  the string is accepted. This choice needs a regular expression first.
- `q`, `quit`, `exit` or end of input leave the program.

Regular expressions use `|`, `*`, `+`, `?` and parentheses; letters and digits
are operands. Concatenation is implicit between operands and parentheses and
after `*` and `+`; after `?` write it explicitly with `.` (as in `a?.b`).

### `formalkit-grammar`

A line-based menu for grammars. Choice `1` asks for the path to a grammar
file; choices `2`–`4` transform the loaded grammar and write the result next
to the input file with a suffix added to its name:

| choice | transformation                  | suffix |
|--------|---------------------------------|--------|
| `2`    | remove left recursion           | `_lr`  |
| `3`    | remove indirect left recursion  | `_ilr` |
| `4`    | remove useless symbols          | `_us`  |

For example `data/g1.txt` becomes `data/g1_lr.txt`. `q`, `quit`, `exit` or
end of input leave the program.

The grammar file format:

```
2
E T
3
+ a b
4
E -> E+T
E -> T
T -> a
T -> eps
E
```

That is: the number of nonterminals and, on the next line, their names; the
number of terminals and their names; the number of rules followed directly by
that many rules; and the start symbol. Blank lines may stand before each count
line and before the start symbol. `eps` stands for the empty string. Spaces in
a rule are ignored; on the right-hand side each character is a symbol, and a
character followed by `'` forms one symbol (`E'`). Written grammars use the
same layout, with the start symbol's rules first.

### `formalkit-block FILE`

Parses a program of the form

```
begin
  x = a + 1;
  y = (x * 2) < 10;
end
```

On success it prints a confirmation and writes the syntax tree to `ast.dot`
and `ast.png` in the current directory; otherwise it reports the unexpected
token.

### `formalkit-rpn FILE`

Parses a file holding a single expression such as `(a + b) * c <= 4`, writes
its tree to `ast.dot` and `ast.png` and prints the expression in reverse
Polish notation.

## Library use

```python
from formalkit.regex import infix_to_postfix
from formalkit.nfa import build_nfa
from formalkit.dfa import build_dfa
from formalkit.minimize import minimize

postfix = infix_to_postfix("(ab)*c")
dfa = minimize(build_dfa(build_nfa(postfix)))
steps, accepted = dfa.simulate("ababc")
print(accepted)             # True
print(dfa.to_graphviz())    # DOT text
```

`formalkit.automata_commands.AutomataCommands` runs the same chain and renders
the graphs to files; `formalkit.files.render_dot` writes DOT text and calls
`dot`, raising `RenderError` on failure.

```python
from formalkit.grammar import read_grammar
from formalkit.grammar_transforms import eliminate_left_recursion, eliminate_useless_symbols

grammar = read_grammar("grammar.txt")
print(eliminate_left_recursion(grammar))    # a new Grammar; the input is left unchanged
print(eliminate_useless_symbols(grammar))
```

Malformed grammar files raise `formalkit.grammar.GrammarError`;
`parse_grammar` reads the same format from a string.

```python
from formalkit.lexer import Lexer
from formalkit.parser import ExpressionParser
from formalkit.rpn import ast_to_rpn
from formalkit.dot import generate_dot

tokens = Lexer("(a + b) * c").tokenize()
tree = ExpressionParser(tokens).parse()
print(" ".join(ast_to_rpn(tree)))   # a b + c *
print(generate_dot(tree))
```

`Parser` parses `begin ... end` programs the same way; both parsers raise
`formalkit.parser.ParseError`, which carries the offending token.

## Limitations

The interactive commands are plain numbered menus on standard input and
output; there is no full-screen terminal interface, and picture files are not
opened for viewing.

## Running the tests

```
pip install .[test]
pytest
```