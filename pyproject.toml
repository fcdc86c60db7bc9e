[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formalkit"
version = "0.1.0"
description = "Formal language toolkit: regex to NFA/DFA, DFA minimisation, grammar transformations, a small lexer, parser, AST and RPN"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "automata",
    "regular-expressions",
    "nfa",
    "dfa",
    "minimization",
    "context-free-grammar",
    "left-recursion",
    "lexer",
    "parser",
    "ast",
    "rpn",
    "graphviz",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
formalkit-regex = "formalkit.regex_app:main"
formalkit-grammar = "formalkit.grammar_app:main"
formalkit-block = "formalkit.ast_cli:block_main"
formalkit-rpn = "formalkit.ast_cli:rpn_main"

[tool.hatch.build.targets.wheel]
packages = ["formalkit"]

[tool.pytest.ini_options]
addopts = "-ra"
