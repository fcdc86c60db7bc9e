"""Formal language toolkit: regex automata, grammar transformations, lexing, parsing and RPN."""

__version__ = "0.1.0"