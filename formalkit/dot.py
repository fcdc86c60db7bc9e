"""Graphviz rendering of syntax trees."""

from __future__ import annotations

from itertools import count
from typing import Iterator

from formalkit.parser import ASTNode

_HEADER = (
    "digraph AST {\n"
    '  node [shape=box, fontname="Courier", fontsize=10];\n'
    '  edge [fontname="Courier", fontsize=10];\n\n'
)


def _lines(node: ASTNode, ids: Iterator[int]) -> tuple[int, list[str]]:
    node_id = next(ids)
    label = node.kind + (f"\\n{node.value}" if node.value else "")
    lines = [f'  node{node_id} [label="{label}"];\n']
    for child in node.children:
        child_id, child_lines = _lines(child, ids)
        lines.extend(child_lines)
        lines.append(f"  node{node_id} -> node{child_id};\n")
    return node_id, lines


def generate_dot(node: ASTNode | None) -> str:
    """Return a DOT graph of the tree, nodes numbered in pre-order."""
    body = "" if node is None else "".join(_lines(node, count())[1])
    return _HEADER + body + "}\n"