"""Conversion of expression syntax trees to reverse Polish notation."""

from __future__ import annotations

from formalkit.parser import ASTNode

_BINARY_KINDS = {"Expression", "ArithExpr", "Term"}
_LEAF_KINDS = {"Factor", "Identifier", "Number", "AddOp", "MulOp", "RelOp"}


def ast_to_rpn(node: ASTNode | None) -> list[str]:
    """Return the tokens of an expression tree in reverse Polish order."""
    if node is None:
        return []

    children = node.children
    if len(children) == 3 and node.kind in _BINARY_KINDS:
        left, op, right = children
        return ast_to_rpn(left) + ast_to_rpn(right) + ast_to_rpn(op)

    if node.kind == "Factor":
        if len(children) == 3:
            return ast_to_rpn(children[1])
        if len(children) == 1:
            return ast_to_rpn(children[0])

    if node.value:
        return [node.value]

    return [token for child in children for token in ast_to_rpn(child)]


def ast_to_rpn_tree(node: ASTNode | None) -> tuple[list[str], ASTNode | None]:
    """Return the tree's token values in child order and a mirrored '_RPN' tree."""
    if node is None:
        return [], None

    if node.kind in _BINARY_KINDS:
        tokens: list[str] = []
        mirrored: list[ASTNode] = []
        for child in node.children:
            child_tokens, child_node = ast_to_rpn_tree(child)
            tokens.extend(child_tokens)
            if child_node is not None:
                mirrored.append(child_node)
        if not mirrored:
            return tokens, None
        return tokens, ASTNode(f"{node.kind}_RPN", node.value, children=mirrored)

    if node.kind in _LEAF_KINDS:
        return [node.value], ASTNode(f"{node.kind}_RPN", node.value, token=node.token)

    return [], None