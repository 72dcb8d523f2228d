"""Plain-text rendering of decision trees."""

from __future__ import annotations

from typing import Final

from id3kit.tree.nodes import InnerNode, Leaf, Node, visit

DEFAULT_INDENT: Final[str] = "  "


class TreeRenderer:
    """Visitor rendering a (sub-)tree as a list of text lines, pre-order.

    A leaf renders as its value. An inner node renders as its decision
    attribute's name followed by one `value -> <subtree>` line per domain
    value; the remaining lines of a subtree are indented one level deeper.
    """

    def __init__(self, *, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent

    def visit_leaf(self, leaf: Leaf) -> list[str]:
        return [leaf.value.literal]

    def visit_inner(self, node: InnerNode) -> list[str]:
        lines = [node.attribute.name]
        for value, child in node.children.items():
            first, *rest = visit(child, self)
            lines.append(f"{self.indent}{value.literal} -> {first}")
            lines.extend(f"{self.indent}{line}" for line in rest)
        return lines


def render_tree(root: Node, *, indent: str = DEFAULT_INDENT) -> str:
    """Render a decision tree as indented text.

    Args:
        root (Node): Root of the tree to render.
        indent (str): Indentation added per tree level. Defaults to two spaces.

    Returns:
        str: The rendered tree, one line per node, without a trailing newline.

    Examples:
        >>> print(render_tree(root))  # doctest: +SKIP
        outlook
          sunny -> humidity
            high -> no
            normal -> yes
          overcast -> yes
          rainy -> windy
            TRUE -> no
            FALSE -> yes
    """
    return "\n".join(visit(root, TreeRenderer(indent=indent)))
