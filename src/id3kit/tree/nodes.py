"""Decision tree node model and visitor dispatch.

A tree is made of two node kinds only: `Leaf`, holding a predicted class
value, and `InnerNode`, holding a decision attribute and one child per value
of that attribute's domain. `Node` is the closed union of the two, and
`visit` dispatches a `NodeVisitor` on it with an exhaustive match.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol, assert_never

from id3kit.dataset.attributes import Attribute, Value
from id3kit.exceptions import FormatError, InvalidInputError


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal node predicting a single class value.

    Attributes:
        value (Value): The predicted value of the class attribute.
    """

    value: Value

    def __str__(self) -> str:
        return self.value.literal


@dataclass(frozen=True, slots=True)
class InnerNode:
    """Decision node splitting on one attribute, with one child per domain value.

    The children mapping must cover the decision attribute's domain exactly
    and in domain order, so an inner node is always complete.

    Attributes:
        attribute (Attribute): The decision attribute.
        children (Mapping[Value, Node]): Read-only mapping from each domain
            value of `attribute` to the subtree for that value.

    Raises:
        InvalidInputError: On construction, if the children keys differ from
            the attribute's domain.
    """

    attribute: Attribute
    children: Mapping[Value, Node]

    def __post_init__(self) -> None:
        keys = tuple(value.literal for value in self.children)
        if keys != self.attribute.values:
            raise InvalidInputError(
                f"Children of a node deciding on {self.attribute.name!r} must cover its domain "
                f"{self.attribute.values!r} in order, got {keys!r}"
            )
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def child(self, value: Value) -> Node:
        """Return the subtree for a value of the decision attribute.

        Args:
            value (Value): A value of the decision attribute.

        Returns:
            Node: The subtree selected by `value`.

        Raises:
            FormatError: If `value` is not in the decision attribute's domain.
        """
        try:
            return self.children[value]
        except KeyError:
            raise FormatError(
                attribute=self.attribute.name, value=value.literal, domain=self.attribute.values
            ) from None


type Node = Leaf | InnerNode


class NodeVisitor[T](Protocol):
    """Operation over a tree with one method per node kind."""

    def visit_leaf(self, leaf: Leaf) -> T:
        """Handle a leaf node."""
        ...

    def visit_inner(self, node: InnerNode) -> T:
        """Handle an inner node; recurse into children via `visit` as needed."""
        ...


def visit[T](node: Node, visitor: NodeVisitor[T]) -> T:
    """Dispatch a visitor on a node according to its kind.

    Args:
        node (Node): The node to visit.
        visitor (NodeVisitor[T]): The operation to apply.

    Returns:
        T: Whatever the visitor returns for this node.
    """
    match node:
        case Leaf():
            return visitor.visit_leaf(node)
        case InnerNode():
            return visitor.visit_inner(node)
        case _:
            assert_never(node)
