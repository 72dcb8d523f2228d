"""Classifying instances with a decision tree, and structural tree statistics."""

from __future__ import annotations

from id3kit.dataset.attributes import Value
from id3kit.dataset.instance import Instance
from id3kit.dataset.views import TableView
from id3kit.tree.nodes import InnerNode, Leaf, Node, visit


class _Classifier:
    """Visitor following the branch selected by an instance down to a leaf."""

    def __init__(self, instance: Instance) -> None:
        self.instance = instance

    def visit_leaf(self, leaf: Leaf) -> Value:
        return leaf.value

    def visit_inner(self, node: InnerNode) -> Value:
        return visit(node.child(self.instance.value(node.attribute)), self)


class _DepthCounter:
    def visit_leaf(self, leaf: Leaf) -> int:
        return 0

    def visit_inner(self, node: InnerNode) -> int:
        return 1 + max(visit(child, self) for child in node.children.values())


class _LeafCounter:
    def visit_leaf(self, leaf: Leaf) -> int:
        return 1

    def visit_inner(self, node: InnerNode) -> int:
        return sum(visit(child, self) for child in node.children.values())


def classify(root: Node, instance: Instance) -> Value:
    """Predict the class value of an instance.

    At each inner node the instance's value for the decision attribute
    selects the child to descend into, until a leaf is reached.

    Args:
        root (Node): Root of the decision tree.
        instance (Instance): The instance to classify.

    Returns:
        Value: The class value held by the leaf the instance reaches.

    Raises:
        InvalidInputError: If the instance has no value for a decision
            attribute on its path.
        FormatError: If the instance's value is not in a decision
            attribute's domain.
    """
    return visit(root, _Classifier(instance))


def predict(root: Node, view: TableView) -> list[Value]:
    """Classify every instance of a view, in row order."""
    return [classify(root, instance) for instance in view.instances()]


def tree_depth(root: Node) -> int:
    """Return the number of decisions on the longest root-to-leaf path (0 for a single leaf)."""
    return visit(root, _DepthCounter())


def leaf_count(root: Node) -> int:
    """Return the number of leaves in a tree.

    Args:
        root (Node): Root of the decision tree.

    Returns:
        int: Leaf count; 1 for a tree that is a single leaf.
    """
    return visit(root, _LeafCounter())
