"""Decision tree sub-package: node model, rendering, evaluation, and summaries."""

from __future__ import annotations

from id3kit.tree.evaluation import classify, leaf_count, predict, tree_depth
from id3kit.tree.models import Condition, Rule, TreeSummary
from id3kit.tree.nodes import InnerNode, Leaf, Node, NodeVisitor, visit
from id3kit.tree.rendering import TreeRenderer, render_tree

__all__ = [
    "Condition",
    "InnerNode",
    "Leaf",
    "Node",
    "NodeVisitor",
    "Rule",
    "TreeRenderer",
    "TreeSummary",
    "classify",
    "leaf_count",
    "predict",
    "render_tree",
    "tree_depth",
    "visit",
]
