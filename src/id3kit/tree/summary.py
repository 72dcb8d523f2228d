"""Rule extraction, metrics computation, and summaries of trained decision trees."""

from __future__ import annotations

from typing import assert_never

from sklearn.metrics import accuracy_score

from id3kit.dataset.attributes import Attribute
from id3kit.dataset.views import PredicateView, TableView
from id3kit.exceptions import InvalidInputError
from id3kit.learning.measures import class_distribution
from id3kit.tree.evaluation import leaf_count, predict, tree_depth
from id3kit.tree.models import Condition, Rule, TreeSummary
from id3kit.tree.nodes import InnerNode, Leaf, Node

# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def extract_rules(root: Node, view: TableView, class_attribute: Attribute) -> list[Rule]:
    """Extract one rule per leaf of a decision tree.

    Instances of `view` are routed down the tree alongside the walk, so each
    rule reports how many of them reach its leaf and how many of those carry
    the predicted class value.

    Args:
        root (Node): Root of the decision tree.
        view (TableView): Instances used to compute per-leaf support.
        class_attribute (Attribute): The attribute the tree predicts.

    Returns:
        list[Rule]: One rule per leaf, in pre-order.

    Raises:
        InvalidInputError: If `class_attribute` or a decision attribute is not
            part of `view`.
    """
    view.require_attribute(class_attribute, role="Class attribute")
    rules: list[Rule] = []
    _walk_tree(
        node=root,
        view=view,
        class_attribute=class_attribute,
        path_conditions=[],
        rules=rules,
    )
    return rules


def compute_metrics(root: Node, view: TableView, class_attribute: Attribute) -> dict[str, float]:
    """Compute evaluation metrics of a decision tree over a view.

    Args:
        root (Node): Root of the decision tree.
        view (TableView): Labeled instances to evaluate on; must not be empty.
        class_attribute (Attribute): The attribute the tree predicts.

    Returns:
        dict[str, float]: `{"accuracy": <float>}`.

    Raises:
        InvalidInputError: If `view` is empty or lacks `class_attribute`.
    """
    view.require_attribute(class_attribute, role="Class attribute")
    if view.instance_count() == 0:
        raise InvalidInputError("Cannot compute metrics over an empty view")
    actual = [instance.value(class_attribute).literal for instance in view.instances()]
    predicted = [value.literal for value in predict(root, view)]
    return {"accuracy": float(accuracy_score(actual, predicted))}


def summarize_tree(root: Node, view: TableView, class_attribute: Attribute) -> TreeSummary:
    """Assemble a structured summary of a decision tree.

    Args:
        root (Node): Root of the decision tree.
        view (TableView): Labeled instances to compute support and metrics
            over, typically the training view.
        class_attribute (Attribute): The attribute the tree predicts.

    Returns:
        TreeSummary: Rules, metrics, and structure of the tree.

    Raises:
        InvalidInputError: If `view` is empty or lacks an attribute used by
            the tree.
    """
    metrics = compute_metrics(root, view, class_attribute)
    rules = extract_rules(root, view, class_attribute)
    attributes_used = list(dict.fromkeys(condition.attribute for rule in rules for condition in rule.conditions))
    return TreeSummary(
        target=class_attribute.name,
        attributes_used=attributes_used,
        rules=rules,
        metrics=metrics,
        sample_count=view.instance_count(),
        depth=tree_depth(root),
        leaf_count=leaf_count(root),
    )


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _walk_tree(
    *,
    node: Node,
    view: TableView,
    class_attribute: Attribute,
    path_conditions: list[Condition],
    rules: list[Rule],
) -> None:
    """Recursively walk a node and accumulate leaf rules.

    Args:
        node (Node): The current node.
        view (TableView): Instances reaching `node`.
        class_attribute (Attribute): The attribute the tree predicts.
        path_conditions (list[Condition]): Conditions from the root to `node`.
        rules (list[Rule]): Accumulator list; leaf rules are appended in-place.
    """
    match node:
        case Leaf():
            rules.append(_build_leaf_rule(node, view, class_attribute, path_conditions))
        case InnerNode():
            for value, child in node.children.items():
                _walk_tree(
                    node=child,
                    view=PredicateView.select_instances(view, node.attribute, value),
                    class_attribute=class_attribute,
                    path_conditions=[*path_conditions, Condition(attribute=node.attribute.name, value=value.literal)],
                    rules=rules,
                )
        case _:
            assert_never(node)


def _build_leaf_rule(
    leaf: Leaf,
    view: TableView,
    class_attribute: Attribute,
    path_conditions: list[Condition],
) -> Rule:
    """Build the rule for a leaf from the instances that reach it.

    Args:
        leaf (Leaf): The leaf.
        view (TableView): Instances reaching the leaf.
        class_attribute (Attribute): The attribute the tree predicts.
        path_conditions (list[Condition]): Conditions from the root to the leaf.

    Returns:
        Rule: The leaf's rule.
    """
    samples = view.instance_count()
    correct = class_distribution(view, class_attribute).get(leaf.value, 0)
    return Rule(
        conditions=path_conditions,
        prediction=leaf.value.literal,
        samples=samples,
        confidence=correct / samples if samples else 0.0,
    )
