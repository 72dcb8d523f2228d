"""ID3 decision tree induction over table views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from id3kit.dataset.attributes import Attribute, Value
from id3kit.dataset.table import Table
from id3kit.dataset.views import IndexedView, PredicateView, TableView
from id3kit.exceptions import InvalidInputError
from id3kit.learning.measures import entropy, information_gain, most_common_value
from id3kit.logging import SPLIT_LEVEL
from id3kit.tree.nodes import InnerNode, Leaf, Node

# ---------------------------------------------------------------------------
# Public interface -- Attribute selection
# ---------------------------------------------------------------------------


def select_partition_attribute(
    view: TableView,
    class_attribute: Attribute,
    attributes: Sequence[Attribute],
) -> Attribute:
    """Select the attribute whose split yields the maximum information gain.

    Ties go to the attribute that comes first in `attributes`.

    Args:
        view (TableView): The rows to partition.
        class_attribute (Attribute): The target attribute.
        attributes (Sequence[Attribute]): Candidate split attributes, in
            tie-breaking order.

    Returns:
        Attribute: The best candidate.

    Raises:
        InvalidInputError: If `attributes` is empty or an attribute is not
            part of `view`.
    """
    attribute, _ = _best_split(view, class_attribute, attributes)
    return attribute


# ---------------------------------------------------------------------------
# Public interface -- Training
# ---------------------------------------------------------------------------


def train_model(
    view: TableView,
    class_attribute: Attribute,
    candidate_attributes: Sequence[Attribute],
) -> Node:
    """Induce a decision tree from the instances of a view.

    A node becomes a leaf when all its instances share one class value, or
    when no candidate attributes remain (predicting the majority class).
    Otherwise it splits on the candidate with maximum information gain and
    grows one subtree per domain value of that attribute, with the chosen
    attribute removed from the candidates. A domain value that no instance
    holds gets a leaf predicting the majority class of the node being split.

    Args:
        view (TableView): The training rows.
        class_attribute (Attribute): The target attribute to predict.
        candidate_attributes (Sequence[Attribute]): Attributes that may be
            split on. Their order decides ties between equal gains; repeated
            attributes are considered once.

    Returns:
        Node: Root of the induced tree.

    Raises:
        InvalidInputError: If the class attribute or a candidate attribute is
            not part of `view`, if `view` has no instances, or if an instance
            lacks a value for a measured attribute.
    """
    view.require_attribute(class_attribute, role="Class attribute")
    for attribute in candidate_attributes:
        view.require_attribute(attribute, role="Candidate attribute")
    if view.instance_count() == 0:
        raise InvalidInputError("Cannot train a decision tree on an empty view")

    candidates = tuple(dict.fromkeys(candidate_attributes))
    logger.info(
        "Training started",
        class_attribute=class_attribute.name,
        candidates=[attribute.name for attribute in candidates],
        instances=view.instance_count(),
    )
    root = _grow(view, class_attribute, candidates, depth=0)
    logger.info("Training finished", class_attribute=class_attribute.name)
    return root


def train_model_on_table(table: Table, class_attribute: Attribute) -> Node:
    """Induce a decision tree from a whole table.

    Every attribute of the table other than `class_attribute` is a candidate,
    in declaration order.

    Args:
        table (Table): The training table.
        class_attribute (Attribute): The target attribute to predict.

    Returns:
        Node: Root of the induced tree.

    Raises:
        InvalidInputError: See `train_model`.
    """
    return train_model(table, class_attribute, table.attribute_set(class_attribute))


def train_model_on_subset(table: Table, indices: Iterable[int], class_attribute: Attribute) -> Node:
    """Induce a decision tree from a subset of a table's rows.

    Every attribute of the table other than `class_attribute` is a candidate,
    in declaration order.

    Args:
        table (Table): The table holding the training rows.
        indices (Iterable[int]): Positions of the rows to train on.
        class_attribute (Attribute): The target attribute to predict.

    Returns:
        Node: Root of the induced tree.

    Raises:
        ViewIndexError: If an index is out of range for `table`.
        InvalidInputError: See `train_model`.
    """
    return train_model(IndexedView(table, indices), class_attribute, table.attribute_set(class_attribute))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _best_split(
    view: TableView,
    class_attribute: Attribute,
    attributes: Sequence[Attribute],
) -> tuple[Attribute, float]:
    """Return the first candidate with maximum information gain, and that gain.

    Raises:
        InvalidInputError: If `attributes` is empty.
    """
    best: tuple[Attribute, float] | None = None
    for attribute in attributes:
        gain = information_gain(view, class_attribute, attribute)
        if best is None or gain > best[1]:
            best = (attribute, gain)
    if best is None:
        raise InvalidInputError("At least one candidate attribute is required to select a partition attribute")
    return best


def _grow(
    view: TableView,
    class_attribute: Attribute,
    candidates: tuple[Attribute, ...],
    *,
    depth: int,
) -> Node:
    """Recursively build the subtree for a non-empty view.

    Args:
        view (TableView): The rows reaching this node; never empty.
        class_attribute (Attribute): The target attribute.
        candidates (tuple[Attribute, ...]): Attributes still available for splitting.
        depth (int): Depth of the node being built, 0 at the root.

    Returns:
        Node: The subtree for `view`.
    """
    if entropy(view, class_attribute) == 0:
        leaf = Leaf(view.instance_at(0).value(class_attribute))
        logger.debug("Leaf created", value=leaf.value.literal, reason="homogeneous", depth=depth)
        return leaf

    if not candidates:
        leaf = Leaf(most_common_value(view, class_attribute))
        logger.debug("Leaf created", value=leaf.value.literal, reason="no attributes left", depth=depth)
        return leaf

    attribute, gain = _best_split(view, class_attribute, candidates)
    logger.log(
        SPLIT_LEVEL,
        "Split selected",
        attribute=attribute.name,
        gain=round(gain, 4),
        depth=depth,
        instances=view.instance_count(),
    )

    remaining = tuple(candidate for candidate in candidates if candidate != attribute)
    children: dict[Value, Node] = {}
    for value in attribute.domain:
        subset = PredicateView.select_instances(view, attribute, value)
        if subset.instance_count() == 0:
            leaf = Leaf(most_common_value(view, class_attribute))
            logger.debug(
                "Leaf created",
                value=leaf.value.literal,
                reason=f"no instances with {attribute.name}={value.literal}",
                depth=depth + 1,
            )
            children[value] = leaf
        else:
            children[value] = _grow(subset, class_attribute, remaining, depth=depth + 1)

    return InnerNode(attribute, children)
