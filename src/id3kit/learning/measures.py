"""Statistical measures over table views: entropy, information gain, and most common value."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from id3kit.dataset.attributes import Attribute, Value
from id3kit.dataset.views import IndexedView, TableView
from id3kit.exceptions import InvalidInputError


def class_distribution(view: TableView, attribute: Attribute) -> dict[Value, int]:
    """Count how often each value of an attribute occurs in a view.

    Args:
        view (TableView): The rows to count over.
        attribute (Attribute): The attribute whose values are counted.

    Returns:
        dict[Value, int]: Occurrence count per value, ordered by first
            occurrence in row order. Values that never occur are absent.

    Raises:
        InvalidInputError: If `attribute` is not an attribute of `view`, or a
            row has no value for it.
    """
    view.require_attribute(attribute)
    counts: dict[Value, int] = {}
    for instance in view.instances():
        value = instance.value(attribute)
        counts[value] = counts.get(value, 0) + 1
    return counts


def entropy(view: TableView, class_attribute: Attribute) -> float:
    """Compute the base-2 entropy of the class value distribution in a view.

    Uses the convention `0 * log2(0) = 0`; values that do not occur in the
    view do not contribute.

    Args:
        view (TableView): The rows to measure.
        class_attribute (Attribute): The target attribute.

    Returns:
        float: Entropy in bits, in `[0, log2(len(class_attribute.values))]`.
            `0.0` for an empty view or a view with a single class value.

    Raises:
        InvalidInputError: If `class_attribute` is not an attribute of `view`.

    Examples:
        >>> entropy(weather, play)  # 9 "yes", 5 "no"  # doctest: +SKIP
        0.9402859586706309
    """
    return _entropy_from_counts(class_distribution(view, class_attribute).values())


def information_gain(view: TableView, class_attribute: Attribute, split_attribute: Attribute) -> float:
    """Compute the reduction in class entropy achieved by splitting on an attribute.

    `entropy(view) - sum(|view_v| / |view| * entropy(view_v))` over every
    domain value `v` of `split_attribute` that occurs in the view.

    Args:
        view (TableView): The rows to partition.
        class_attribute (Attribute): The target attribute.
        split_attribute (Attribute): The attribute to partition on.

    Returns:
        float: The information gain in bits, never negative. `0.0` for an
            empty view.

    Raises:
        InvalidInputError: If either attribute is not an attribute of `view`.
    """
    view.require_attribute(class_attribute, role="Class attribute")
    view.require_attribute(split_attribute, role="Split attribute")
    total = view.instance_count()
    if total == 0:
        return 0.0

    partitions: dict[Value, list[int]] = {}
    for index, instance in enumerate(view.instances()):
        partitions.setdefault(instance.value(split_attribute), []).append(index)

    remainder = 0.0
    for value in split_attribute.domain:
        indices = partitions.get(value)
        if not indices:
            continue
        remainder += len(indices) / total * entropy(IndexedView(view, indices), class_attribute)

    # Rounding can push an uninformative split a hair below zero.
    return max(entropy(view, class_attribute) - remainder, 0.0)


def most_common_value(view: TableView, class_attribute: Attribute) -> Value:
    """Return the most frequent value of an attribute in a view.

    Ties are broken in favour of the value encountered first in row order.

    Args:
        view (TableView): The rows to count over.
        class_attribute (Attribute): The attribute whose values are counted.

    Returns:
        Value: The value with the highest count.

    Raises:
        InvalidInputError: If the view is empty, or `class_attribute` is not
            an attribute of `view`.
    """
    counts = class_distribution(view, class_attribute)
    if not counts:
        raise InvalidInputError(f"Cannot determine the most common value of {class_attribute.name!r} in an empty view")
    # max() keeps the first maximal key, i.e. the earliest encountered value
    return max(counts, key=counts.__getitem__)


def _entropy_from_counts(counts: Iterable[int]) -> float:
    """Compute base-2 entropy from non-zero occurrence counts.

    Args:
        counts (Iterable[int]): Occurrence count per distinct value.

    Returns:
        float: Entropy in bits; `0.0` for fewer than two distinct values.
    """
    counts_array = np.fromiter(counts, dtype=np.float64)
    if counts_array.size < 2:
        return 0.0
    probabilities = counts_array / counts_array.sum()
    return float(-np.sum(probabilities * np.log2(probabilities)))
