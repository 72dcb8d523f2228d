"""Read-only views over a table of categorical instances.

A view exposes attributes and instances by position without owning or copying
them. `Table` is the identity view over its own rows; `IndexedView` narrows a
parent view to an explicit list of rows; `PredicateView` narrows a parent view
to the rows whose value for one attribute equals a target value. Views compose,
so a predicate view can be built over an indexed view over a table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from id3kit.dataset.attributes import Attribute, Value
from id3kit.dataset.instance import Instance
from id3kit.exceptions import InvalidInputError, ViewIndexError


def _check_index(index: int, size: int, kind: str) -> None:
    """Raise ViewIndexError unless `0 <= index < size`.

    Args:
        index (int): The requested position.
        size (int): Number of addressable items.
        kind (str): What is being indexed, used in the error message.

    Raises:
        ViewIndexError: If the index is negative or not below `size`.
    """
    if not 0 <= index < size:
        raise ViewIndexError(kind=kind, index=index, size=size)


class TableView(ABC):
    """Read-only, positional access to the attributes and instances of a table."""

    @abstractmethod
    def attribute_count(self) -> int:
        """Return the number of visible attributes (columns)."""

    @abstractmethod
    def attribute_at(self, index: int) -> Attribute:
        """Return the attribute at a column position.

        Raises:
            ViewIndexError: If `index` is out of range.
        """

    @abstractmethod
    def instance_count(self) -> int:
        """Return the number of visible instances (rows)."""

    @abstractmethod
    def instance_at(self, index: int) -> Instance:
        """Return the instance at a row position.

        Raises:
            ViewIndexError: If `index` is out of range.
        """

    def attributes(self) -> Iterator[Attribute]:
        """Iterate over the visible attributes in column order."""
        for index in range(self.attribute_count()):
            yield self.attribute_at(index)

    def instances(self) -> Iterator[Instance]:
        """Iterate over the visible instances in row order."""
        for index in range(self.instance_count()):
            yield self.instance_at(index)

    def has_attribute(self, attribute: Attribute) -> bool:
        return any(candidate == attribute for candidate in self.attributes())

    def require_attribute(self, attribute: Attribute, *, role: str = "Attribute") -> None:
        """Raise InvalidInputError unless the attribute is visible in this view.

        Args:
            attribute (Attribute): The attribute that must be present.
            role (str): How the attribute is referred to in the error message,
                e.g. `"Class attribute"`.

        Raises:
            InvalidInputError: If the view has no such attribute.
        """
        if not self.has_attribute(attribute):
            raise InvalidInputError(f"{role} {attribute.name!r} is not an attribute of the view")

    def __len__(self) -> int:
        return self.instance_count()

    def __iter__(self) -> Iterator[Instance]:
        return self.instances()

    def __str__(self) -> str:
        from id3kit.polars_utils import to_markdown_table  # noqa: PLC0415 - polars_utils imports the table module

        return to_markdown_table(self, num_rows=max(self.instance_count(), 1))


class IndexedView(TableView):
    """A view exposing an explicit, ordered selection of a parent's rows.

    `instance_at(i)` is `parent.instance_at(indices[i])`. Indices may repeat
    and need not be sorted; they are validated against the parent once.

    Examples:
        >>> subset = IndexedView(table, [2, 5, 9])  # doctest: +SKIP
        >>> subset.instance_count()  # doctest: +SKIP
        3
    """

    def __init__(self, parent: TableView, indices: Iterable[int]) -> None:
        """Initialize the view.

        Args:
            parent (TableView): The view to select rows from.
            indices (Iterable[int]): Row positions into `parent`; read once.

        Raises:
            ViewIndexError: If any index is out of range for `parent`.
        """
        self._indices = tuple(indices)
        parent_size = parent.instance_count()
        for index in self._indices:
            _check_index(index, parent_size, "instance")
        self._parent = parent

    @property
    def parent(self) -> TableView:
        return self._parent

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    def attribute_count(self) -> int:
        return self._parent.attribute_count()

    def attribute_at(self, index: int) -> Attribute:
        return self._parent.attribute_at(index)

    def instance_count(self) -> int:
        return len(self._indices)

    def instance_at(self, index: int) -> Instance:
        _check_index(index, len(self._indices), "instance")
        return self._parent.instance_at(self._indices[index])


class PredicateView(IndexedView):
    """A view exposing the rows of a parent whose value for an attribute equals a target value.

    The matching rows are found in a single pass over the parent when the view
    is built; afterwards the view behaves like an `IndexedView`.
    """

    def __init__(self, parent: TableView, attribute: Attribute, value: Value) -> None:
        """Initialize the view.

        Args:
            parent (TableView): The view to filter.
            attribute (Attribute): The attribute to test.
            value (Value): The value rows must hold for `attribute`.

        Raises:
            InvalidInputError: If `attribute` is not an attribute of `parent`,
                or if a row has no value for it.
        """
        parent.require_attribute(attribute)
        matching = [
            index for index, instance in enumerate(parent.instances()) if instance.value(attribute) == value
        ]
        super().__init__(parent, matching)
        self._attribute = attribute
        self._value = value

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    @property
    def value(self) -> Value:
        return self._value

    @classmethod
    def select_instances(cls, parent: TableView, attribute: Attribute, value: Value) -> PredicateView:
        """Return the rows of `parent` where `attribute` equals `value`."""
        return cls(parent, attribute, value)
