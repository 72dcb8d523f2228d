"""A single labeled row of a table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from id3kit.dataset.attributes import Attribute, Value
from id3kit.exceptions import InvalidInputError


class Instance:
    """An immutable, ordered mapping from attribute to value.

    Each value carries its attribute, so an instance is built from its values
    alone. The order of the values is the column order of the row.

    Examples:
        >>> outlook = Attribute(name="outlook", values=("sunny", "overcast", "rainy"))
        >>> play = Attribute(name="play", values=("yes", "no"))
        >>> row = Instance([outlook.value("sunny"), play.value("no")])
        >>> str(row.value(play))
        'no'
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Value]) -> None:
        """Initialize the instance.

        Args:
            values (Iterable[Value]): One value per attribute, in column order.

        Raises:
            InvalidInputError: If two values are bound to the same attribute.
        """
        mapping: dict[Attribute, Value] = {}
        for value in values:
            if value.attribute in mapping:
                raise InvalidInputError(f"Instance has more than one value for attribute {value.attribute.name!r}")
            mapping[value.attribute] = value
        self._values = mapping

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Attributes the instance has values for, in column order."""
        return tuple(self._values)

    def value(self, attribute: Attribute) -> Value:
        """Return the value of this instance for an attribute.

        Args:
            attribute (Attribute): The attribute to look up.

        Returns:
            Value: The value bound to `attribute`.

        Raises:
            InvalidInputError: If the instance has no value for `attribute`.
        """
        try:
            return self._values[attribute]
        except KeyError:
            raise InvalidInputError(f"Instance has no value for attribute {attribute.name!r}") from None

    def has_value(self, attribute: Attribute) -> bool:
        """Return whether the instance holds a value for an attribute.

        Args:
            attribute (Attribute): The attribute to look up.

        Returns:
            bool: True if `attribute` has a value in this instance.
        """
        return attribute in self._values

    def values(self) -> tuple[Value, ...]:
        """Return the values of the instance in column order.

        Returns:
            tuple[Value, ...]: One value per attribute.
        """
        return tuple(self._values.values())

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values.values())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Instance):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{attribute.name}={value.literal!r}" for attribute, value in self._values.items())
        return f"Instance({pairs})"

    def __str__(self) -> str:
        return ",".join(value.literal for value in self._values.values())
