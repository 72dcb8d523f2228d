"""The owning table of attributes and instances."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from id3kit.dataset.attributes import Attribute
from id3kit.dataset.instance import Instance
from id3kit.dataset.views import TableView, _check_index
from id3kit.exceptions import ColumnsNotFoundError, DuplicateColumnsError, InvalidInputError


class Table(TableView):
    """A table owning its attributes (columns) and instances (rows).

    The table is also the identity view over its own data. Attributes must be
    added before the instances that hold values for them: every instance added
    must carry exactly one value per attribute currently in the table.

    Attributes:
        name (str | None): Optional name of the relation the table holds.

    Examples:
        >>> outlook = Attribute(name="outlook", values=("sunny", "overcast", "rainy"))
        >>> play = Attribute(name="play", values=("yes", "no"))
        >>> table = Table(outlook, play, name="weather")
        >>> table.add_row("sunny", "no")
        >>> table.instance_count()
        1
        >>> table.last_attribute().name
        'play'
    """

    def __init__(self, *attributes: Attribute, name: str | None = None) -> None:
        """Initialize the table.

        Args:
            *attributes (Attribute): Initial columns in order.
            name (str | None): Optional name of the relation.

        Raises:
            DuplicateColumnsError: If two attributes share a name.
        """
        self.name = name
        self._attributes: list[Attribute] = []
        self._instances: list[Instance] = []
        self.add_attributes(*attributes)

    # ------------------------------------------------------------------
    # TableView interface
    # ------------------------------------------------------------------

    def attribute_count(self) -> int:
        return len(self._attributes)

    def attribute_at(self, index: int) -> Attribute:
        _check_index(index, len(self._attributes), "attribute")
        return self._attributes[index]

    def instance_count(self) -> int:
        return len(self._instances)

    def instance_at(self, index: int) -> Instance:
        _check_index(index, len(self._instances), "instance")
        return self._instances[index]

    def has_attribute(self, attribute: Attribute) -> bool:
        return attribute in self._attributes

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_attribute(self, attribute: Attribute) -> None:
        """Add an attribute (column) to the table.

        Args:
            attribute (Attribute): The column to append.

        Raises:
            DuplicateColumnsError: If an attribute with the same name exists.
        """
        names = [existing.name for existing in self._attributes]
        if attribute.name in names:
            raise DuplicateColumnsError([*names, attribute.name])
        self._attributes.append(attribute)
        logger.trace("Attribute added", table=self.name, attribute=attribute.name, domain_size=len(attribute.values))

    def add_attributes(self, *attributes: Attribute) -> None:
        """Add several attributes (columns) in order.

        Args:
            *attributes (Attribute): The columns to append.

        Raises:
            DuplicateColumnsError: If an attribute with the same name exists.
        """
        for attribute in attributes:
            self.add_attribute(attribute)

    def add_instance(self, instance: Instance) -> None:
        """Add an instance (row) to the table.

        Args:
            instance (Instance): The row to append.

        Raises:
            InvalidInputError: If the instance does not hold exactly one value
                for each attribute of the table.
        """
        missing = [attribute.name for attribute in self._attributes if not instance.has_value(attribute)]
        if missing:
            raise InvalidInputError(f"Instance has no value for attributes {missing}")
        if len(instance) != len(self._attributes):
            extra = [attribute.name for attribute in instance.attributes if attribute not in self._attributes]
            raise InvalidInputError(f"Instance has values for attributes not in the table: {extra}")
        self._instances.append(instance)

    def add_instances(self, instances: Iterable[Instance]) -> None:
        """Add several instances (rows) in order.

        Args:
            instances (Iterable[Instance]): The rows to append.

        Raises:
            InvalidInputError: If an instance does not hold exactly one value
                for each attribute of the table.
        """
        for instance in instances:
            self.add_instance(instance)

    def add_row(self, *literals: str) -> Instance:
        """Build an instance from literals in column order and add it.

        Args:
            *literals (str): One literal per attribute, in column order.

        Returns:
            Instance: The instance that was added.

        Raises:
            InvalidInputError: If the number of literals differs from the
                number of attributes.
            FormatError: If a literal is not in its attribute's domain.
        """
        if len(literals) != len(self._attributes):
            raise InvalidInputError(f"Expected {len(self._attributes)} values per row, got {len(literals)}")
        instance = Instance(
            attribute.value(literal) for attribute, literal in zip(self._attributes, literals, strict=True)
        )
        self.add_instance(instance)
        return instance

    # ------------------------------------------------------------------
    # Attribute lookup
    # ------------------------------------------------------------------

    def attribute_named(self, name: str) -> Attribute:
        """Return the attribute with a given name.

        Raises:
            ColumnsNotFoundError: If no attribute has that name.
        """
        for attribute in self._attributes:
            if attribute.name == name:
                return attribute
        raise ColumnsNotFoundError(
            missing_columns=[name],
            available_columns=[attribute.name for attribute in self._attributes],
        )

    def attribute_set(self, *exclude: Attribute) -> tuple[Attribute, ...]:
        """Return all attributes except the excluded ones, in declaration order.

        Use this to build the candidate attributes for training, e.g.
        `table.attribute_set(class_attribute)`.

        Args:
            *exclude (Attribute): Attributes to leave out.

        Returns:
            tuple[Attribute, ...]: The remaining attributes in column order.
        """
        return tuple(attribute for attribute in self._attributes if attribute not in exclude)

    def last_attribute(self) -> Attribute:
        """Return the last column, conventionally the class attribute.

        Raises:
            ViewIndexError: If the table has no attributes.
        """
        return self.attribute_at(len(self._attributes) - 1)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"attributes={[attribute.name for attribute in self._attributes]!r}, "
            f"instances={len(self._instances)})"
        )
