"""Custom exceptions for id3kit.

This module defines the typed failures raised by the table, view, measure,
and tree-building code:

Input validation exceptions (subclass ValueError):
- InvalidInputError: Raised when an argument violates a contract of the core,
  e.g. a class attribute that is not part of a view or an instance without a
  value for a measured attribute.
- FormatError: Raised when a literal lies outside an attribute's domain.
- ColumnsNotFoundError: Raised when requested columns do not exist.
- DuplicateColumnsError: Raised when duplicate column names are provided.

View access exceptions (subclass IndexError):
- ViewIndexError: Raised when a row or column index is out of range for a view.
"""

from __future__ import annotations

from typing import Any


class InvalidInputError(ValueError):
    """Raised when an input violates a contract of the core.

    Examples:
        >>> err = InvalidInputError("Class attribute 'play' is not an attribute of the view")
        >>> str(err)
        "Class attribute 'play' is not an attribute of the view"
    """


class FormatError(ValueError):
    """Raised when a literal is not a member of an attribute's domain.

    Attributes:
        attribute (str): Name of the attribute the literal was checked against.
        value (Any): The offending literal.
        domain (tuple[Any, ...]): The legal values of the attribute.

    Examples:
        >>> err = FormatError(attribute="outlook", value="foggy", domain=("sunny", "overcast", "rainy"))
        >>> str(err)
        "Value 'foggy' is not in the domain of attribute 'outlook': ('sunny', 'overcast', 'rainy')"
    """

    attribute: str
    value: Any
    domain: tuple[Any, ...]

    def __init__(self, *, attribute: str, value: Any, domain: tuple[Any, ...]) -> None:
        """Initialize FormatError.

        Args:
            attribute (str): Name of the attribute the literal was checked against.
            value (Any): The offending literal.
            domain (tuple[Any, ...]): The legal values of the attribute.
        """
        super().__init__(f"Value {value!r} is not in the domain of attribute {attribute!r}: {domain!r}")
        self.attribute = attribute
        self.value = value
        self.domain = domain

    def __repr__(self) -> str:
        """Return detailed representation for debugging.

        Returns:
            str: Detailed string representation including attribute, value and domain.
        """
        return (
            f"{self.__class__.__name__}("
            f"attribute={self.attribute!r}, value={self.value!r}, domain={self.domain!r})"
        )


class ViewIndexError(IndexError):
    """Raised when an index is out of range for a table view.

    Negative indices are never wrapped around; they are out of range.

    Attributes:
        kind (str): What was being indexed, `"instance"` or `"attribute"`.
        index (int): The requested index.
        size (int): The number of addressable items in the view.

    Examples:
        >>> err = ViewIndexError(kind="instance", index=14, size=14)
        >>> str(err)
        'instance index 14 out of range for view of size 14'
    """

    kind: str
    index: int
    size: int

    def __init__(self, *, kind: str, index: int, size: int) -> None:
        """Initialize ViewIndexError.

        Args:
            kind (str): What was being indexed, `"instance"` or `"attribute"`.
            index (int): The requested index.
            size (int): The number of addressable items in the view.
        """
        super().__init__(f"{kind} index {index} out of range for view of size {size}")
        self.kind = kind
        self.index = index
        self.size = size

    def __repr__(self) -> str:
        """Return detailed representation for debugging.

        Returns:
            str: Detailed string representation including kind, index and size.
        """
        return f"{self.__class__.__name__}(kind={self.kind!r}, index={self.index!r}, size={self.size!r})"


class ColumnsNotFoundError(ValueError):
    """Raised when requested columns do not exist in a table or DataFrame.

    Attributes:
        missing_columns (list[str]): Column names that were not found.
        available_columns (list[str]): Column names that are present.

    Examples:
        >>> err = ColumnsNotFoundError(
        ...     missing_columns=["x", "y"],
        ...     available_columns=["a", "b", "c"],
        ... )
        >>> err.missing_columns
        ['x', 'y']
    """

    missing_columns: list[str]
    available_columns: list[str]

    def __init__(
        self,
        missing_columns: list[str],
        available_columns: list[str],
    ) -> None:
        """Initialize ColumnsNotFoundError.

        Args:
            missing_columns (list[str]): Column names that were not found.
            available_columns (list[str]): Column names that are present.
        """
        super().__init__(f"Columns not found: {sorted(missing_columns)}")
        self.missing_columns = missing_columns
        self.available_columns = available_columns


class DuplicateColumnsError(ValueError):
    """Raised when duplicate column names are provided.

    Attributes:
        columns (list[str]): The column list that contains duplicates.
        duplicate_columns (list[str]): The specific column names that are
            duplicated (each listed once).

    Examples:
        >>> err = DuplicateColumnsError(columns=["a", "a", "b"])
        >>> err.duplicate_columns
        ['a']
    """

    columns: list[str]
    duplicate_columns: list[str]

    def __init__(self, columns: list[str]) -> None:
        """Initialize DuplicateColumnsError.

        Args:
            columns (list[str]): The column list containing duplicates.
        """
        super().__init__("Duplicate column names are not allowed")
        self.columns = columns
        seen: set[str] = set()
        self.duplicate_columns = []
        for col in columns:
            if col in seen and col not in self.duplicate_columns:
                self.duplicate_columns.append(col)
            seen.add(col)
