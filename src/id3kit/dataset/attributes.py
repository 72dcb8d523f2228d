"""Categorical attributes and the values bound to them."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from id3kit.exceptions import FormatError


class Attribute(BaseModel):
    """A named categorical column with a fixed, ordered domain of legal values.

    Attributes are immutable and hashable. Two attributes are equal when they
    share the same name and the same domain in the same order. A single
    attribute object is shared by the table that declares it, the instances
    holding values for it, and every tree node that decides on it.

    Attributes:
        name (str): Column name, e.g. `"outlook"`.
        values (tuple[str, ...]): The legal values in declaration order, e.g.
            `("sunny", "overcast", "rainy")`.

    Examples:
        >>> outlook = Attribute(name="outlook", values=("sunny", "overcast", "rainy"))
        >>> outlook.value("sunny")
        Value(outlook='sunny')
        >>> [str(v) for v in outlook.domain]
        ['sunny', 'overcast', 'rainy']
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        description="Column name of the attribute.",
    )
    values: tuple[str, ...] = Field(
        min_length=1,
        description="Legal values of the attribute in declaration order.",
    )

    @field_validator("values", mode="after")
    @classmethod
    def _validate_unique_values(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that the domain does not list a value twice.

        Args:
            value (tuple[str, ...]): The domain to validate.

        Returns:
            tuple[str, ...]: The validated domain, unchanged.

        Raises:
            ValueError: If any value appears more than once.
        """
        duplicates = sorted({v for v in value if value.count(v) > 1})
        if duplicates:
            raise ValueError(f"attribute domain contains duplicate values: {duplicates}")
        return value

    @property
    def domain(self) -> tuple[Value, ...]:
        """The legal values bound to this attribute, in declaration order."""
        return tuple(Value(self, literal) for literal in self.values)

    def value(self, literal: str) -> Value:
        """Bind a literal to this attribute.

        Args:
            literal (str): A member of the attribute's domain.

        Returns:
            Value: The bound value.

        Raises:
            FormatError: If `literal` is not in the domain.
        """
        return Value(self, literal)

    def __str__(self) -> str:
        return f"{self.name} {{{', '.join(self.values)}}}"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Value:
    """A domain member bound to its attribute.

    Values compare and hash by their literal only, so a value can be used to
    look up the child of a decision node regardless of which instance it came
    from.

    Attributes:
        attribute (Attribute): The attribute whose domain contains the literal.
        literal (str): The underlying categorical literal.

    Raises:
        FormatError: On construction, if `literal` is not in the attribute's domain.
    """

    attribute: Attribute
    literal: str

    def __post_init__(self) -> None:
        if self.literal not in self.attribute.values:
            raise FormatError(attribute=self.attribute.name, value=self.literal, domain=self.attribute.values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self.literal == other.literal
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.literal)

    def __str__(self) -> str:
        return self.literal

    def __repr__(self) -> str:
        return f"Value({self.attribute.name}={self.literal!r})"
