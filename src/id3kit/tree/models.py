"""Pydantic result models describing a trained decision tree as rules."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Condition(BaseModel):
    """A single equality test on one categorical attribute.

    Attributes:
        attribute (str): Attribute name the test applies to, e.g. `"outlook"`.
        value (str): The value the attribute must hold, e.g. `"sunny"`.

    Examples:
        >>> str(Condition(attribute="outlook", value="sunny"))
        'outlook == sunny'
    """

    attribute: str = Field(
        description="Attribute name the test applies to, e.g. 'outlook'.",
    )
    value: str = Field(
        description="The value the attribute must hold, e.g. 'sunny'.",
    )

    def __str__(self) -> str:
        return f"{self.attribute} == {self.value}"


class Rule(BaseModel):
    """A decision rule for one leaf of a tree.

    Represents the path from the root to one leaf as the list of conditions
    taken along it, together with the leaf's prediction and how well the
    prediction fits the instances that reach the leaf.

    Attributes:
        conditions (list[Condition]): Conditions along the path from root to
            the leaf. Empty when the tree is a single leaf.
        prediction (str): Class value predicted at the leaf.
        samples (int): Number of instances of the summarized view reaching
            the leaf. Zero for a leaf grown for an unobserved value.
        confidence (float): Fraction of those instances whose class value
            equals the prediction; 0.0 when no instance reaches the leaf.

    Examples:
        >>> rule = Rule(
        ...     conditions=[
        ...         Condition(attribute="outlook", value="sunny"),
        ...         Condition(attribute="humidity", value="high"),
        ...     ],
        ...     prediction="no",
        ...     samples=3,
        ...     confidence=1.0,
        ... )
        >>> str(rule)
        'IF outlook == sunny AND humidity == high THEN no'
    """

    conditions: list[Condition] = Field(
        description=(
            "Conditions along the path from root to this leaf. Empty list indicates a single-leaf tree with no splits."
        ),
    )
    prediction: str = Field(
        description="Class value predicted for instances reaching this leaf.",
    )
    samples: int = Field(
        ge=0,
        description="Number of instances reaching this leaf.",
    )
    confidence: float = Field(
        ge=0.0,
        le=1.0,
        description="Fraction of instances at this leaf whose class value equals the prediction.",
    )

    @model_validator(mode="after")
    def _validate_confidence_without_samples(self) -> Rule:
        """Validate that a leaf no instance reaches reports zero confidence.

        Returns:
            Rule: The validated model instance.

        Raises:
            ValueError: If `samples` is 0 and `confidence` is not 0.0.
        """
        if self.samples == 0 and self.confidence != 0.0:
            raise ValueError(f"confidence must be 0.0 when no samples reach the leaf, got {self.confidence}")
        return self

    def __str__(self) -> str:
        if not self.conditions:
            return f"THEN {self.prediction}"
        return f"IF {' AND '.join(str(condition) for condition in self.conditions)} THEN {self.prediction}"


class TreeSummary(BaseModel):
    """Structured description of a trained decision tree.

    Attributes:
        target (str): Name of the class attribute the tree predicts.
        attributes_used (list[str]): Decision attributes appearing in the
            tree, in pre-order of first appearance.
        rules (list[Rule]): One rule per leaf, in pre-order.
        metrics (dict[str, float]): Evaluation metrics over the summarized
            view, e.g. `{"accuracy": 1.0}`.
        sample_count (int): Number of instances in the summarized view.
        depth (int): Number of decisions on the longest root-to-leaf path.
        leaf_count (int): Number of leaves.
    """

    target: str = Field(
        description="Name of the class attribute the tree predicts.",
    )
    attributes_used: list[str] = Field(
        description="Decision attributes appearing in the tree, in pre-order of first appearance.",
    )
    rules: list[Rule] = Field(
        description="One rule per leaf node, in pre-order.",
    )
    metrics: dict[str, float] = Field(
        description='Evaluation metrics over the summarized instances, e.g. {"accuracy": 0.93}.',
    )
    sample_count: int = Field(
        ge=1,
        description="Number of instances the summary was computed over.",
    )
    depth: int = Field(
        ge=0,
        description="Number of decisions on the longest root-to-leaf path.",
    )
    leaf_count: int = Field(
        ge=1,
        description="Number of leaf nodes in the tree.",
    )

    @model_validator(mode="after")
    def _validate_rules_count_matches_leaf_count(self) -> TreeSummary:
        """Validate that the number of rules equals the number of leaf nodes.

        Returns:
            TreeSummary: The validated model instance.

        Raises:
            ValueError: If `len(rules)` does not equal `leaf_count`.
        """
        if len(self.rules) != self.leaf_count:
            raise ValueError(f"rules length ({len(self.rules)}) must equal leaf_count ({self.leaf_count})")
        return self

    @model_validator(mode="after")
    def _validate_rule_attributes_in_attributes_used(self) -> TreeSummary:
        """Validate that every rule condition names an attribute in `attributes_used`.

        Returns:
            TreeSummary: The validated model instance.

        Raises:
            ValueError: If a condition refers to an attribute not listed in
                `attributes_used`.
        """
        used = set(self.attributes_used)
        unknown = sorted({c.attribute for rule in self.rules for c in rule.conditions} - used)
        if unknown:
            raise ValueError(f"rules contain conditions on attributes not in attributes_used: {unknown}")
        return self

    @model_validator(mode="after")
    def _validate_samples_sum_to_sample_count(self) -> TreeSummary:
        """Validate that every summarized instance reaches exactly one leaf.

        Returns:
            TreeSummary: The validated model instance.

        Raises:
            ValueError: If the rule sample counts do not add up to `sample_count`.
        """
        total = sum(rule.samples for rule in self.rules)
        if total != self.sample_count:
            raise ValueError(f"rule samples sum to {total}, expected sample_count {self.sample_count}")
        return self
