"""Learning sub-package: statistical measures and ID3 tree induction."""

from __future__ import annotations

from id3kit.learning.id3 import (
    select_partition_attribute,
    train_model,
    train_model_on_subset,
    train_model_on_table,
)
from id3kit.learning.measures import class_distribution, entropy, information_gain, most_common_value

__all__ = [
    "class_distribution",
    "entropy",
    "information_gain",
    "most_common_value",
    "select_partition_attribute",
    "train_model",
    "train_model_on_subset",
    "train_model_on_table",
]
