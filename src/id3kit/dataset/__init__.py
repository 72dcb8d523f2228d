"""Dataset sub-package: attributes, instances, the owning table, and views."""

from __future__ import annotations

from id3kit.dataset.attributes import Attribute, Value
from id3kit.dataset.instance import Instance
from id3kit.dataset.table import Table
from id3kit.dataset.views import IndexedView, PredicateView, TableView

__all__ = [
    "Attribute",
    "IndexedView",
    "Instance",
    "PredicateView",
    "Table",
    "TableView",
    "Value",
]
