"""id3kit: ID3 decision tree induction over categorical tables."""

from loguru import logger

from id3kit.dataset import Attribute, IndexedView, Instance, PredicateView, Table, TableView, Value
from id3kit.learning import train_model, train_model_on_subset, train_model_on_table
from id3kit.logging import PACKAGE_NAME, enable_logging
from id3kit.tree import InnerNode, Leaf, Node, classify, render_tree
from id3kit.tree.summary import summarize_tree

logger.disable(PACKAGE_NAME)  # noqa: RUF067 - Disable logging for the id3kit package by default

__all__ = [
    "Attribute",
    "IndexedView",
    "InnerNode",
    "Instance",
    "Leaf",
    "Node",
    "PredicateView",
    "Table",
    "TableView",
    "Value",
    "classify",
    "enable_logging",
    "render_tree",
    "summarize_tree",
    "train_model",
    "train_model_on_subset",
    "train_model_on_table",
]
