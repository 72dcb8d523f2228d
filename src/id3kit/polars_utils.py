"""Utility functions for moving categorical tables to and from Polars DataFrames."""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl
from loguru import logger

from id3kit.dataset.attributes import Attribute
from id3kit.dataset.table import Table
from id3kit.dataset.views import TableView
from id3kit.exceptions import ColumnsNotFoundError, DuplicateColumnsError, InvalidInputError


def table_from_dataframe(
    df: pl.DataFrame,
    *,
    columns: Sequence[str] | None = None,
    name: str | None = None,
) -> Table:
    """Build a categorical table from a Polars DataFrame.

    Every selected column becomes an attribute. An `Enum` column keeps its
    categories (and their order) as the attribute's domain; any other column
    is cast to strings and its distinct values, in order of first appearance,
    become the domain. Rows are added in DataFrame order.

    Args:
        df (pl.DataFrame): The source DataFrame.
        columns (Sequence[str] | None): Columns to convert, in the order they
            should appear in the table. If None, all columns are converted.
        name (str | None): Optional name of the resulting table.

    Returns:
        Table: A populated table.

    Raises:
        ValueError: If `columns` is an empty list.
        DuplicateColumnsError: If `columns` contains duplicates.
        ColumnsNotFoundError: If any of `columns` do not exist in `df`.
        InvalidInputError: If a selected column contains null values, or has
            no rows to derive a domain from.

    Examples:
        >>> df = pl.DataFrame({"outlook": ["sunny", "rainy"], "play": ["no", "yes"]})
        >>> table = table_from_dataframe(df, name="weather")
        >>> table.attribute_named("play").values
        ('no', 'yes')
    """
    if columns is not None:
        _validate_columns(columns, df.columns)
        df = df.select(columns)

    attributes = [_attribute_from_series(df[column]) for column in df.columns]
    table = Table(*attributes, name=name)
    string_df = df.select(pl.all().cast(pl.String))
    for row in string_df.iter_rows():
        table.add_row(*row)

    logger.debug("Table built from DataFrame", name=name, attributes=len(attributes), instances=df.height)
    return table


def view_to_dataframe(view: TableView) -> pl.DataFrame:
    """Convert a table view to a Polars DataFrame.

    Each attribute becomes an `Enum` column whose categories are the
    attribute's domain, so the DataFrame round-trips through
    `table_from_dataframe` with identical domains.

    Args:
        view (TableView): The table or view to convert.

    Returns:
        pl.DataFrame: One column per attribute, one row per visible instance.
    """
    data = {}
    for attribute in view.attributes():
        literals = [instance.value(attribute).literal for instance in view.instances()]
        data[attribute.name] = pl.Series(attribute.name, literals, dtype=pl.Enum(list(attribute.values)))
    return pl.DataFrame(data)


def to_markdown_table(
    view: TableView,
    num_rows: int = 10,
) -> str:
    """Render a table view as a markdown table string.

    This function temporarily modifies global ``pl.Config`` state to render
    the table. It is not thread-safe.

    Args:
        view (TableView): The table or view to render.
        num_rows (int): Maximum number of rows to display. Defaults to 10.

    Returns:
        str: Markdown-formatted table string.

    Raises:
        ValueError: If num_rows is less than 1.
    """
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")

    df = view_to_dataframe(view)
    with pl.Config(
        tbl_formatting="MARKDOWN",
        tbl_hide_column_data_types=True,
        tbl_hide_column_names=False,
        tbl_hide_dataframe_shape=True,
        tbl_rows=num_rows,
        tbl_cols=df.width,
    ):
        return str(df)


def _attribute_from_series(series: pl.Series) -> Attribute:
    """Derive a categorical attribute from a Polars Series.

    Args:
        series (pl.Series): The column to convert.

    Returns:
        Attribute: Attribute named after the series with its domain.

    Raises:
        InvalidInputError: If the series has null values or no domain.
    """
    if series.null_count() > 0:
        raise InvalidInputError(f"Column {series.name!r} contains {series.null_count()} null values")
    if isinstance(series.dtype, pl.Enum):
        values = tuple(series.dtype.categories.to_list())
    else:
        values = tuple(series.cast(pl.String).unique(maintain_order=True).to_list())
    if not values:
        raise InvalidInputError(f"Column {series.name!r} has no values to derive a domain from")
    return Attribute(name=series.name, values=values)


def _validate_columns(columns: Sequence[str], df_columns: Sequence[str]) -> None:
    """Validate that columns exist in the DataFrame and contain no duplicates.

    Args:
        columns (Sequence[str]): Column names to validate.
        df_columns (Sequence[str]): Column names present in the DataFrame.

    Raises:
        ValueError: If columns list is empty.
        DuplicateColumnsError: If columns contain duplicates.
        ColumnsNotFoundError: If any columns do not exist in the DataFrame.
    """
    if len(columns) == 0:
        msg = "columns list must not be empty; pass None to include all columns"
        raise ValueError(msg)
    if len(columns) != len(set(columns)):
        raise DuplicateColumnsError(columns=list(columns))
    extra_columns = set(columns) - set(df_columns)
    if extra_columns:
        raise ColumnsNotFoundError(
            missing_columns=sorted(extra_columns),
            available_columns=list(df_columns),
        )
