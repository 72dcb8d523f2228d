"""Tests for polars_utils module: DataFrame conversion and markdown rendering."""

from __future__ import annotations

import polars as pl
import pytest
from pytest_check import check

from id3kit.dataset import IndexedView, Table
from id3kit.exceptions import ColumnsNotFoundError, DuplicateColumnsError, InvalidInputError
from id3kit.polars_utils import table_from_dataframe, to_markdown_table, view_to_dataframe


class TestTableFromDataFrame:
    """Test suite for table_from_dataframe."""

    def test_string_columns_use_first_appearance_domain(self) -> None:
        """Given string columns, When converted, Then domains follow first appearance and rows keep order."""
        # Arrange
        df = pl.DataFrame({"outlook": ["rainy", "sunny", "rainy"], "play": ["yes", "no", "no"]})

        # Act
        table = table_from_dataframe(df, name="weather")

        # Assert
        with check:
            assert table.name == "weather"
        with check:
            assert table.attribute_named("outlook").values == ("rainy", "sunny")
        with check:
            assert table.attribute_named("play").values == ("yes", "no")
        with check:
            assert [str(instance) for instance in table] == ["rainy,yes", "sunny,no", "rainy,no"]

    def test_enum_column_keeps_category_order(self) -> None:
        """Given an Enum column, When converted, Then all categories become the domain, even unused ones."""
        # Arrange
        outlook = pl.Enum(["sunny", "overcast", "rainy"])
        df = pl.DataFrame({"outlook": pl.Series(["rainy", "sunny"], dtype=outlook)})

        # Act
        table = table_from_dataframe(df)

        # Assert
        assert table.attribute_named("outlook").values == ("sunny", "overcast", "rainy")

    def test_boolean_and_integer_columns_become_strings(self) -> None:
        """Given non-string columns, When converted, Then values are cast to string literals."""
        # Arrange
        df = pl.DataFrame({"windy": [True, False, True], "rooms": [2, 3, 2]})

        # Act
        table = table_from_dataframe(df)

        # Assert
        with check:
            assert table.attribute_named("windy").values == ("true", "false")
        with check:
            assert table.attribute_named("rooms").values == ("2", "3")

    def test_columns_selects_and_orders_attributes(self) -> None:
        """Given a columns list, When converted, Then only those columns appear in that order."""
        # Arrange
        df = pl.DataFrame({"a": ["x"], "b": ["y"], "c": ["z"]})

        # Act
        table = table_from_dataframe(df, columns=["c", "a"])

        # Assert
        assert [attribute.name for attribute in table.attributes()] == ["c", "a"]

    def test_missing_columns_raise_columns_not_found_error(self) -> None:
        """Given unknown column names, When converted, Then ColumnsNotFoundError lists them sorted."""
        # Arrange
        df = pl.DataFrame({"a": ["x"]})

        # Act / Assert
        with pytest.raises(ColumnsNotFoundError) as exc_info:
            table_from_dataframe(df, columns=["z", "a", "y"])
        with check:
            assert exc_info.value.missing_columns == ["y", "z"]
        with check:
            assert exc_info.value.available_columns == ["a"]

    def test_duplicate_columns_raise_duplicate_columns_error(self) -> None:
        """Given duplicated column names, When converted, Then DuplicateColumnsError is raised."""
        df = pl.DataFrame({"a": ["x"], "b": ["y"]})

        with pytest.raises(DuplicateColumnsError):
            table_from_dataframe(df, columns=["a", "b", "a"])

    def test_empty_columns_raise_value_error(self) -> None:
        """Given an empty columns list, When converted, Then ValueError is raised."""
        df = pl.DataFrame({"a": ["x"]})

        with pytest.raises(ValueError, match="must not be empty"):
            table_from_dataframe(df, columns=[])

    def test_null_values_raise_invalid_input_error(self) -> None:
        """Given a column with nulls, When converted, Then InvalidInputError is raised."""
        df = pl.DataFrame({"a": ["x", None]})

        with pytest.raises(InvalidInputError, match="null"):
            table_from_dataframe(df)

    def test_empty_string_column_raises_invalid_input_error(self) -> None:
        """Given a column with no rows, When converted, Then there is no domain to derive."""
        df = pl.DataFrame({"a": pl.Series([], dtype=pl.String)})

        with pytest.raises(InvalidInputError, match="no values"):
            table_from_dataframe(df)


class TestViewToDataFrame:
    """Test suite for view_to_dataframe."""

    def test_columns_are_enums_over_domain(self, weather: Table) -> None:
        """Given a table, When converted, Then every column is an Enum over the attribute's domain.

        Args:
            weather (Table): The weather table fixture.
        """
        # Act
        df = view_to_dataframe(weather)

        # Assert
        with check:
            assert df.shape == (14, 5)
        with check:
            assert df.schema["outlook"] == pl.Enum(["sunny", "overcast", "rainy"])
        with check:
            assert df["play"].to_list()[:3] == ["no", "no", "yes"]

    def test_view_exports_only_visible_rows(self, weather: Table) -> None:
        """Given an indexed view, When converted, Then only its rows appear, in view order.

        Args:
            weather (Table): The weather table fixture.
        """
        # Act
        df = view_to_dataframe(IndexedView(weather, [9, 2]))

        # Assert
        assert df["outlook"].to_list() == ["rainy", "overcast"]

    def test_round_trip_keeps_domains(self, weather: Table) -> None:
        """Given a table, When exported and re-imported, Then domains and rows are unchanged.

        Args:
            weather (Table): The weather table fixture.
        """
        # Act
        restored = table_from_dataframe(view_to_dataframe(weather))

        # Assert
        with check:
            assert list(restored.attributes()) == list(weather.attributes())
        with check:
            assert [str(instance) for instance in restored] == [str(instance) for instance in weather]


class TestToMarkdownTable:
    """Test suite for to_markdown_table."""

    def test_default_returns_markdown_string(self, weather: Table) -> None:
        """Given a table, When rendered, Then returns a markdown table without shape or dtypes.

        Args:
            weather (Table): The weather table fixture.
        """
        # Act
        result = to_markdown_table(weather, num_rows=14)

        # Assert
        with check:
            assert "| outlook" in result
        with check:
            assert "---" in result
        with check:
            assert "shape:" not in result.lower()
        with check:
            assert "enum" not in result.lower()
        with check:
            assert _count_data_rows(result) == 14

    def test_num_rows_limits_output(self, weather: Table) -> None:
        """Given 14 rows, When num_rows=5, Then output is truncated with an ellipsis.

        Args:
            weather (Table): The weather table fixture.
        """
        # Act
        result = to_markdown_table(weather, num_rows=5)

        # Assert
        with check:
            assert _count_data_rows(result) < 14
        with check:
            assert "…" in result

    @pytest.mark.parametrize("num_rows", [0, -1])
    def test_num_rows_below_one_raises_value_error(self, weather: Table, num_rows: int) -> None:
        """Given num_rows below 1, When rendered, Then ValueError is raised.

        Args:
            weather (Table): The weather table fixture.
            num_rows (int): Invalid row limit.
        """
        with pytest.raises(ValueError, match="num_rows must be at least 1"):
            to_markdown_table(weather, num_rows=num_rows)

    def test_table_str_renders_markdown(self, weather: Table) -> None:
        """Given a table, When converted with str(), Then every row is rendered.

        Args:
            weather (Table): The weather table fixture.
        """
        assert _count_data_rows(str(weather)) == 14


def _count_data_rows(markdown: str) -> int:
    """Count data rows in markdown output.

    Args:
        markdown (str): Markdown table string.

    Returns:
        int: Number of data rows (excluding header and separator).
    """
    lines = [line.strip() for line in markdown.strip().splitlines() if line.strip()]
    table_lines = [line for line in lines if line.startswith("|") and "---" not in line]
    return max(0, len(table_lines) - 1)
