"""Tests for entropy, information gain, most common value, and class distribution."""

from __future__ import annotations

import math

import pytest
from pytest_check import check

from id3kit.dataset import Attribute, IndexedView, PredicateView, Table
from id3kit.exceptions import InvalidInputError
from id3kit.learning.measures import class_distribution, entropy, information_gain, most_common_value


def _binary_table(*labels: str) -> tuple[Table, Attribute]:
    label = Attribute(name="label", values=("yes", "no"))
    table = Table(label)
    for literal in labels:
        table.add_row(literal)
    return table, label


class TestClassDistribution:
    """Tests for class_distribution."""

    def test_counts_in_first_encountered_order(self, weather: Table, play: Attribute) -> None:
        """Counts should be keyed by value in order of first occurrence.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        # Act
        counts = class_distribution(weather, play)

        # Assert
        with check:
            assert [value.literal for value in counts] == ["no", "yes"]
        with check:
            assert counts[play.value("yes")] == 9
        with check:
            assert counts[play.value("no")] == 5


class TestEntropy:
    """Tests for entropy."""

    def test_weather_class_entropy(self, weather: Table, play: Attribute) -> None:
        """9 yes / 5 no should give about 0.9403 bits.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        assert entropy(weather, play) == pytest.approx(0.940286, abs=1e-6)

    def test_even_split_is_one_bit(self) -> None:
        """A 50/50 binary distribution should have exactly one bit of entropy."""
        # Arrange
        table, label = _binary_table("yes", "no", "no", "yes")

        # Act / Assert
        assert entropy(table, label) == pytest.approx(1.0)

    def test_homogeneous_view_is_zero(self, weather: Table, outlook: Attribute, play: Attribute) -> None:
        """All-yes overcast rows should have zero entropy.

        Args:
            weather (Table): The weather table fixture.
            outlook (Attribute): The outlook attribute fixture.
            play (Attribute): The class attribute fixture.
        """
        # Arrange
        overcast = PredicateView(weather, outlook, outlook.value("overcast"))

        # Act / Assert
        assert entropy(overcast, play) == 0

    def test_empty_view_is_zero(self, weather: Table, play: Attribute) -> None:
        """An empty view should have zero entropy.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        assert entropy(IndexedView(weather, []), play) == 0.0

    @pytest.mark.parametrize(
        "indices",
        [[0], [0, 2], [2, 5, 9], [0, 1, 7, 8, 10], list(range(14))],
        ids=["single", "pair", "three", "sunny", "all"],
    )
    def test_entropy_bounded_by_domain_size(self, weather: Table, indices: list[int]) -> None:
        """For every attribute, entropy should lie in [0, log2(|domain|)].

        Args:
            weather (Table): The weather table fixture.
            indices (list[int]): Rows of the view to measure.
        """
        # Arrange
        view = IndexedView(weather, indices)

        # Act / Assert
        for attribute in weather.attributes():
            value = entropy(view, attribute)
            with check:
                assert 0.0 <= value <= math.log2(len(attribute.values)) + 1e-12, attribute.name
            with check:
                assert (value == 0) == (len(class_distribution(view, attribute)) <= 1), attribute.name

    def test_unknown_attribute_raises_invalid_input_error(self, weather: Table) -> None:
        """Measuring an attribute the view does not have should raise InvalidInputError.

        Args:
            weather (Table): The weather table fixture.
        """
        # Arrange
        pressure = Attribute(name="pressure", values=("low", "high"))

        # Act / Assert
        with pytest.raises(InvalidInputError):
            entropy(weather, pressure)


class TestInformationGain:
    """Tests for information_gain."""

    @pytest.mark.parametrize(
        ("attribute_name", "expected_gain"),
        [
            ("outlook", 0.246750),
            ("temperature", 0.029223),
            ("humidity", 0.151836),
            ("windy", 0.048127),
        ],
    )
    def test_weather_gains(self, weather: Table, play: Attribute, attribute_name: str, expected_gain: float) -> None:
        """Gains over the full weather table should match the textbook values.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
            attribute_name (str): The split attribute.
            expected_gain (float): Its information gain with respect to `play`.
        """
        # Act
        gain = information_gain(weather, play, weather.attribute_named(attribute_name))

        # Assert
        assert gain == pytest.approx(expected_gain, abs=1e-5)

    def test_gain_of_class_attribute_equals_entropy(self, weather: Table, play: Attribute) -> None:
        """Splitting on the class attribute itself should remove all entropy.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        assert information_gain(weather, play, play) == entropy(weather, play)

    @pytest.mark.parametrize(
        "indices",
        [[0, 1], [2, 5, 9], [3, 4, 5, 9, 13], list(range(14))],
        ids=["pair", "three", "rainy", "all"],
    )
    def test_gain_is_never_negative(self, weather: Table, play: Attribute, indices: list[int]) -> None:
        """Partitioning should never increase entropy on average.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
            indices (list[int]): Rows of the view to measure.
        """
        # Arrange
        view = IndexedView(weather, indices)

        # Act / Assert
        for attribute in weather.attributes():
            with check:
                assert information_gain(view, play, attribute) >= 0.0, attribute.name

    def test_unobserved_values_contribute_nothing(self, weather: Table, outlook: Attribute, play: Attribute) -> None:
        """Splitting sunny rows on outlook should give zero gain without dividing by zero.

        Args:
            weather (Table): The weather table fixture.
            outlook (Attribute): The outlook attribute fixture.
            play (Attribute): The class attribute fixture.
        """
        # Arrange
        sunny = PredicateView(weather, outlook, outlook.value("sunny"))

        # Act / Assert
        assert information_gain(sunny, play, outlook) == 0.0

    def test_empty_view_has_zero_gain(self, weather: Table, outlook: Attribute, play: Attribute) -> None:
        """An empty view should have zero gain for any split.

        Args:
            weather (Table): The weather table fixture.
            outlook (Attribute): The outlook attribute fixture.
            play (Attribute): The class attribute fixture.
        """
        assert information_gain(IndexedView(weather, []), play, outlook) == 0.0


class TestMostCommonValue:
    """Tests for most_common_value."""

    def test_weather_majority_is_yes(self, weather: Table, play: Attribute) -> None:
        """9 yes against 5 no should give yes.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        assert most_common_value(weather, play).literal == "yes"

    @pytest.mark.parametrize(
        ("labels", "expected"),
        [
            (("yes", "no"), "yes"),
            (("no", "yes"), "no"),
            (("no", "yes", "yes", "no"), "no"),
            (("yes", "no", "no"), "no"),
        ],
        ids=["tie-yes-first", "tie-no-first", "tie-interleaved", "clear-majority"],
    )
    def test_ties_go_to_first_encountered(self, labels: tuple[str, ...], expected: str) -> None:
        """Ties should be broken by the value that occurs first in row order.

        Args:
            labels (tuple[str, ...]): Class labels of the rows, in order.
            expected (str): The expected most common value.
        """
        # Arrange
        table, label = _binary_table(*labels)

        # Act / Assert
        assert most_common_value(table, label).literal == expected

    @pytest.mark.parametrize(
        "indices",
        [[0], [2, 5, 9], [0, 1, 7, 8, 10], list(range(14))],
        ids=["single", "three", "sunny", "all"],
    )
    def test_result_is_present_and_meets_pigeonhole_bound(self, weather: Table, indices: list[int]) -> None:
        """The most common value should occur in the view at least |V| / |domain| times.

        Args:
            weather (Table): The weather table fixture.
            indices (list[int]): Rows of the view to measure.
        """
        # Arrange
        view = IndexedView(weather, indices)

        # Act / Assert
        for attribute in weather.attributes():
            value = most_common_value(view, attribute)
            count = class_distribution(view, attribute).get(value, 0)
            with check:
                assert count > 0, attribute.name
            with check:
                assert count >= view.instance_count() / len(attribute.values), attribute.name

    def test_empty_view_raises_invalid_input_error(self, weather: Table, play: Attribute) -> None:
        """An empty view has no most common value.

        Args:
            weather (Table): The weather table fixture.
            play (Attribute): The class attribute fixture.
        """
        with pytest.raises(InvalidInputError):
            most_common_value(IndexedView(weather, []), play)
