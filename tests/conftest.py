"""Shared fixtures: the classic 14-row nominal weather table."""

from __future__ import annotations

import pytest

from id3kit.dataset import Attribute, Table

WEATHER_ROWS: list[tuple[str, str, str, str, str]] = [
    ("sunny", "hot", "high", "FALSE", "no"),
    ("sunny", "hot", "high", "TRUE", "no"),
    ("overcast", "hot", "high", "FALSE", "yes"),
    ("rainy", "mild", "high", "FALSE", "yes"),
    ("rainy", "cool", "normal", "FALSE", "yes"),
    ("rainy", "cool", "normal", "TRUE", "no"),
    ("overcast", "cool", "normal", "TRUE", "yes"),
    ("sunny", "mild", "high", "FALSE", "no"),
    ("sunny", "cool", "normal", "FALSE", "yes"),
    ("rainy", "mild", "normal", "FALSE", "yes"),
    ("sunny", "mild", "normal", "TRUE", "yes"),
    ("overcast", "mild", "high", "TRUE", "yes"),
    ("overcast", "hot", "normal", "FALSE", "yes"),
    ("rainy", "mild", "high", "TRUE", "no"),
]


@pytest.fixture
def weather() -> Table:
    """Build the nominal weather table with class attribute `play` as the last column.

    Returns:
        Table: 5 attributes (outlook, temperature, humidity, windy, play), 14 rows.
    """
    table = Table(
        Attribute(name="outlook", values=("sunny", "overcast", "rainy")),
        Attribute(name="temperature", values=("hot", "mild", "cool")),
        Attribute(name="humidity", values=("high", "normal")),
        Attribute(name="windy", values=("TRUE", "FALSE")),
        Attribute(name="play", values=("yes", "no")),
        name="weather",
    )
    for row in WEATHER_ROWS:
        table.add_row(*row)
    return table


@pytest.fixture
def play(weather: Table) -> Attribute:
    """Return the class attribute of the weather table.

    Args:
        weather (Table): The weather table fixture.

    Returns:
        Attribute: The `play` attribute.
    """
    return weather.attribute_named("play")


@pytest.fixture
def outlook(weather: Table) -> Attribute:
    """Return the `outlook` attribute of the weather table.

    Args:
        weather (Table): The weather table fixture.

    Returns:
        Attribute: The `outlook` attribute.
    """
    return weather.attribute_named("outlook")
