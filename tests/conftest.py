"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from typing import Iterable, List

import pytest

from word_graph import TextGraph, WordGraph

SAMPLE_TEXT = "to explore the strange new worlds to seek the new life and new civilizations"


class SequenceRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        self.stops: List[int] = []

    def randrange(self, stop: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < stop, f"draw {value} outside [0, {stop})"
        self.stops.append(stop)
        return value


@pytest.fixture
def sample_text() -> str:
    """Return the sentence used throughout the tests."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_graph(sample_text: str) -> WordGraph:
    """Return a word graph built from the sample sentence."""
    graph = WordGraph()
    graph.build_from_text(sample_text)
    return graph


@pytest.fixture
def make_engine(sample_text: str):
    """Return a factory for engines over the sample sentence with scripted draws."""

    def _make(draws: Iterable[int] = ()) -> TextGraph:
        engine = TextGraph(rng=SequenceRandom(draws))
        engine.build_from_text(sample_text)
        return engine

    return _make
