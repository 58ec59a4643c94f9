"""Shared pytest fixtures."""

import pytest

from tallycounter.core.modules.counter.counter import TallyCounter
from tallycounter.core.modules.counter.models import CounterMode


@pytest.fixture
def normal_counter():
    """Two positions, each counting 0..1."""
    return TallyCounter.uniform(2, CounterMode.NORMAL, 1)


@pytest.fixture
def unique_values_counter():
    """Three positions over 0..3 with no repeated values."""
    return TallyCounter.uniform(3, CounterMode.UNIQUE_VALUES, 3)


@pytest.fixture
def unique_combination_counter():
    """Three positions over 0..4, one arrangement per set of values."""
    return TallyCounter.uniform(3, CounterMode.UNIQUE_COMBINATION, 4)


@pytest.fixture
def collect_states():
    """Run the canonical loop and return every state seen before overflow."""

    def collect(counter: TallyCounter, readable: bool = True) -> list[list[int]]:
        states = []
        while not counter.overflowed:
            states.append(counter.readable_values() if readable else counter.values())
            counter.advance()
        return states

    return collect
