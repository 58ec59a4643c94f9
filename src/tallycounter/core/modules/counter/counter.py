"""Mechanical tally counter over bounded digits."""

import sys
from collections.abc import Iterator, Sequence
from itertools import pairwise
from typing import Self

from tallycounter.core.modules.counter.models import CounterMode, CounterSnapshot


class TallyCounter:
    """Ordered sequence of bounded digits that advances like an odometer.

    Position 0 is the least significant digit (rightmost on a physical counter).
    Digit ``i`` ranges over ``[0, limits[i]]``. Advancing increments position 0
    and carries into the next position when a digit rolls over. When the most
    significant digit rolls over, the counter wraps back to its first state and
    raises the overflow flag.

    Non-normal modes skip states that break the mode's rule:

    - ``UNIQUE_VALUES``: no two positions hold equal values.
    - ``UNIQUE_COMBINATION``: digits strictly decrease by position, so every set
      of distinct values is visited once, in a single canonical order.

    Typical use replaces a runtime-sized stack of nested loops:

        counter = TallyCounter.uniform(2, CounterMode.NORMAL, 1)
        while not counter.overflowed:
            print(counter.readable_values())
            counter.advance()

    Invalid numeric arguments never raise; they are clamped to the nearest valid
    configuration. The counter performs no I/O and emits no log events.
    """

    def __init__(self, limits: Sequence[int] | None = None, *, _mode: CounterMode = CounterMode.NORMAL) -> None:
        """Create a normal-mode counter with one maximum value per position.

        Args:
            limits: Maximum value per position, least significant first. Values
                below 1 are raised to 1. Empty or missing input gives a single
                position with maximum 1.
            _mode: Set by :meth:`uniform` only, which guarantees equal limits
                for the non-normal modes.
        """
        self._limits = [max(limit, 1) for limit in limits] if limits else [1]
        self._mode = _mode
        self._digits = [0] * len(self._limits)
        self._overflowed = False
        self._fill_initial()

    @classmethod
    def uniform(cls, amount: int, mode: CounterMode, max_value: int) -> Self:
        """Create a counter whose positions all share one maximum value.

        Args:
            amount: Number of positions. Non-positive values give one position.
                In non-normal modes it is capped at ``max_value + 1``, the number
                of distinct values available.
            mode: Enumeration discipline.
            max_value: Maximum value of every position, raised to 1 if lower.

        Returns:
            A counter positioned on the mode's first valid state.
        """
        mode = CounterMode(mode)
        max_value = max(max_value, 1)
        size = max(amount, 1)
        if mode != CounterMode.NORMAL:
            size = min(size, max_value + 1, sys.maxsize)
        return cls([max_value] * size, _mode=mode)

    @property
    def mode(self) -> CounterMode:
        return self._mode

    @property
    def limits(self) -> list[int]:
        """Maximum value per position, least significant first."""
        return list(self._limits)

    @property
    def overflowed(self) -> bool:
        """Whether an advance has wrapped past the last valid state."""
        return self._overflowed

    def __len__(self) -> int:
        return len(self._digits)

    def values(self) -> list[int]:
        """Digit values, least significant first."""
        return list(self._digits)

    def readable_values(self) -> list[int]:
        """Digit values as read on a mechanical counter, most significant first."""
        return self._digits[::-1]

    def has_repeated_combination(self) -> bool:
        """Check whether the digits are not strictly decreasing by position.

        With distinct values, ``[1, 0]`` is the first occurrence of the set
        ``{0, 1}`` and ``[0, 1]`` is a repeat of it.
        """
        return any(lower <= higher for lower, higher in pairwise(self._digits))

    def has_repeated_values(self) -> bool:
        """Check whether any two positions hold the same value."""
        return len(set(self._digits)) != len(self._digits)

    def advance(self) -> None:
        """Move to the next state allowed by the mode.

        Raw increments are repeated until the mode's rule holds. An overflow
        always lands on a valid state, so the loop ends there at the latest.
        """
        self._roll()
        if self._mode == CounterMode.UNIQUE_VALUES:
            while self.has_repeated_values():
                self._roll()
        elif self._mode == CounterMode.UNIQUE_COMBINATION:
            while self.has_repeated_combination():
                self._roll()

    def reset(self, overflow: bool = False) -> None:
        """Return to the mode's first state and set the overflow flag."""
        self._fill_initial()
        self._overflowed = overflow

    def states(self, readable: bool = True) -> Iterator[list[int]]:
        """Yield every state from the current one until the counter overflows.

        Exhausting the iterator leaves the counter overflowed and back on its
        first state. An already overflowed counter yields nothing until reset.
        """
        while not self._overflowed:
            yield self.readable_values() if readable else self.values()
            self.advance()

    def snapshot(self) -> CounterSnapshot:
        return CounterSnapshot(
            mode=self._mode,
            limits=self.limits,
            values=self.values(),
            readable_values=self.readable_values(),
            overflowed=self._overflowed,
        )

    def to_readable_string(self) -> str:
        """Render the digits most significant first, e.g. ``[0, 1]``."""
        return str(self.readable_values())

    def __str__(self) -> str:
        return str(self._digits)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self._mode.value!r}, limits={self._limits!r}, "
            f"values={self._digits!r}, overflowed={self._overflowed!r})"
        )

    def _fill_initial(self) -> None:
        size = len(self._digits)
        if self._mode == CounterMode.NORMAL:
            self._digits[:] = [0] * size
        else:
            # Descending values: the first arrangement without duplicates
            self._digits[:] = range(size - 1, -1, -1)

    def _roll(self) -> None:
        """Increment position 0 and propagate carries, ignoring the mode."""
        digits = self._digits
        digits[0] += 1
        top = len(digits) - 1
        for position, limit in enumerate(self._limits):
            if digits[position] != limit + 1:
                break
            if position == top:
                self.reset(overflow=True)
                break
            digits[position] = 0
            digits[position + 1] += 1
