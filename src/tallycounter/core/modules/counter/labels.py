"""Map counter digits onto caller-supplied options."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

from tallycounter.core.modules.counter.counter import TallyCounter
from tallycounter.core.modules.counter.models import CounterMode
from tallycounter.errors import ValidationError

T = TypeVar("T")


def label_combinations(options: Sequence[Sequence[T]]) -> Iterator[tuple[T, ...]]:
    """Iterate over every combination of options, one option list per loop level.

    Equivalent to a stack of nested ``for`` loops whose depth is only known at
    runtime. ``options[0]`` is the innermost loop, so it changes fastest.

    Args:
        options: One sequence of choices per level

    Returns:
        Iterator of tuples holding one choice per level, in level order

    Raises:
        ValidationError: If no levels are given or a level has no choices

    Examples:
        >>> list(label_combinations([["&", "|"], ["0", "1"]]))
        [('&', '0'), ('|', '0'), ('&', '1'), ('|', '1')]
    """
    if not options:
        raise ValidationError("At least one option list is required")
    for level, choices in enumerate(options):
        if not choices:
            raise ValidationError(f"Option list at level {level} is empty")
    return _iter_combinations(options)


def _iter_combinations(options: Sequence[Sequence[T]]) -> Iterator[tuple[T, ...]]:
    # Levels with a single choice never move; a counter digit always spans at least two values
    moving = [level for level, choices in enumerate(options) if len(choices) > 1]
    current = [choices[0] for choices in options]
    if not moving:
        yield tuple(current)
        return

    counter = TallyCounter([len(options[level]) - 1 for level in moving])
    for values in counter.states(readable=False):
        for level, value in zip(moving, values, strict=True):
            current[level] = options[level][value]
        yield tuple(current)


def label_subsets(items: Sequence[T], size: int) -> Iterator[tuple[T, ...]]:
    """Iterate over the subsets of ``size`` distinct items, ignoring order.

    Subsets come in the same order as :func:`itertools.combinations`, each with
    its items in input order. A ``size`` larger than the number of
    items is capped to it; a non-positive ``size`` is treated as 1.

    Raises:
        ValidationError: If ``items`` is empty
    """
    if not items:
        raise ValidationError("At least one item is required")
    return _iter_subsets(items, size)


def _iter_subsets(items: Sequence[T], size: int) -> Iterator[tuple[T, ...]]:
    if len(items) == 1:
        yield (items[0],)
        return

    counter = TallyCounter.uniform(size, CounterMode.UNIQUE_COMBINATION, len(items) - 1)
    for indexes in counter.states():
        yield tuple(items[index] for index in indexes)
