"""Counter modes and state snapshots."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class CounterMode(StrEnum):
    """Enumeration disciplines a counter can follow."""

    NORMAL = "normal"  # every combination of digit values
    UNIQUE_VALUES = "unique_values"  # no two positions share a value
    UNIQUE_COMBINATION = "unique_combination"  # each set of values appears once, in one order


class CounterSnapshot(BaseModel):
    """Immutable picture of a counter's state at one point of the enumeration."""

    model_config = ConfigDict(frozen=True)

    mode: CounterMode = Field(..., description="Enumeration discipline of the counter")
    limits: list[int] = Field(..., description="Maximum value per position, least significant first")
    values: list[int] = Field(..., description="Digit values, least significant first")
    readable_values: list[int] = Field(..., description="Digit values as read on the display, most significant first")
    overflowed: bool = Field(..., description="Whether the enumeration has wrapped past its last state")
