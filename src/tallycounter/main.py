"""Command-line entry point printing every state of a tally counter."""

import sys

import pydantic
import structlog

from tallycounter.config import Config
from tallycounter.core.modules.counter.counter import TallyCounter
from tallycounter.errors import UserError, ValidationError
from tallycounter.logging import setup_logging

logger = structlog.get_logger(__name__)


def load_config() -> Config:
    """Read settings from the environment, reporting bad values as user errors."""
    try:
        return Config()
    except pydantic.ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise ValidationError(f"Invalid configuration: {fields}") from exc


def build_counter(config: Config) -> TallyCounter:
    """Explicit limits win over the shared-limit form."""
    if config.limits:
        return TallyCounter(config.limits)
    return TallyCounter.uniform(config.amount, config.mode, config.max_value)


def print_states(counter: TallyCounter, readable: bool) -> int:
    """Print states until overflow and return how many were printed."""
    count = 0
    for state in counter.states(readable=readable):
        print(state)  # noqa: T201
        count += 1
    logger.debug("counter_overflowed", mode=counter.mode, positions=len(counter), restart=counter.readable_values())
    return count


def main() -> None:
    try:
        config = load_config()
    except UserError as exc:
        print(exc, file=sys.stderr)  # noqa: T201
        sys.exit(2)

    setup_logging(config.debug)
    counter = build_counter(config)
    logger.debug("enumeration_start", counter=repr(counter))
    count = print_states(counter, config.readable)
    logger.info("enumeration_finished", mode=counter.mode, positions=len(counter), states=count)


if __name__ == "__main__":
    main()
