from pydantic_settings import BaseSettings

from tallycounter.core.modules.counter.models import CounterMode


class Config(BaseSettings):
    """Command-line enumeration settings loaded from environment variables."""

    debug: bool = False
    mode: CounterMode = CounterMode.NORMAL
    amount: int = 2  # Number of positions for the shared-limit form
    max_value: int = 1  # Maximum value shared by every position
    limits: list[int] = []  # Per-position maximums as JSON, e.g. [1, 2]; forces normal mode when set
    readable: bool = True  # Print most significant digit first

    model_config = {
        "env_file": [".env"],
        "env_prefix": "TALLYCOUNTER_",
        "extra": "ignore",
    }
