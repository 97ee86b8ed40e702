import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from number_handler.core.config.settings import Settings, settings
from number_handler.core.errors import ConfigurationError

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class NumberRange:
    """
    Value Object for a half-open interval [minimum, maximum).
    Both bounds are checked together, so the order they were chosen in does not matter.
    """
    minimum: int
    maximum: int

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ConfigurationError(
                f"Range minimum ({self.minimum}) must not exceed maximum ({self.maximum})."
            )

    def pick(self, rng: random.Random) -> int:
        # An empty range collapses to its lower bound
        if self.maximum <= self.minimum:
            return self.minimum
        return rng.randrange(self.minimum, self.maximum)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for random data generation.
    The numbers-per-file range is required; the value range defaults to 32-bit signed bounds.
    """
    numbers_count: Optional[NumberRange] = None
    number_value: NumberRange = NumberRange(INT32_MIN, INT32_MAX)

    def __post_init__(self):
        if self.numbers_count is None:
            raise ConfigurationError("Numbers-per-file range is required.")
        if self.numbers_count.minimum < 0:
            raise ConfigurationError(
                f"Numbers-per-file minimum cannot be negative: {self.numbers_count.minimum}"
            )

    @classmethod
    def from_bounds(cls, min_count: int, max_count: int,
                    min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> "GeneratorConfig":
        return cls(
            numbers_count=NumberRange(min_count, max_count),
            number_value=NumberRange(min_value, max_value),
        )

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "GeneratorConfig":
        return cls.from_bounds(
            source.MIN_NUMBERS_COUNT,
            source.MAX_NUMBERS_COUNT,
            source.MIN_NUMBER_VALUE,
            source.MAX_NUMBER_VALUE,
        )


@dataclass
class GenerationResult:
    """
    Report returned after generation completes.
    """
    root_path: Path
    files: List[Path] = field(default_factory=list)
    numbers_written: int = 0
