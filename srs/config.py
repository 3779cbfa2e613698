from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from django.conf import settings

from .domain.enums import Difficulty
from .domain.errors import ConfigurationError

MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 180  # 6 months
EASE_FACTOR = 1.5
BASE_INTERVALS = {
    Difficulty.HARD: 1,    # 1 day
    Difficulty.NORMAL: 2,  # 2 days
    Difficulty.EASY: 4,    # 4 days (longest initial)
}


def _require_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer number of days, got {value!r}")
    return value


@dataclass(frozen=True)
class SchedulerPolicy:
    """Tunable constants of the interval calculator.

    A difficulty may be left out of ``base_intervals``; looking it up later
    raises ``ConfigurationError``. Everything else is checked on construction.
    """

    base_intervals: Mapping[Difficulty, int] = field(
        default_factory=lambda: dict(BASE_INTERVALS)
    )
    ease_factor: float = EASE_FACTOR
    min_interval_days: int = MIN_INTERVAL_DAYS
    max_interval_days: int = MAX_INTERVAL_DAYS

    def __post_init__(self):
        min_days = _require_int("min_interval_days", self.min_interval_days)
        max_days = _require_int("max_interval_days", self.max_interval_days)
        if min_days < 1:
            raise ConfigurationError(f"min_interval_days must be >= 1, got {min_days}")
        if max_days < min_days:
            raise ConfigurationError(
                f"max_interval_days ({max_days}) is below min_interval_days ({min_days})"
            )

        if isinstance(self.ease_factor, bool) or not isinstance(self.ease_factor, (int, float)):
            raise ConfigurationError(f"ease_factor must be a number, got {self.ease_factor!r}")
        if not self.ease_factor > 1:
            raise ConfigurationError(f"ease_factor must be > 1, got {self.ease_factor}")
        # float keeps ease ** review_count bounded (OverflowError instead of a huge int)
        object.__setattr__(self, "ease_factor", float(self.ease_factor))

        table = {}
        for key, days in dict(self.base_intervals).items():
            try:
                difficulty = Difficulty(key)
            except ValueError:
                raise ConfigurationError(f"unknown difficulty in base intervals: {key!r}") from None
            days = _require_int(f"base interval for {difficulty.value}", days)
            if not min_days <= days <= max_days:
                raise ConfigurationError(
                    f"base interval for {difficulty.value} ({days}) is outside "
                    f"[{min_days}, {max_days}]"
                )
            table[difficulty] = days
        object.__setattr__(self, "base_intervals", MappingProxyType(table))

    def base_interval(self, difficulty: Difficulty) -> int:
        try:
            return self.base_intervals[difficulty]
        except KeyError:
            raise ConfigurationError(
                f"no base interval configured for difficulty {difficulty.value}"
            ) from None


def _parse(name, value, cast):
    # environment overrides arrive as strings
    if not isinstance(value, str):
        return value
    try:
        return cast(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be a {cast.__name__}, got {value!r}") from None


def load_policy() -> SchedulerPolicy:
    """Build the policy from ``settings.SRS``, falling back to the module defaults."""
    conf = getattr(settings, "SRS", {}) or {}
    base_intervals = {
        key: _parse(f"base interval for {key}", days, int)
        for key, days in dict(conf.get("BASE_INTERVALS", BASE_INTERVALS)).items()
    }
    return SchedulerPolicy(
        base_intervals=base_intervals,
        ease_factor=_parse("EASE_FACTOR", conf.get("EASE_FACTOR", EASE_FACTOR), float),
        min_interval_days=_parse("MIN_INTERVAL_DAYS", conf.get("MIN_INTERVAL_DAYS", MIN_INTERVAL_DAYS), int),
        max_interval_days=_parse("MAX_INTERVAL_DAYS", conf.get("MAX_INTERVAL_DAYS", MAX_INTERVAL_DAYS), int),
    )
