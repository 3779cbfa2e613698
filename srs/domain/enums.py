from enum import Enum

from .errors import InvalidArgument


class Difficulty(str, Enum):
    HARD = "HARD"
    NORMAL = "NORMAL"
    EASY = "EASY"

    @classmethod
    def parse(cls, value):
        """Return the member for ``value`` (a member or its case-insensitive name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidArgument(
            f"difficulty must be one of {', '.join(d.value for d in cls)}, got {value!r}"
        )


DIFFICULTY_LABELS = {
    Difficulty.HARD: "어려워요",
    Difficulty.NORMAL: "보통",
    Difficulty.EASY: "쉬워요",
}
