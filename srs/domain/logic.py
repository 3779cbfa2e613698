import math
from datetime import datetime
from typing import NamedTuple

from ..config import SchedulerPolicy, load_policy
from ..utils.time import add_days, utc_now
from .enums import Difficulty
from .errors import InvalidArgument


class ScheduledReview(NamedTuple):
    interval_days: int
    next_review_at: datetime


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {value}")
    return value


def _check_datetime(name, value):
    if not isinstance(value, datetime):
        raise InvalidArgument(f"{name} must be a datetime, got {value!r}")
    return value


class IntervalCalculator:
    """Spaced-repetition interval policy.

    The first review after creation (``review_count == 0``) uses the base
    interval of the chosen difficulty as is. Every later review multiplies
    it by ``ease_factor ** review_count``. The result is always clamped into
    ``[min_interval_days, max_interval_days]``.

    Instances are immutable; ``clock`` is only consulted when a caller does
    not pass ``now``.
    """

    def __init__(self, policy: SchedulerPolicy = None, clock=utc_now):
        self.policy = policy if policy is not None else load_policy()
        self.clock = clock

    def _now(self, now):
        if now is None:
            return self.clock()
        return _check_datetime("now", now)

    def interval_days(self, difficulty, review_count: int) -> int:
        difficulty = Difficulty.parse(difficulty)
        review_count = _check_count("review_count", review_count)
        policy = self.policy

        interval = policy.base_interval(difficulty)
        if review_count > 0:
            try:
                interval = math.floor(interval * policy.ease_factor ** review_count)
            except OverflowError:
                interval = policy.max_interval_days

        return max(policy.min_interval_days, min(interval, policy.max_interval_days))

    def schedule(self, difficulty, review_count: int, now=None) -> ScheduledReview:
        days = self.interval_days(difficulty, review_count)
        return ScheduledReview(days, add_days(self._now(now), days))

    def calculate_next_review(self, difficulty, review_count: int, now=None) -> datetime:
        return self.schedule(difficulty, review_count, now).next_review_at

    def is_due(self, next_review_at, now=None) -> bool:
        next_review_at = _check_datetime("next_review_at", next_review_at)
        now = self._now(now)
        try:
            return next_review_at <= now
        except TypeError:
            raise InvalidArgument(
                "next_review_at and now must both be timezone-aware or both naive"
            ) from None

    def project_intervals(self, difficulty, max_reviews: int) -> "IntervalProjection":
        return IntervalProjection(self, difficulty, max_reviews)


class IntervalProjection:
    """Growth curve of one difficulty: ``(review_number, interval_days)`` pairs.

    Lazy and restartable; each iteration recomputes through
    ``IntervalCalculator.interval_days`` with ``review_count = review_number - 1``.
    """

    def __init__(self, calculator: IntervalCalculator, difficulty, max_reviews: int):
        self.calculator = calculator
        self.difficulty = Difficulty.parse(difficulty)
        self.max_reviews = _check_count("max_reviews", max_reviews)

    def __iter__(self):
        for review_number in range(1, self.max_reviews + 1):
            yield review_number, self.calculator.interval_days(self.difficulty, review_number - 1)

    def __len__(self):
        return self.max_reviews

    def __repr__(self):
        return f"IntervalProjection({self.difficulty.value}, max_reviews={self.max_reviews})"


def get_calculator(clock=utc_now) -> IntervalCalculator:
    # Built per call so settings overrides are picked up.
    return IntervalCalculator(load_policy(), clock=clock)


def calculate_next_review(difficulty, review_count: int, now=None) -> datetime:
    return get_calculator().calculate_next_review(difficulty, review_count, now)


def is_due(next_review_at, now=None) -> bool:
    return get_calculator().is_due(next_review_at, now)


def project_intervals(difficulty, max_reviews: int) -> IntervalProjection:
    return get_calculator().project_intervals(difficulty, max_reviews)
