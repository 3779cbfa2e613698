from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.exceptions import PermissionDenied

from accounts.models import User
from srs.config import SchedulerPolicy
from srs.data.models import Card, Deck
from srs.domain.errors import InvalidArgument
from srs.domain.logic import IntervalCalculator
from srs.services.decks import deck_stats, due_cards
from srs.services.reviews import record_review

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def user(db):
    return User.objects.create_user(username="learner")


@pytest.fixture
def card(user):
    deck = Deck.objects.create(user=user, name="deck")
    return Card.objects.create(deck=deck, front="책", back="book", next_review_at=NOW)


@pytest.mark.django_db
def test_record_review_with_injected_time(user, card):
    reviewed, interval = record_review(user, card.id, "HARD", now=NOW)

    assert interval == 1
    assert reviewed.next_review_at == NOW + timedelta(days=1)
    assert reviewed.review_count == 1
    assert reviewed.difficulty == "HARD"


@pytest.mark.django_db
def test_review_count_seen_by_calculator_is_the_stored_one(user, card):
    card.review_count = 3
    card.save()

    reviewed, interval = record_review(user, card.id, "HARD", now=NOW)

    assert interval == 3  # floor(1.5 ** 3)
    assert reviewed.next_review_at == datetime(2024, 1, 4, tzinfo=timezone.utc)
    assert Card.objects.get(pk=card.pk).review_count == 4


@pytest.mark.django_db
def test_record_review_uses_given_calculator(user, card):
    calc = IntervalCalculator(
        SchedulerPolicy(base_intervals={"HARD": 2, "NORMAL": 2, "EASY": 2}, max_interval_days=2),
        clock=lambda: NOW,
    )

    reviewed, interval = record_review(user, card.id, "EASY", calculator=calc)

    assert interval == 2
    assert reviewed.next_review_at == NOW + timedelta(days=2)


@pytest.mark.django_db
def test_invalid_difficulty_fails_before_touching_the_card(user, card):
    with pytest.raises(InvalidArgument):
        record_review(user, card.id, "MEDIUM", now=NOW)

    assert Card.objects.get(pk=card.pk).review_count == 0


@pytest.mark.django_db
def test_other_users_cannot_review(user, card):
    intruder = User.objects.create_user(username="intruder")

    with pytest.raises(PermissionDenied):
        record_review(intruder, card.id, "EASY", now=NOW)


@pytest.mark.django_db
def test_due_cards_and_stats_at_given_time(user, card):
    later = Card.objects.create(deck=card.deck, front="펜", back="pen", next_review_at=NOW + timedelta(days=2))

    assert due_cards(user, card.deck_id, NOW) == [card]
    assert due_cards(user, card.deck_id, NOW + timedelta(days=2)) == [card, later]
    assert deck_stats(user, card.deck_id, NOW) == {"total_cards": 2, "due_cards": 1}
