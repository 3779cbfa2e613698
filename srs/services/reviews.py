from django.db import transaction
import structlog
from rest_framework.exceptions import NotFound

from ..data.repos import get_card_for_update, persist_review
from ..domain.enums import Difficulty
from ..domain.logic import get_calculator
from ..utils.time import to_display_iso
from .decks import ensure_owner

logger = structlog.get_logger()


def record_review(user, card_id, difficulty, now=None, calculator=None):
    difficulty = Difficulty.parse(difficulty)
    calculator = calculator or get_calculator()

    logger.info("review_received",
        user_id=str(user.pk),
        card_id=str(card_id),
        difficulty=difficulty.value,
    )

    # Serialize concurrent reviews of the same card
    with transaction.atomic():
        card = get_card_for_update(card_id)
        if card is None:
            raise NotFound("Card not found")
        ensure_owner(card.deck, user)

        # review_count as read under the lock
        scheduled = calculator.schedule(difficulty, card.review_count, now)
        persist_review(card, difficulty, scheduled.next_review_at)

    logger.info("review_scheduled",
        user_id=str(user.pk),
        card_id=str(card.pk),
        review_count=card.review_count,
        interval_days=scheduled.interval_days,
        next_review_utc=card.next_review_at.isoformat(),
        next_review_local=to_display_iso(card.next_review_at),
    )

    return card, scheduled.interval_days
