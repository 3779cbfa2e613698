"""Which cards of a deck are up for review, and in which order.

The predicate is expressed twice over the same fields: as ORM lookups for the
owning service and as a plain function for in-memory card collections.
"""
from operator import attrgetter

# Most overdue first
DUE_ORDERING = ("next_review_at",)


def due_filter(deck_id, now):
    return {"deck_id": deck_id, "next_review_at__lte": now}


def is_card_due(card, deck_id, now) -> bool:
    return card.deck_id == deck_id and card.next_review_at <= now


def select_due(cards, deck_id, now):
    return sorted(
        (card for card in cards if is_card_due(card, deck_id, now)),
        key=attrgetter(*DUE_ORDERING),
    )
