import structlog
from rest_framework.exceptions import NotFound, PermissionDenied

from ..data.repos import due_cards_queryset, get_card, get_deck
from ..utils.time import utc_now

logger = structlog.get_logger()


def ensure_owner(deck, user):
    if deck.user_id != user.pk:
        logger.warning("access_denied", user_id=str(user.pk), deck_id=str(deck.pk))
        raise PermissionDenied("Access denied")


def get_owned_deck(user, deck_id):
    deck = get_deck(deck_id)
    if deck is None:
        raise NotFound("Deck not found")
    ensure_owner(deck, user)
    return deck


def get_owned_card(user, card_id):
    card = get_card(card_id)
    if card is None:
        raise NotFound("Card not found")
    ensure_owner(card.deck, user)
    return card


def due_cards(user, deck_id, now=None):
    """Cards of the user's deck with ``next_review_at <= now``, most overdue first."""
    deck = get_owned_deck(user, deck_id)
    now = now or utc_now()
    return list(due_cards_queryset(deck.pk, now))


def deck_stats(user, deck_id, now=None):
    deck = get_owned_deck(user, deck_id)
    now = now or utc_now()
    return {
        "total_cards": deck.cards.count(),
        "due_cards": due_cards_queryset(deck.pk, now).count(),
    }
