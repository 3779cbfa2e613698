from django.db.models import Count

from ..domain.selection import DUE_ORDERING, due_filter
from .models import Card, Deck


def decks_for_user(user):
    return Deck.objects.filter(user=user).annotate(card_count=Count("cards"))


def get_deck(deck_id):
    return Deck.objects.filter(pk=deck_id).first()


def get_card(card_id):
    return Card.objects.select_related("deck").filter(pk=card_id).first()


def get_card_for_update(card_id):
    """
    Fetch a card and lock its row until the surrounding transaction ends.
    Must be called inside ``transaction.atomic()``.
    """
    return (Card.objects
            .select_for_update()
            .select_related("deck")
            .filter(pk=card_id)
            .first())


def cards_for_user(user, deck_id=None):
    qs = Card.objects.filter(deck__user=user)
    if deck_id is not None:
        qs = qs.filter(deck_id=deck_id)
    return qs


def due_cards_queryset(deck_id, now):
    return Card.objects.filter(**due_filter(deck_id, now)).order_by(*DUE_ORDERING)


def persist_review(card, difficulty, next_review_at):
    card.difficulty = difficulty.value
    card.next_review_at = next_review_at
    card.review_count = card.review_count + 1
    card.save(update_fields=["difficulty", "next_review_at", "review_count", "updated_at"])
    return card
