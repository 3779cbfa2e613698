from django.urls import path
from .views import (
    CardDetailView,
    CardListView,
    DeckDetailView,
    DeckListView,
    DeckStatsView,
    DueCardsView,
    ReviewView,
)

urlpatterns = [
    path("decks/", DeckListView.as_view(), name="deck-list"),
    path("decks/<uuid:deck_id>/", DeckDetailView.as_view(), name="deck-detail"),
    path("decks/<uuid:deck_id>/stats/", DeckStatsView.as_view(), name="deck-stats"),
    path("cards/", CardListView.as_view(), name="card-list"),
    path("cards/due/<uuid:deck_id>/", DueCardsView.as_view(), name="due-cards"),
    path("cards/<uuid:card_id>/", CardDetailView.as_view(), name="card-detail"),
    path("cards/<uuid:card_id>/review/", ReviewView.as_view(), name="review"),
]
