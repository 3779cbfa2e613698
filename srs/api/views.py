from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..data.repos import cards_for_user, decks_for_user
from ..domain.enums import DIFFICULTY_LABELS, Difficulty
from ..services.decks import deck_stats, due_cards, get_owned_card, get_owned_deck
from ..services.reviews import record_review
from ..utils.time import to_display_iso, utc_now
from .serializers import (
    CardCreateSerializer,
    CardListQuerySerializer,
    CardSerializer,
    DeckDetailSerializer,
    DeckSerializer,
    DueQuerySerializer,
    ReviewInSerializer,
)

base_logger = structlog.get_logger()


def request_logger():
    return base_logger.bind(request_id=str(uuid.uuid4()))


class DeckListView(views.APIView):
    def get(self, request):
        decks = decks_for_user(request.user)
        return Response(DeckSerializer(decks, many=True).data)

    def post(self, request):
        s = DeckSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        deck = s.save(user=request.user)
        request_logger().info("deck_created", user_id=str(request.user.pk), deck_id=str(deck.pk))
        return Response(DeckSerializer(deck).data, status=status.HTTP_201_CREATED)


class DeckDetailView(views.APIView):
    def get(self, request, deck_id):
        deck = get_owned_deck(request.user, deck_id)
        return Response(DeckDetailSerializer(deck).data)

    def patch(self, request, deck_id):
        deck = get_owned_deck(request.user, deck_id)
        s = DeckSerializer(deck, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)

    def delete(self, request, deck_id):
        deck = get_owned_deck(request.user, deck_id)
        deck.delete()
        request_logger().info("deck_deleted", user_id=str(request.user.pk), deck_id=str(deck_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class DeckStatsView(views.APIView):
    def get(self, request, deck_id):
        return Response(deck_stats(request.user, deck_id))


class CardListView(views.APIView):
    def get(self, request):
        qs = CardListQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        deck_id = qs.validated_data.get("deck_id")
        if deck_id:
            # 404/403 for an unknown or foreign deck rather than an empty list
            deck_id = get_owned_deck(request.user, deck_id).pk
        cards = cards_for_user(request.user, deck_id)
        return Response(CardSerializer(cards, many=True).data)

    def post(self, request):
        s = CardCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        deck = get_owned_deck(request.user, s.validated_data["deck_id"])
        card = s.save(deck=deck)
        request_logger().info("card_created",
            user_id=str(request.user.pk),
            deck_id=str(deck.pk),
            card_id=str(card.pk),
        )
        return Response(CardSerializer(card).data, status=status.HTTP_201_CREATED)


class CardDetailView(views.APIView):
    def get(self, request, card_id):
        card = get_owned_card(request.user, card_id)
        return Response(CardSerializer(card).data)

    def patch(self, request, card_id):
        card = get_owned_card(request.user, card_id)
        s = CardSerializer(card, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)

    def delete(self, request, card_id):
        card = get_owned_card(request.user, card_id)
        card.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


class ReviewView(views.APIView):
    def post(self, request, card_id):
        logger = request_logger()

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        difficulty = Difficulty(s.validated_data["difficulty"])

        card, interval_days = record_review(request.user, card_id, difficulty)

        logger.info(
            "review_api_response",
            user_id=str(request.user.pk),
            card_id=str(card.pk),
            difficulty=difficulty.value,
            review_count=card.review_count,
            interval_days=interval_days,
            next_review_utc=card.next_review_at.isoformat(),
            next_review_local=to_display_iso(card.next_review_at),
        )

        return Response(
            {
                "card": CardSerializer(card).data,
                "interval_days": interval_days,
                "next_review_utc": card.next_review_at.isoformat(),
                "next_review_local": to_display_iso(card.next_review_at),
                "difficulty_label": DIFFICULTY_LABELS[difficulty],
            },
            status=status.HTTP_200_OK,
        )


class DueCardsView(views.APIView):
    def get(self, request, deck_id):
        logger = request_logger()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data.get("until") or utc_now()

        results = due_cards(request.user, deck_id, until)

        logger.info(
            "due_cards_api_response",
            user_id=str(request.user.pk),
            deck_id=str(deck_id),
            until_utc=until.isoformat(),
            until_local=to_display_iso(until),
            card_count=len(results),
        )

        return Response(
            {
                "deck_id": str(deck_id),
                "until_utc": until.isoformat(),
                "until_local": to_display_iso(until),
                "cards": CardSerializer(results, many=True).data,
            }
        )
