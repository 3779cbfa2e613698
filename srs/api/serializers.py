from rest_framework import serializers

from ..data.models import Card, Deck
from ..domain.enums import DIFFICULTY_LABELS, Difficulty
from ..utils.time import display_zone, to_display_iso


class CardSerializer(serializers.ModelSerializer):
    deck_id = serializers.UUIDField(read_only=True)
    difficulty_label = serializers.SerializerMethodField()
    next_review_local = serializers.SerializerMethodField()

    class Meta:
        model = Card
        fields = [
            "id", "deck_id", "front", "back", "pronunciation", "examples", "notes",
            "difficulty", "difficulty_label", "review_count",
            "next_review_at", "next_review_local", "created_at", "updated_at",
        ]
        read_only_fields = [
            "difficulty", "review_count", "next_review_at", "created_at", "updated_at",
        ]

    def validate_examples(self, value):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise serializers.ValidationError("examples must be a list of strings")
        return value

    def get_difficulty_label(self, obj):
        if not obj.difficulty:
            return None
        return DIFFICULTY_LABELS[Difficulty(obj.difficulty)]

    def get_next_review_local(self, obj):
        return to_display_iso(obj.next_review_at)


class CardCreateSerializer(CardSerializer):
    deck_id = serializers.UUIDField()

    def create(self, validated_data):
        # the view resolves deck_id to an owned Deck and passes it to save()
        validated_data.pop("deck_id", None)
        return super().create(validated_data)


class DeckSerializer(serializers.ModelSerializer):
    card_count = serializers.SerializerMethodField()

    class Meta:
        model = Deck
        fields = ["id", "name", "description", "card_count", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]

    def get_card_count(self, obj):
        count = getattr(obj, "card_count", None)
        return obj.cards.count() if count is None else count


class DeckDetailSerializer(DeckSerializer):
    cards = CardSerializer(many=True, read_only=True)

    class Meta(DeckSerializer.Meta):
        fields = DeckSerializer.Meta.fields + ["cards"]


class ReviewInSerializer(serializers.Serializer):
    difficulty = serializers.ChoiceField(choices=[d.value for d in Difficulty])


class DueQuerySerializer(serializers.Serializer):
    until = serializers.DateTimeField(required=False)  # ISO-8601, defaults to now

    def validate_until(self, value):
        try:
            value.astimezone(display_zone())
        except OverflowError:
            raise serializers.ValidationError("until is outside the representable date range") from None
        return value


class CardListQuerySerializer(serializers.Serializer):
    deck_id = serializers.UUIDField(required=False)
