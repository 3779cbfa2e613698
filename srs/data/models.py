import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from ..domain.enums import DIFFICULTY_LABELS, Difficulty

DIFFICULTY_CHOICES = [(d.value, DIFFICULTY_LABELS[d]) for d in Difficulty]


class Deck(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="decks"
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]
        indexes = [
            models.Index(fields=["user", "updated_at"], name="srs_deck_user_updated_idx"),
        ]

    def __str__(self):
        return self.name


class Card(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    deck = models.ForeignKey(Deck, on_delete=models.CASCADE, related_name="cards")
    front = models.CharField(max_length=500)
    back = models.CharField(max_length=500)
    pronunciation = models.CharField(max_length=200, blank=True, default="")
    examples = models.JSONField(default=list, blank=True)
    notes = models.TextField(blank=True, default="")

    # Scheduling state, written only by the review workflow
    difficulty = models.CharField(max_length=6, choices=DIFFICULTY_CHOICES, null=True, blank=True)
    review_count = models.PositiveIntegerField(default=0)
    next_review_at = models.DateTimeField(default=timezone.now)  # UTC

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["deck", "next_review_at"], name="srs_card_deck_due_idx"),
        ]

    def __str__(self):
        return self.front
