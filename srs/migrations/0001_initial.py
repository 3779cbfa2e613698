import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Deck",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="decks", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-updated_at"],
                "indexes": [models.Index(fields=["user", "updated_at"], name="srs_deck_user_updated_idx")],
            },
        ),
        migrations.CreateModel(
            name="Card",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("front", models.CharField(max_length=500)),
                ("back", models.CharField(max_length=500)),
                ("pronunciation", models.CharField(blank=True, default="", max_length=200)),
                ("examples", models.JSONField(blank=True, default=list)),
                ("notes", models.TextField(blank=True, default="")),
                ("difficulty", models.CharField(blank=True, choices=[("HARD", "어려워요"), ("NORMAL", "보통"), ("EASY", "쉬워요")], max_length=6, null=True)),
                ("review_count", models.PositiveIntegerField(default=0)),
                ("next_review_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("deck", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cards", to="srs.deck")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["deck", "next_review_at"], name="srs_card_deck_due_idx")],
            },
        ),
    ]
