import json
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from srs.data.models import Card, Deck


class Command(BaseCommand):
    help = "Reset users and seed demo decks and cards from a JSON file."

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="demo_decks.json", help="JSON file name to load data from"
        )

    def handle(self, *args, **options):
        file_name = options["file"]
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data from {file_name}: {e}") from e

        with transaction.atomic():
            # cascades to decks and cards
            User.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing user data has been deleted"))

            User.objects.create_superuser(
                "testuser", email="testuser@example.com", password="testpassword"
            )
            for i in range(1, 6):
                User.objects.create_user(
                    f"testuser{i}",
                    email=f"testuser{i}@example.com",
                    password="testpassword",
                )

            card_total = 0
            for deck_data in data.get("decks", []):
                owner = User.objects.get(username=deck_data.get("owner", "testuser"))
                deck = Deck.objects.create(
                    user=owner,
                    name=deck_data["name"],
                    description=deck_data.get("description", ""),
                )
                cards = [
                    Card(
                        deck=deck,
                        front=card["front"],
                        back=card["back"],
                        pronunciation=card.get("pronunciation", ""),
                        examples=card.get("examples", []),
                        notes=card.get("notes", ""),
                    )
                    for card in deck_data.get("cards", [])
                ]
                Card.objects.bulk_create(cards)
                card_total += len(cards)

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo data loaded from {file_name}: "
                f"{len(data.get('decks', []))} decks, {card_total} cards"
            )
        )
