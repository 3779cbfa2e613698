import pytest
from django.db import IntegrityError
from django.urls import reverse

from accounts.models import User
from srs.api import views
from srs.data.models import Card, Deck


@pytest.fixture
def deck(db):
    user = User.objects.create_user(username="owner")
    return Deck.objects.create(user=user, name="deck")


def get_stats(client, deck):
    return client.get(reverse("deck-stats", kwargs={"deck_id": deck.id}), HTTP_X_USER_NAME="owner")


@pytest.mark.django_db
def test_until_beyond_display_range_is_400(client, deck):
    url = reverse("due-cards", kwargs={"deck_id": str(deck.id)})

    resp = client.get(url, {"until": "9999-12-31T23:00:00Z"}, HTTP_X_USER_NAME="owner")

    assert resp.status_code == 400
    assert resp["Content-Type"] == "application/json"
    assert "until" in resp.json()["message"]


@pytest.mark.django_db
def test_unexpected_error_returns_json_500(client, deck, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(views, "deck_stats", boom)

    resp = get_stats(client, deck)

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "internal_error"
    assert "disk on fire" not in body["message"]


@pytest.mark.django_db
def test_integrity_error_is_400(client, deck, monkeypatch):
    def duplicate(*args, **kwargs):
        raise IntegrityError("UNIQUE constraint failed")

    monkeypatch.setattr(views, "deck_stats", duplicate)

    resp = get_stats(client, deck)

    assert resp.status_code == 400
    assert resp.json()["error"] == "integrity_error"


@pytest.mark.django_db
def test_missing_object_is_404(client, deck, monkeypatch):
    def missing(*args, **kwargs):
        raise Card.DoesNotExist()

    monkeypatch.setattr(views, "deck_stats", missing)

    resp = get_stats(client, deck)

    assert resp.status_code == 404
    assert resp.json()["message"] == "Record not found"
