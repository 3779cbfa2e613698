import pytest
from django.urls import reverse
from django.utils import timezone
from datetime import timedelta
import uuid

from accounts.models import User
from srs.data.models import Card, Deck


@pytest.fixture
def owner(db):
    return User.objects.create_user(username="owner")


@pytest.fixture
def stranger(db):
    return User.objects.create_user(username="stranger")


@pytest.fixture
def api(client):
    def call(method, url, data=None, username="owner"):
        kwargs = {"HTTP_X_USER_NAME": username}
        if method in ("post", "patch"):
            kwargs["content_type"] = "application/json"
        args = (url,) if data is None else (url, data)
        return getattr(client, method)(*args, **kwargs)
    return call


@pytest.mark.django_db
def test_create_and_list_decks(api, owner, stranger):
    resp = api("post", reverse("deck-list"), {"name": "동사", "description": "verbs"})
    assert resp.status_code == 201
    assert resp.json()["card_count"] == 0

    Deck.objects.create(user=stranger, name="not mine")

    decks = api("get", reverse("deck-list")).json()
    assert [d["name"] for d in decks] == ["동사"]


@pytest.mark.django_db
def test_deck_detail_includes_cards(api, owner):
    deck = Deck.objects.create(user=owner, name="Numbers")
    Card.objects.create(deck=deck, front="하나", back="one")

    data = api("get", reverse("deck-detail", kwargs={"deck_id": deck.id})).json()

    assert data["card_count"] == 1
    assert [c["front"] for c in data["cards"]] == ["하나"]


@pytest.mark.django_db
def test_update_and_delete_deck(api, owner):
    deck = Deck.objects.create(user=owner, name="Old")
    Card.objects.create(deck=deck, front="x", back="y")
    url = reverse("deck-detail", kwargs={"deck_id": deck.id})

    assert api("patch", url, {"name": "New"}).json()["name"] == "New"
    assert api("delete", url).status_code == 204
    assert not Deck.objects.exists()
    assert not Card.objects.exists()


@pytest.mark.django_db
def test_foreign_and_missing_decks(api, owner, stranger):
    deck = Deck.objects.create(user=stranger, name="theirs")

    resp = api("get", reverse("deck-detail", kwargs={"deck_id": deck.id}))
    assert resp.status_code == 403
    assert resp.json()["message"] == "Access denied"

    resp = api("delete", reverse("deck-detail", kwargs={"deck_id": uuid.uuid4()}))
    assert resp.status_code == 404
    assert resp.json()["message"] == "Deck not found"


@pytest.mark.django_db
def test_deck_stats(api, owner):
    deck = Deck.objects.create(user=owner, name="Stats")
    now = timezone.now()
    Card.objects.create(deck=deck, front="a", back="a", next_review_at=now - timedelta(hours=1))
    Card.objects.create(deck=deck, front="b", back="b", next_review_at=now + timedelta(days=3))

    data = api("get", reverse("deck-stats", kwargs={"deck_id": deck.id})).json()

    assert data == {"total_cards": 2, "due_cards": 1}


@pytest.mark.django_db
def test_create_card_in_own_deck(api, owner):
    deck = Deck.objects.create(user=owner, name="Food")

    resp = api("post", reverse("card-list"), {
        "deck_id": str(deck.id),
        "front": "김치",
        "back": "kimchi",
        "examples": ["김치를 먹어요."],
    })

    assert resp.status_code == 201
    data = resp.json()
    assert data["deck_id"] == str(deck.id)
    assert data["review_count"] == 0
    assert data["difficulty"] is None
    assert Card.objects.get(pk=data["id"]).examples == ["김치를 먹어요."]


@pytest.mark.django_db
def test_create_card_in_foreign_deck_is_403(api, owner, stranger):
    deck = Deck.objects.create(user=stranger, name="theirs")

    resp = api("post", reverse("card-list"), {"deck_id": str(deck.id), "front": "a", "back": "b"})

    assert resp.status_code == 403
    assert not Card.objects.exists()


@pytest.mark.django_db
def test_examples_must_be_strings(api, owner):
    deck = Deck.objects.create(user=owner, name="Food")

    resp = api("post", reverse("card-list"), {
        "deck_id": str(deck.id), "front": "a", "back": "b", "examples": [1, 2],
    })

    assert resp.status_code == 400


@pytest.mark.django_db
def test_list_cards_filtered_by_deck(api, owner, stranger):
    first = Deck.objects.create(user=owner, name="one")
    second = Deck.objects.create(user=owner, name="two")
    Card.objects.create(deck=first, front="1", back="1")
    Card.objects.create(deck=second, front="2", back="2")
    Card.objects.create(deck=Deck.objects.create(user=stranger, name="x"), front="3", back="3")

    assert sorted(c["front"] for c in api("get", reverse("card-list")).json()) == ["1", "2"]
    filtered = api("get", reverse("card-list"), {"deck_id": str(second.id)}).json()
    assert [c["front"] for c in filtered] == ["2"]
    assert api("get", reverse("card-list"), {"deck_id": "not-a-uuid"}).status_code == 400


@pytest.mark.django_db
def test_delete_card(api, owner, stranger):
    card = Card.objects.create(deck=Deck.objects.create(user=owner, name="d"), front="a", back="b")
    url = reverse("card-detail", kwargs={"card_id": card.id})

    assert api("delete", url, username="stranger").status_code == 403
    assert api("delete", url).status_code == 204
    assert api("get", url).status_code == 404
