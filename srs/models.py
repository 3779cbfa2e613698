# Models live in srs.data; import them here so Django registers the app's models.
from .data.models import Card, Deck  # noqa: F401
