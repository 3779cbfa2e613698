from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Custom User model so decks can hang off a project-owned user table.
    Authentication itself is the mock header login in ``accounts.middleware``.
    """

    pass
