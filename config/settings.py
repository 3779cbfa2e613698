import logging
import os
from pathlib import Path

from .logging import configure_logging

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-change-me")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "rest_framework",
    "accounts",
    "srs",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "accounts.middleware.MockLoginUserMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

AUTH_USER_MODEL = "accounts.User"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ["accounts.authentication.MockLoginAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "srs.api.exceptions.exception_handler",
}

MOCK_LOGIN_HEADER = "X-User-NAME"

# Spaced repetition policy, see srs.config.SchedulerPolicy.
# Environment values stay strings; srs.config.load_policy parses them.
SRS = {
    "BASE_INTERVALS": {
        "HARD": os.environ.get("SRS_BASE_INTERVAL_HARD", 1),
        "NORMAL": os.environ.get("SRS_BASE_INTERVAL_NORMAL", 2),
        "EASY": os.environ.get("SRS_BASE_INTERVAL_EASY", 4),
    },
    "EASE_FACTOR": os.environ.get("SRS_EASE_FACTOR", 1.5),
    "MIN_INTERVAL_DAYS": os.environ.get("SRS_MIN_INTERVAL_DAYS", 1),
    "MAX_INTERVAL_DAYS": os.environ.get("SRS_MAX_INTERVAL_DAYS", 180),
}
SRS_DISPLAY_TIME_ZONE = os.environ.get("SRS_DISPLAY_TIME_ZONE", "Asia/Seoul")

configure_logging(logging.DEBUG if DEBUG else logging.INFO)
