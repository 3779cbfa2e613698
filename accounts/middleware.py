from django.conf import settings
from django.contrib.auth import login
from django.http import JsonResponse

from accounts.models import User

import logging

logger = logging.getLogger(__name__)


def login_header():
    return getattr(settings, "MOCK_LOGIN_HEADER", "X-User-NAME")


# No real login flow: the API trusts a username header
class MockLoginUserMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith("/api"):
            username = request.headers.get(login_header())
            if username and request.user.get_username() != username:
                logger.info("Mock login for user: %s", username)
                try:
                    user = User.objects.get(username=username, is_active=True)
                except User.DoesNotExist:
                    logger.warning("Mock login rejected for unknown user: %s", username)
                    return JsonResponse(
                        {"error": "User not found or invalid credentials."}, status=401
                    )
                login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        return self.get_response(request)
