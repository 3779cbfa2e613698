from rest_framework.authentication import BaseAuthentication

from accounts.middleware import login_header


class MockLoginAuthentication(BaseAuthentication):
    """Hand the user resolved by ``MockLoginUserMiddleware`` to DRF.

    Only requests carrying the login header are authenticated. The session
    cookie left behind by ``login()`` is not accepted on its own, so there is
    no cookie-borne credential to protect with a CSRF token.
    """

    def authenticate(self, request):
        username = request.headers.get(login_header())
        if not username:
            return None
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated or user.get_username() != username:
            return None
        return (user, None)

    def authenticate_header(self, request):
        return login_header()
