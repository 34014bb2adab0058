from rest_framework.authentication import SessionAuthentication


class SessionCookieAuthentication(SessionAuthentication):
    """
    Session-cookie authentication that answers unauthenticated requests with
    401 instead of DRF's default 403 for session auth.
    """

    def authenticate_header(self, request):
        return 'Session'


class LoginSessionAuthentication(SessionCookieAuthentication):
    """Session auth for the login and logout endpoints, which skip the CSRF check."""

    def enforce_csrf(self, request):
        return
