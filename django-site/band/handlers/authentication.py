"""DRF authentication for an API without user accounts."""

from rest_framework.authentication import SessionAuthentication
from rest_framework.request import Request


class CsrfOnlyAuthentication(SessionAuthentication):
    """Enforces Django's CSRF check on every request and never authenticates.

    The API changes the visitor's session, so unsafe methods need a CSRF
    token even though nobody logs in.
    """

    def authenticate(self, request: Request) -> None:
        self.enforce_csrf(request)
        return None
