from rest_framework import authentication


class SessionAuthentication(authentication.SessionAuthentication):
    """
    Session cookie authentication that answers anonymous requests with 401.

    DRF only returns 401 when the first authenticator advertises a
    WWW-Authenticate scheme; the stock session class does not, which turns
    "not logged in" into a 403.
    """

    def authenticate_header(self, request):
        return 'Session'
