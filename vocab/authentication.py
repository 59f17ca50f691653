from rest_framework.authentication import BaseAuthentication


class MiddlewareUserAuthentication(BaseAuthentication):
    """
    Trust the user already attached by MockLoginUserMiddleware.
    Unlike SessionAuthentication this does not enforce CSRF, the header is the credential.
    """

    def authenticate(self, request):
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated or not user.is_active:
            return None
        return (user, None)
