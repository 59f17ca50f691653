from django.contrib.auth import login
from django.http import HttpResponse
import structlog

from vocab.models import User

logger = structlog.get_logger()


# Stand-in for token authentication, which lives outside this service
class MockLoginUserMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith("/api"):
            username = request.headers.get("X-User-NAME")
            if username:
                logger.info("mock_login", username=username, path=request.path)
                try:
                    user = User.objects.get(username=username)
                except User.DoesNotExist:
                    return HttpResponse(
                        "User not found or invalid credentials.", status=401
                    )
                if request.user != user:
                    login(request, user)
        response = self.get_response(request)
        return response
