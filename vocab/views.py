from rest_framework import status, viewsets
from rest_framework.decorators import api_view, action
from rest_framework.response import Response
from django.core.management import call_command
import structlog

logger = structlog.get_logger()


@api_view(["POST"])
def initialize_data(request):
    """Wipes every account; staff only."""
    if not request.user.is_authenticated:
        return Response(
            {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
        )
    if not request.user.is_staff:
        logger.info("initialize_data_forbidden", username=request.user.username)
        return Response(
            {"error": "Staff access required"}, status=status.HTTP_403_FORBIDDEN
        )

    file_name = request.data.get("file", "MOCK_DATA.json")
    try:
        logger.info("initialize_data", file=file_name)
        call_command("init_data", file=file_name)
        return Response(
            {"message": f"Data initialized successfully from {file_name}"},
            status=status.HTTP_200_OK,
        )
    except Exception as e:
        logger.exception("initialize_data_failed", file=file_name)
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the logged-in user's name and the ids of the decks they own,
        the entry points for study and stats requests.
        """
        if request.user.is_authenticated:
            deck_ids = request.user.decks.order_by("date_created").values_list(
                "id", flat=True
            )
            return Response(
                {
                    "username": request.user.username,
                    "deck_ids": [str(pk) for pk in deck_ids],
                },
                status=status.HTTP_200_OK,
            )
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
