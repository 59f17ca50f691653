from .data.models import ReviewRecord  # noqa: F401
