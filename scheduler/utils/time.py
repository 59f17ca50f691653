from django.utils import timezone


def to_local_iso(dt_utc):
    """Render an aware datetime in the configured display timezone (settings.TIME_ZONE)."""
    return timezone.localtime(dt_utc).isoformat()
