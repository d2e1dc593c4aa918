"""Time helpers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current UTC time, used for link timestamps and token expiry."""
    return datetime.now(timezone.utc)
