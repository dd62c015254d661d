from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current time; timestamp columns reject naive values."""
    return datetime.now(timezone.utc)
