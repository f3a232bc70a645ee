"""Time helpers shared by models and serializers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_z(value: Optional[datetime]) -> Optional[str]:
    """Render a UTC datetime as ISO-8601 with a trailing ``Z``."""

    if value is None:
        return None
    # SQLite hands datetimes back naive; both forms are UTC here.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


__all__ = ["isoformat_z", "utcnow"]
