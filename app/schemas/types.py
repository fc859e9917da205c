"""Field types shared by the response schemas."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import PlainSerializer


def utc_isoformat(value: datetime) -> str:
    """Render a stored timestamp as ISO-8601 UTC with a ``Z`` suffix.

    Columns hold naive UTC values; without the marker a browser would read
    them as local time.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


UtcDatetime = Annotated[datetime, PlainSerializer(utc_isoformat, return_type=str, when_used="json")]
