"""
Source of "today" for default exercise dates and log bounds.

The date is computed per request through the ``get_today`` dependency,
never at import time.  Tests replace it through
``app.dependency_overrides``.
"""

from datetime import date, datetime, timezone

EPOCH_DATE = "1970-01-01"


def get_today() -> date:
    """FastAPI dependency returning the current UTC date."""
    return datetime.now(timezone.utc).date()
