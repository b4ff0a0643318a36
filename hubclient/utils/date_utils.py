"""Date and time utilities for hubclient."""

import datetime
from typing import Optional

from dateutil.parser import parse as parse_date


def parse_timestamp(value: Optional[str]) -> Optional[datetime.datetime]:
    """Parse an ISO 8601 timestamp from the API, keeping its timezone."""
    if not value:
        return None
    return parse_date(value)
