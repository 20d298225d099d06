import datetime
import math
from typing import Optional


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def format_display_date(value: Optional[str], long: bool = False) -> Optional[str]:
    """Format a CMS date as "1/5/2025", or "January 5, 2025" when ``long``."""
    if not value:
        return None
    try:
        parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if long:
        return f"{parsed:%B} {parsed.day}, {parsed.year}"
    return f"{parsed.month}/{parsed.day}/{parsed.year}"
