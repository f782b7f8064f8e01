"""Derived values shown on the dashboard and activity feed."""

import math
from datetime import datetime
from typing import Optional


def calculate_change(current: int, previous: int) -> str:
    """Percentage change from ``previous`` to ``current`` as a signed string."""
    if previous == 0:
        return "+100%" if current > 0 else "0%"
    change = (current - previous) / previous * 100
    rounded = math.floor(change + 0.5)
    sign = "+" if rounded >= 0 else ""
    return f"{sign}{rounded}%"


def change_type(current: int, previous: int) -> str:
    return "positive" if current >= previous else "negative"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_time_ago(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``timestamp`` was using its largest whole unit."""
    now = now or datetime.utcnow()
    seconds = (now - timestamp).total_seconds()
    
    days = int(seconds // 86400)
    hours = int(seconds // 3600)
    minutes = int(seconds // 60)
    
    if days > 0:
        return _plural(days, "day")
    if hours > 0:
        return _plural(hours, "hour")
    if minutes > 0:
        return _plural(minutes, "minute")
    return "Just now"
