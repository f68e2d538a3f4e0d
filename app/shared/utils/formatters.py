# 📄 File: app/shared/utils/formatters.py

# 🧭 Purpose (Layman Explanation):
# Turns raw values into the short labels people see, like "3 h" for a join request
# that was sent three hours ago.

# 🧪 Purpose (Technical Summary):
# Display formatting helpers used by API presenters.

# 🔗 Dependencies:
# - datetime: Time arithmetic

# 🔄 Connected Modules / Calls From:
# Used by: group requests listing, member listings

from datetime import datetime
from typing import Optional

from app.shared.utils.helpers import ensure_utc, utcnow


def format_time_diff(since: datetime, reference: Optional[datetime] = None) -> str:
    """
    Format the time elapsed since ``since`` in its largest whole unit.

    Args:
        since: Earlier moment
        reference: Later moment (defaults to now)

    Returns:
        "N d", "N h", "N min" or "N sec"
    """
    reference = ensure_utc(reference) if reference else utcnow()
    seconds = max(int((reference - ensure_utc(since)).total_seconds()), 0)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} d"
    if hours > 0:
        return f"{hours} h"
    if minutes > 0:
        return f"{minutes} min"
    return f"{seconds} sec"
