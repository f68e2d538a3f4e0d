# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small tools that many parts of the app need, like building the readable web address
# of a club, getting the current time, and working out how many pages a list has.

# 🧪 Purpose (Technical Summary):
# General purpose helpers for slug/unique-URL generation, timezone-aware timestamps,
# and 1-indexed pagination arithmetic.

# 🔗 Dependencies:
# - re: Slug normalization
# - datetime: Timestamps

# 🔄 Connected Modules / Calls From:
# Used by: group/event/user creation, ORM timestamp defaults, list and search endpoints

import math
import re
from datetime import datetime, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes read back from the database.

    SQLite drops tzinfo on round trip; PostgreSQL keeps it.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def generate_slug(text: str, max_length: int = 50) -> str:
    """
    Generate URL-friendly slug from text.

    Args:
        text: Text to convert to slug
        max_length: Maximum slug length

    Returns:
        URL-friendly slug
    """
    if not text:
        return ""

    slug = text.lower()
    slug = re.sub(r'[^\w\s-]', '', slug)
    slug = re.sub(r'[-\s_]+', '-', slug)
    slug = slug.strip('-')

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip('-')

    return slug


def generate_unique_url(text: str, now: Optional[datetime] = None) -> str:
    """
    Build a uniqueURL: the slug of a title or name plus the creation
    time in epoch milliseconds.

    Example:
        "Morning Runners" -> "morning-runners-1718000000000"
    """
    now = now or utcnow()
    millis = int(now.timestamp() * 1000)
    slug = generate_slug(text) or "item"
    return f"{slug}-{millis}"


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """Return (offset, limit) for a 1-indexed page."""
    page = max(page, 1)
    return (page - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def escape_like(term: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return (
        term.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )
