"""
Content Rules

Pure functions applied by the content use cases on create and update.
"""

import re
from datetime import datetime
from typing import Optional

from .entities.enums import AdStatus, ContentStatus

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

PUBLISHED_STATES = (ContentStatus.published, AdStatus.published)


def slugify(title: str) -> str:
    """
    Derive a URL slug from a title.

    Lowercases, collapses each run of non-alphanumeric characters into a
    single hyphen and trims hyphens from both ends.

    >>> slugify("  New Oil & Gas Regulations 2024! ")
    'new-oil-gas-regulations-2024'
    """
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def stamp_published_at(
    status: Optional[str], published_at: Optional[datetime], now: datetime
) -> Optional[datetime]:
    """
    Return the published timestamp an item should carry after a save.

    The timestamp is set once, the first time the item is saved as
    published, and never moves afterwards.
    """
    if published_at is None and status in PUBLISHED_STATES:
        return now
    return published_at
