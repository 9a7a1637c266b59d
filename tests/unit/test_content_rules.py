from datetime import datetime

import pytest

from src.domain.content_rules import slugify, stamp_published_at
from src.domain.entities import AdStatus, ContentStatus


@pytest.mark.parametrize(
    "title,slug",
    [
        ("  New Oil & Gas Regulations 2024! ", "new-oil-gas-regulations-2024"),
        ("NUPRC Flags-Off   Bid Round", "nuprc-flags-off-bid-round"),
        ("---", ""),
        ("Already-a-slug", "already-a-slug"),
    ],
)
def test_slugify(title, slug):
    assert slugify(title) == slug


NOW = datetime(2025, 3, 1, 12, 0, 0)
EARLIER = datetime(2024, 1, 1, 9, 30, 0)


def test_first_publish_is_stamped():
    assert stamp_published_at(ContentStatus.published, None, NOW) == NOW


def test_ad_publish_is_stamped():
    assert stamp_published_at(AdStatus.published, None, NOW) == NOW


def test_republish_keeps_original_stamp():
    assert stamp_published_at(ContentStatus.published, EARLIER, NOW) == EARLIER


def test_unpublish_keeps_stamp():
    assert stamp_published_at(ContentStatus.draft, EARLIER, NOW) == EARLIER


def test_draft_is_not_stamped():
    assert stamp_published_at(ContentStatus.draft, None, NOW) is None
    assert stamp_published_at(None, None, NOW) is None
