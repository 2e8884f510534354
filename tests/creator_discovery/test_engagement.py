"""Tests for engagement counter parsing and rate enrichment."""

from __future__ import annotations

import pytest

from creator_discovery.db.models import Country, Creator, Industry
from creator_discovery.services.engagement import (
    calculate_engagement_rate,
    enrich_creator,
    parse_count,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 0),
        ("", 0),
        ("   ", 0),
        ("1200", 1200),
        (" 35 ", 35),
        ("12.9", 12),
        ("+7", 7),
        (42, 42),
        ("n/a", None),
        ("-3", None),
        (-3, None),
    ],
)
def test_parse_count(raw, expected) -> None:
    assert parse_count(raw) == expected


def test_rate_uses_likes_comments_and_shares_over_views() -> None:
    rate = calculate_engagement_rate(
        view_count="200", like_count="10", comment_count="5", share_count="5"
    )

    assert rate == pytest.approx(10.0)


def test_rate_is_zero_when_views_missing() -> None:
    rate = calculate_engagement_rate(
        view_count=None, like_count="3", comment_count="2", share_count="1"
    )

    assert rate == 0.0


def test_rate_is_zero_when_views_are_zero() -> None:
    rate = calculate_engagement_rate(
        view_count="0", like_count="4", comment_count="0", share_count="0"
    )

    assert rate == 0.0


def test_rate_is_zero_when_a_counter_is_unparseable() -> None:
    rate = calculate_engagement_rate(
        view_count="1000", like_count="n/a", comment_count="1", share_count="1"
    )

    assert rate == 0.0


def test_rate_treats_missing_interactions_as_zero() -> None:
    rate = calculate_engagement_rate(
        view_count="50", like_count="5", comment_count=None, share_count=""
    )

    assert rate == pytest.approx(10.0)


def test_enrich_creator_projects_row_and_relations() -> None:
    creator = Creator(
        id="alpha",
        username="alpha",
        nickname="Alpha",
        avatar_url="https://cdn.example.com/alpha.png",
        visibility=True,
        follower_count=5_000_000,
        view_count="200",
        like_count="10",
        comment_count="5",
        share_count="5",
        country=Country(id="US", value="United States"),
        industries=[Industry(id="beauty", value="Beauty")],
    )

    item = enrich_creator(creator)

    assert item.creator_id == "alpha"
    assert item.nickname == "Alpha"
    assert item.follower_count == 5_000_000
    assert item.view_count == "200"
    assert item.engagement_rate == pytest.approx(10.0)
    assert item.country is not None and item.country.value == "United States"
    assert [industry.id for industry in item.industries] == ["beauty"]


def test_enrich_creator_without_country_or_counters() -> None:
    creator = Creator(id="delta", username="delta", visibility=True, follower_count=1)

    item = enrich_creator(creator)

    assert item.country is None
    assert item.industries == []
    assert item.engagement_rate == 0.0
