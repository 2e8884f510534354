"""Tests for search input normalization and WHERE clause assembly."""

from __future__ import annotations

import pytest

from creator_discovery.db.repositories.creator import (
    CreatorFilterCriteria,
    FollowerRange,
    Pagination,
    build_creator_predicates,
    normalize_filter_criteria,
)


def test_normalize_without_inputs_yields_empty_criteria() -> None:
    criteria = normalize_filter_criteria()

    assert criteria == CreatorFilterCriteria()
    assert criteria.limit == 10
    assert criteria.offset == 0


def test_normalize_builds_pagination_and_range() -> None:
    criteria = normalize_filter_criteria(
        page=3,
        per_page=20,
        country=" US ",
        industry="beauty",
        followers_from=10,
        followers_to=500,
    )

    assert criteria.pagination == Pagination(per_page=20, page=3)
    assert criteria.offset == 40
    assert criteria.limit == 20
    assert criteria.country_id == "US"
    assert criteria.industry_id == "beauty"
    assert criteria.followers == FollowerRange(low=10, high=500)


def test_normalize_treats_blank_identifiers_as_absent() -> None:
    criteria = normalize_filter_criteria(country="  ", industry="")

    assert criteria.country_id is None
    assert criteria.industry_id is None


def test_normalize_keeps_inverted_range() -> None:
    criteria = normalize_filter_criteria(followers_from=1_000, followers_to=10)

    assert criteria.followers == FollowerRange(low=1_000, high=10)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"page": 2}, "page requires per_page"),
        ({"page": 0, "per_page": 5}, "page must be greater"),
        ({"per_page": 0}, "per_page must be greater"),
        ({"followers_from": 10}, "must be provided together"),
        ({"followers_to": 10}, "must be provided together"),
        ({"followers_from": -1, "followers_to": 10}, "non-negative"),
    ],
)
def test_normalize_rejects_malformed_inputs(kwargs, message) -> None:
    with pytest.raises(ValueError, match=message):
        normalize_filter_criteria(**kwargs)


def test_predicates_always_start_with_visibility() -> None:
    predicates = build_creator_predicates(CreatorFilterCriteria())

    assert len(predicates) == 1
    assert "visibility" in str(predicates[0])


def test_predicates_cover_every_supplied_dimension() -> None:
    predicates = build_creator_predicates(
        CreatorFilterCriteria(
            country_id="US",
            industry_id="beauty",
            followers=FollowerRange(low=1, high=2),
        )
    )

    assert len(predicates) == 4
    compiled = [str(predicate) for predicate in predicates]
    assert "creators.country_id" in compiled[1]
    assert compiled[2].startswith("EXISTS")
    assert "creator_industries.industry_id" in compiled[2]
    assert "follower_count >=" in compiled[3]
    assert "follower_count <=" in compiled[3]
