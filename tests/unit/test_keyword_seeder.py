"""Unit tests for keyword sets and KeywordSeeder."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from catalog.schemas.category import CategoryRecord
from catalog.services.keyword_seeder import KeywordSeeder
from catalog.services.keyword_sets import (
    DEFAULT_KEYWORD_SETS,
    KeywordSet,
    match_keyword_set,
)

GADGETS = KeywordSet(
    key="gadgets",
    keywords=("phone", "charger", "phone", "cable"),
    high_priority=("phone",),
    name_hints=("gadget", "tech"),
)
PETS = KeywordSet(
    key="pets",
    keywords=("cat", "dog"),
    high_priority=("cat",),
    name_hints=("pet",),
)


@pytest.fixture
def mock_repo() -> MagicMock:
    repo = MagicMock()
    repo.list_active_categories = AsyncMock(
        return_value=[
            CategoryRecord(id=1, name="Gadgets"),
            CategoryRecord(id=2, name="Pet Supplies"),
            CategoryRecord(id=3, name="Books"),
        ]
    )
    repo.upsert_keyword = AsyncMock()
    return repo


class TestKeywordSets:
    """Tests for the default keyword sets."""

    def test_six_default_sets(self):
        assert [s.key for s in DEFAULT_KEYWORD_SETS] == [
            "electronics",
            "fashion",
            "beauty",
            "home",
            "family",
            "toys",
        ]

    def test_high_priority_terms_are_keywords(self):
        for keyword_set in DEFAULT_KEYWORD_SETS:
            assert set(keyword_set.high_priority) <= set(keyword_set.keywords), keyword_set.key

    def test_home_laundry_terms_are_high_priority(self):
        home = match_keyword_set("Home & Living")
        flags = dict(home.entries())

        assert flags["washing detergent"] is True
        assert flags["ผงซักฟอก"] is True
        assert flags["washing powder"] is True
        assert all(kw.strip() for kw in home.keywords + home.high_priority)

    def test_entries_deduplicated_in_order(self):
        assert GADGETS.entries() == [("phone", True), ("charger", False), ("cable", False)]

    @pytest.mark.parametrize(
        "category_name,expected",
        [
            ("Electronics", "electronics"),
            ("Home Electronics", "electronics"),
            ("แฟชั่นผู้หญิง", "fashion"),
            ("Health & Beauty", "beauty"),
            ("Home & Living", "home"),
            ("Mom & Baby", "family"),
            ("Pet Supplies", "toys"),
            ("ของเล่น", "toys"),
        ],
    )
    def test_match_keyword_set(self, category_name, expected):
        assert match_keyword_set(category_name).key == expected

    def test_unmatched_name(self):
        assert match_keyword_set("Books") is None


class TestKeywordSeeder:
    """Tests for KeywordSeeder."""

    @pytest.mark.asyncio
    async def test_seed_upserts_matching_sets(self, mock_session, mock_repo):
        with patch(
            "catalog.services.keyword_seeder.CategoryKeywordsRepository",
            return_value=mock_repo,
        ):
            seeder = KeywordSeeder(mock_session, keyword_sets=(GADGETS, PETS))
            report = await seeder.seed()

        assert report.inserted == {"Gadgets": 3, "Pet Supplies": 2}
        assert report.total_keywords == 5
        assert report.failed == 0
        assert report.unmatched_categories == ["Books"]
        mock_repo.upsert_keyword.assert_any_await(1, "phone", True)
        mock_repo.upsert_keyword.assert_any_await(2, "dog", False)
        assert mock_session.begin_nested.call_count == 5

    @pytest.mark.asyncio
    async def test_failed_keyword_does_not_stop_run(self, mock_session, mock_repo):
        mock_repo.upsert_keyword.side_effect = [None, RuntimeError("boom"), None, None, None]

        with patch(
            "catalog.services.keyword_seeder.CategoryKeywordsRepository",
            return_value=mock_repo,
        ):
            report = await KeywordSeeder(mock_session, keyword_sets=(GADGETS, PETS)).seed()

        assert report.failed == 1
        assert report.inserted == {"Gadgets": 2, "Pet Supplies": 2}
        assert mock_repo.upsert_keyword.await_count == 5

    @pytest.mark.asyncio
    async def test_no_categories(self, mock_session, mock_repo):
        mock_repo.list_active_categories.return_value = []

        with patch(
            "catalog.services.keyword_seeder.CategoryKeywordsRepository",
            return_value=mock_repo,
        ):
            report = await KeywordSeeder(mock_session).seed()

        assert report.total_keywords == 0
        mock_repo.upsert_keyword.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_plan(self, mock_session, mock_repo):
        with patch(
            "catalog.services.keyword_seeder.CategoryKeywordsRepository",
            return_value=mock_repo,
        ):
            plan = await KeywordSeeder(mock_session, keyword_sets=(GADGETS, PETS)).plan()

        assert plan == {"Gadgets": GADGETS, "Pet Supplies": PETS, "Books": None}
        mock_repo.upsert_keyword.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reseeding_issues_same_upserts(self, mock_session, mock_repo):
        with patch(
            "catalog.services.keyword_seeder.CategoryKeywordsRepository",
            return_value=mock_repo,
        ):
            seeder = KeywordSeeder(mock_session, keyword_sets=(GADGETS, PETS))
            first = await seeder.seed()
            first_calls = list(mock_repo.upsert_keyword.await_args_list)
            mock_repo.upsert_keyword.reset_mock()
            second = await seeder.seed()

        assert first.inserted == second.inserted
        assert mock_repo.upsert_keyword.await_args_list == first_calls
