"""Tests for FavoritesLedger."""

import pytest

from market_dashboard.db.models import UserUpsert


@pytest.fixture
async def user_id(user_store):
    user = await user_store.upsert(UserUpsert(id="sub-1", email="trader@example.com"))
    return user.id


@pytest.mark.asyncio
class TestFavoritesLedger:
    """Add/list/remove keyed on the (user, item_type, item_id) triple."""

    async def test_add_and_list_newest_first(self, favorites, user_id):
        """List is ordered by creation time descending."""
        await favorites.add(user_id, "stock", "AAPL")
        await favorites.add(user_id, "currency", "EUR/USD")
        await favorites.add(user_id, "news", "3")

        listed = await favorites.list(user_id)
        assert [(f.item_type, f.item_id) for f in listed] == [
            ("news", "3"),
            ("currency", "EUR/USD"),
            ("stock", "AAPL"),
        ]
        assert all(f.user_id == user_id for f in listed)

    async def test_add_then_remove_restores_list(self, favorites, user_id):
        """add + remove round trip leaves the list as it was, twice over."""
        await favorites.add(user_id, "stock", "MSFT")
        before = [f.id for f in await favorites.list(user_id)]

        for _ in range(2):
            await favorites.add(user_id, "stock", "AAPL")
            await favorites.remove(user_id, "stock", "AAPL")
            assert [f.id for f in await favorites.list(user_id)] == before

    async def test_remove_nonexistent_triple(self, favorites, user_id):
        """Removing nothing is not an error and changes nothing."""
        await favorites.add(user_id, "stock", "AAPL")
        before = await favorites.list(user_id)

        removed = await favorites.remove(user_id, "stock", "TSLA")

        assert removed == 0
        assert [f.id for f in await favorites.list(user_id)] == [f.id for f in before]

    async def test_remove_matches_full_triple_only(self, favorites, user_id, user_store):
        """Same item for another user, or another item type, is untouched."""
        other = await user_store.upsert(UserUpsert(id="sub-2"))
        await favorites.add(user_id, "stock", "AAPL")
        await favorites.add(user_id, "news", "AAPL")
        await favorites.add(other.id, "stock", "AAPL")

        await favorites.remove(user_id, "stock", "AAPL")

        assert [(f.item_type, f.item_id) for f in await favorites.list(user_id)] == [("news", "AAPL")]
        assert len(await favorites.list(other.id)) == 1

    async def test_duplicate_adds_are_kept_and_removed_together(self, favorites, user_id):
        """Duplicates are not prevented on insert; remove deletes all of them.

        Current behavior: the ledger has no uniqueness constraint on the triple.
        """
        first = await favorites.add(user_id, "stock", "AAPL")
        second = await favorites.add(user_id, "stock", "AAPL")

        assert first.id != second.id
        assert len(await favorites.list(user_id)) == 2

        removed = await favorites.remove(user_id, "stock", "AAPL")

        assert removed == 2
        assert await favorites.list(user_id) == []
