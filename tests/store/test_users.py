"""Tests for UserStore login upserts."""

import pytest

from market_dashboard.db.models import Role, UserUpsert
from market_dashboard.utils import utcnow


@pytest.mark.asyncio
class TestUserStore:
    """Insert-or-update keyed on the identity provider subject."""

    async def test_first_login_defaults_to_user_role(self, user_store):
        """New users get role=user."""
        user = await user_store.upsert(UserUpsert(id="sub-1", email="a@example.com", first_name="Ada"))

        assert user.role == "user"
        assert user.first_name == "Ada"
        assert (await user_store.get("sub-1")).email == "a@example.com"

    async def test_get_absent(self, user_store):
        """Unknown subject is None, not an error."""
        assert await user_store.get("nobody") is None

    async def test_relogin_refreshes_profile(self, user_store):
        """Claims are replaced and updated_at moves forward."""
        first = await user_store.upsert(UserUpsert(id="sub-1", email="a@example.com"))
        before = utcnow()

        second = await user_store.upsert(UserUpsert(id="sub-1", email="new@example.com"))

        assert second.email == "new@example.com"
        assert second.created_at == first.created_at
        assert second.updated_at >= before
        assert len(await user_store.list_users()) == 1

    async def test_login_without_role_keeps_admin(self, user_store):
        """A plain login upsert never demotes an admin."""
        await user_store.upsert(UserUpsert(id="sub-1", role=Role.ADMIN))

        user = await user_store.upsert(UserUpsert(id="sub-1", email="a@example.com"))

        assert user.role == "admin"

    async def test_explicit_role_is_applied(self, user_store):
        """Supplying a role changes it."""
        await user_store.upsert(UserUpsert(id="sub-1", role=Role.ADMIN))

        user = await user_store.upsert(UserUpsert(id="sub-1", role=Role.USER))

        assert user.role == "user"

    async def test_list_users(self, user_store):
        """Every stored user is listed, oldest first."""
        await user_store.upsert(UserUpsert(id="sub-1"))
        await user_store.upsert(UserUpsert(id="sub-2"))

        assert [u.id for u in await user_store.list_users()] == ["sub-1", "sub-2"]
