"""Admin routes."""
from fastapi import APIRouter

from market_dashboard.db.models import User
from market_dashboard.deps import AdminUser, UsersServiceDep

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=list[User])
async def list_users(_admin: AdminUser, users: UsersServiceDep) -> list[User]:
    """All known users, oldest first."""
    return await users.list_users()
