"""Identity routes.

Authentication itself happens at the external identity provider. Its login
callback posts the verified claims to /auth/login so the user row exists
before the subject is presented in the identity header.
"""
from fastapi import APIRouter

from market_dashboard.db.models import User
from market_dashboard.deps import CurrentUser, UsersServiceDep
from market_dashboard.schemas import LoginClaims

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=User)
async def login(claims: LoginClaims, users: UsersServiceDep) -> User:
    """Create or refresh the user for a successful external login."""
    return await users.login(claims)


@router.get("/user", response_model=User)
async def get_auth_user(user: CurrentUser) -> User:
    return user
