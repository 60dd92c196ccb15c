# app/users/service.py
from __future__ import annotations
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import UnauthenticatedError
from app.core.security import hash_password, create_access_token, verify_password
from app.users.models import User
from app.users.repository import get_by_email, create_user
from app.users.schemas import UserCreate

log = logging.getLogger("uvicorn")

def issue_token(user: User, settings: Settings) -> str:
    return create_access_token(
        sub=str(user.id),
        secret=settings.SECRET_KEY,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MIN,
    )

async def register_user(db: AsyncSession, data: UserCreate, settings: Settings) -> str:
    hashed = hash_password(data.password)
    user = await create_user(db, data.email, hashed, data.username)
    log.info("👤 usuario registrado id=%s", user.id)

    # El commit lo hace el router
    return issue_token(user, settings)

async def authenticate_user(db: AsyncSession, email: str, password: str) -> User | None:
    user = await get_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user

async def login_user(db: AsyncSession, email: str, password: str, settings: Settings) -> str:
    user = await authenticate_user(db, email, password)
    if not user:
        # mismo error para email desconocido y password incorrecta
        raise UnauthenticatedError("invalid credentials")
    return issue_token(user, settings)
