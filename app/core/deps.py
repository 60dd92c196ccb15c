# app/core/deps.py
import logging

from fastapi import Depends, Header, HTTPException, Request, status
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import UnauthenticatedError
from app.core.security import decode_access_token
from app.db.session import get_session
from app.users.models import User
from app.users.repository import get_by_id

log = logging.getLogger("uvicorn")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _extract_token(authorization: str | None) -> str:
    """
    Authorization: Bearer <token> → <token>.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        raise UnauthenticatedError("missing token")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise UnauthenticatedError("missing token")
    return token


async def resolve_user(db: AsyncSession, token: str, secret: str) -> User:
    try:
        user_id = int(decode_access_token(token, secret))
    except (JWTError, ValueError):
        raise UnauthenticatedError("invalid token")

    user = await get_by_id(db, user_id)
    if not user:
        # token válido pero el usuario ya no existe
        raise UnauthenticatedError("invalid token")
    return user


async def get_current_user(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> User:
    try:
        token = _extract_token(authorization)
        return await resolve_user(db, token, settings.SECRET_KEY)
    except UnauthenticatedError as e:
        log.debug("auth rechazada: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
