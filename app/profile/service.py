# app/profile/service.py
from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import NotFoundError
from app.users.repository import get_by_id
from app.videos.repository import list_videos_by_user

async def get_profile(db: AsyncSession, user_id: int) -> dict:
    """
    Usuario + sus videos. NotFoundError si el usuario no existe.
    """
    user = await get_by_id(db, user_id)
    if not user:
        raise NotFoundError("user not found")

    videos = await list_videos_by_user(db, user_id)
    return {"user": user, "videos": videos}
