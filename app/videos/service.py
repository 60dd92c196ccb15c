# app/videos/service.py
from __future__ import annotations

import logging

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import NotFoundError
from app.media.storage import save_upload
from app.videos.models import Video
from app.videos import repository as repo

log = logging.getLogger("uvicorn")


def duet_caption(caption: str | None, suffix: str) -> str:
    """
    Un duet es un upload normal con el sufijo pegado al caption.
    Sin caption queda solo el marcador.
    """
    if not caption:
        return suffix.strip()
    return f"{caption}{suffix}"


async def publish_video(
    db: AsyncSession,
    settings: Settings,
    *,
    user_id: int,
    file: UploadFile,
    caption: str | None,
) -> Video:
    # primero el archivo, luego la fila; si el insert falla queda el archivo huérfano
    url = save_upload(file, settings.VIDEOS_DIR, settings.VIDEOS_URL_PREFIX)
    video = await repo.create_video(db, user_id=user_id, url=url, caption=caption)
    log.info("🎬 video %s subido por user=%s → %s", video.id, user_id, url)
    return video


async def feed(db: AsyncSession) -> list[Video]:
    return await repo.list_videos(db, order_by="timestamp")


async def recommended(db: AsyncSession, limit: int) -> list[Video]:
    return await repo.list_videos(db, order_by="score", limit=limit)


async def like_video(db: AsyncSession, video_id: int) -> Video:
    return await repo.increment_like(db, video_id)


async def require_video(db: AsyncSession, video_id: int) -> Video:
    video = await repo.get_video(db, video_id)
    if not video:
        raise NotFoundError("video not found")
    return video
