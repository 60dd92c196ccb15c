# app/videos/repository.py
from typing import Literal

from sqlalchemy import select, update, desc, asc
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.videos.models import Video
from app.videos.ranking import recommendation_score

VideoOrder = Literal["timestamp", "score"]


async def create_video(
    db: AsyncSession,
    user_id: int,
    url: str,
    caption: str | None,
) -> Video:
    video = Video(
        user_id=user_id,
        url=url,
        caption=caption,
        likes=0,
        views=0,
        recommendation_score=recommendation_score(0, 0),
    )
    db.add(video)
    await db.flush()
    await db.refresh(video)
    return video


async def list_videos(
    db: AsyncSession,
    order_by: VideoOrder = "timestamp",
    limit: int | None = None,
) -> list[Video]:
    q = select(Video)
    if order_by == "score":
        # empates: orden de inserción
        q = q.order_by(desc(Video.recommendation_score), asc(Video.id))
    elif order_by == "timestamp":
        q = q.order_by(desc(Video.timestamp), desc(Video.id))
    else:
        raise ValueError(f"unknown order: {order_by!r}")
    if limit is not None:
        q = q.limit(limit)
    res = await db.execute(q)
    return list(res.scalars())


async def list_videos_by_user(db: AsyncSession, user_id: int) -> list[Video]:
    res = await db.execute(
        select(Video).where(Video.user_id == user_id).order_by(Video.id)
    )
    return list(res.scalars())


async def get_video(db: AsyncSession, video_id: int) -> Video | None:
    res = await db.execute(select(Video).where(Video.id == video_id))
    return res.scalar_one_or_none()


async def increment_like(db: AsyncSession, video_id: int) -> Video:
    """
    Suma un like y recalcula el score en un único UPDATE.
    Los valores de la derecha se leen de la fila antes del update,
    así dos likes concurrentes no se pisan.
    """
    res = await db.execute(
        update(Video)
        .where(Video.id == video_id)
        .values(
            likes=Video.likes + 1,
            recommendation_score=recommendation_score(Video.likes + 1, Video.views),
        )
        .execution_options(synchronize_session=False)
    )
    if res.rowcount == 0:
        raise NotFoundError("video not found")

    await db.flush()
    video = await db.get(Video, video_id, populate_existing=True)
    if video is None:
        raise NotFoundError("video not found")
    return video
