# app/comments/repository.py
from __future__ import annotations

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.comments.models import Comment


async def create_comment(
    db: AsyncSession,
    *,
    video_id: int,
    user_id: int,
    text: str,
) -> Comment:
    c = Comment(video_id=video_id, user_id=user_id, text=text)
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


async def list_comments_for_video(db: AsyncSession, video_id: int) -> List[Comment]:
    # más recientes primero (y por id para desempatar)
    res = await db.execute(
        select(Comment)
        .where(Comment.video_id == video_id)
        .order_by(Comment.timestamp.desc(), Comment.id.desc())
    )
    return list(res.scalars())
