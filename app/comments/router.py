#app/comments/router.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user
from app.core.errors import NotFoundError
from app.db.session import get_session
from app.comments.schemas import CommentOut, CommentCreate
from app.comments import repository as repo
from app.users.models import User
from app.videos.service import require_video

log = logging.getLogger("uvicorn")

router = APIRouter(tags=["comments"])


@router.get("/videos/{video_id}/comments", response_model=List[CommentOut])
async def comments_for_video(
    video_id: int,
    db: AsyncSession = Depends(get_session),
):
    return await repo.list_comments_for_video(db, video_id)


@router.post("/videos/{video_id}/comments", response_model=CommentOut)
async def create_comment_endpoint(
    video_id: int,
    payload: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    try:
        await require_video(db, video_id)
        c = await repo.create_comment(
            db,
            video_id=video_id,
            user_id=user.id,
            text=payload.text,
        )
        await db.commit()
        return c
    except NotFoundError:
        await db.rollback()
        raise HTTPException(status_code=404, detail="video not found")
    except Exception:
        await db.rollback()
        log.exception("comentario falló (video=%s)", video_id)
        raise HTTPException(status_code=500, detail="internal error")
