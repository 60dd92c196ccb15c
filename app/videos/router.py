# app/videos/router.py
import logging
from typing import List

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    UploadFile,
    File,
    Form,
)
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.deps import get_app_settings, get_current_user
from app.core.errors import NotFoundError
from app.db.session import get_session
from app.users.models import User
from app.videos.schemas import VideoOut
from app.videos import service as svc

log = logging.getLogger("uvicorn")

router = APIRouter(tags=["videos"])


@router.get("/videos", response_model=List[VideoOut])
async def list_feed(db: AsyncSession = Depends(get_session)):
    """Feed principal: más recientes primero."""
    return await svc.feed(db)


@router.get("/recommended", response_model=List[VideoOut])
async def list_recommended(
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    """Top por recommendation_score (desc)."""
    return await svc.recommended(db, settings.RECOMMENDED_LIMIT)


async def _publish(
    db: AsyncSession,
    settings: Settings,
    user: User,
    file: UploadFile,
    caption: str | None,
):
    try:
        video = await svc.publish_video(
            db, settings, user_id=user.id, file=file, caption=caption
        )
        await db.commit()
        return video
    except Exception:
        await db.rollback()
        log.exception("upload falló (user=%s)", user.id)
        raise HTTPException(status_code=500, detail="internal error")


@router.post("/videos", response_model=VideoOut)
async def upload_video(
    video: UploadFile = File(...),
    caption: str | None = Form(None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    return await _publish(db, settings, user, video, caption)


@router.post("/duets", response_model=VideoOut)
async def upload_duet(
    video: UploadFile = File(...),
    caption: str | None = Form(None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    return await _publish(
        db, settings, user, video, svc.duet_caption(caption, settings.DUET_SUFFIX)
    )


@router.post("/videos/{video_id}/like", response_model=VideoOut)
async def like(
    video_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    try:
        video = await svc.like_video(db, video_id)
        await db.commit()
        return video
    except NotFoundError:
        await db.rollback()
        raise HTTPException(status_code=404, detail="video not found")
    except Exception:
        await db.rollback()
        log.exception("like falló (video=%s)", video_id)
        raise HTTPException(status_code=500, detail="internal error")
