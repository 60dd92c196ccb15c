# app/profile/router.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.db.session import get_session
from app.profile.schemas import ProfileOut
from app.profile.service import get_profile

router = APIRouter(prefix="/profile", tags=["profile"])


# ---------------------------
# GET /profile/{user_id}
# ---------------------------
@router.get("/{user_id}", response_model=ProfileOut)
async def user_profile(
    user_id: int,
    db: AsyncSession = Depends(get_session),
):
    try:
        return await get_profile(db, user_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="user not found")
