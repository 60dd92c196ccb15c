# app/users/router.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.deps import get_app_settings
from app.core.errors import ConflictError, UnauthenticatedError
from app.db.session import get_session
from app.users.schemas import UserCreate, UserLogin, TokenOut
from app.users import service as svc

log = logging.getLogger("uvicorn")

router = APIRouter(tags=["users"])

@router.post("/register", response_model=TokenOut)
async def register(
    payload: UserCreate,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    try:
        token = await svc.register_user(db, payload, settings)
        await db.commit()
        return {"token": token}
    except ConflictError as e:
        await db.rollback()
        log.debug("registro rechazado: email duplicado")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception:
        await db.rollback()
        log.exception("register falló")
        raise HTTPException(status_code=500, detail="internal error")

@router.post("/login", response_model=TokenOut)
async def login(
    payload: UserLogin,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    try:
        token = await svc.login_user(db, payload.email, payload.password, settings)
        return {"token": token}
    except UnauthenticatedError:
        raise HTTPException(status_code=401, detail="invalid credentials")
    except Exception:
        log.exception("login falló")
        raise HTTPException(status_code=500, detail="internal error")
