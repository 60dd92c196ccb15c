import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base import Base

# 👇 importa todos los modelos que deben existir en la DB
from app.users.models import User  # noqa: F401
from app.videos.models import Video  # noqa: F401
from app.comments.models import Comment  # noqa: F401

log = logging.getLogger("uvicorn")


async def init_models(engine: AsyncEngine) -> None:
    """
    Crea/verifica todas las tablas declaradas en Base.metadata
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("✅ DB init: tablas creadas/verificadas.")
