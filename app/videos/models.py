# app/videos/models.py
from datetime import datetime, timezone

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    Integer,
    Float,
    DateTime,
    ForeignKey,
)
from sqlalchemy.types import UnicodeText
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Video(Base):
    __tablename__ = "videos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    # locator público (p.ej. "/videos/1718000000000-ab12cd34.mp4")
    url: Mapped[str] = mapped_column(String(255), nullable=False)
    caption: Mapped[str | None] = mapped_column(UnicodeText, nullable=True)

    likes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # derivado de likes/views (ver app.videos.ranking), nunca lo manda el cliente
    recommendation_score: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False, index=True
    )

    # con microsegundos y desde Python: el orden del feed depende de esto
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )
