# app/users/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import JSON, String, Integer, DateTime, func
from app.db.base import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(50), nullable=False)

    # ids de usuarios; se guardan pero ningún endpoint los modifica
    followers: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    following: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())
