# app/videos/schemas.py
from pydantic import BaseModel
from datetime import datetime


class VideoOut(BaseModel):
    id: int
    user_id: int
    url: str                # locator público, p.ej. /videos/xxx.mp4
    caption: str | None
    likes: int
    views: int
    recommendation_score: float
    timestamp: datetime

    class Config:
        from_attributes = True
