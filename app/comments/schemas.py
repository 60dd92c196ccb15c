# app/comments/schemas.py
from pydantic import BaseModel, Field
from datetime import datetime


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1)


class CommentOut(BaseModel):
    id: int
    video_id: int
    user_id: int
    text: str
    timestamp: datetime

    class Config:
        from_attributes = True
