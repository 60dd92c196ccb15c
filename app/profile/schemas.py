# app/profile/schemas.py
from typing import List
from pydantic import BaseModel

from app.users.schemas import UserOut
from app.videos.schemas import VideoOut

class ProfileOut(BaseModel):
    user: UserOut
    videos: List[VideoOut] = []
