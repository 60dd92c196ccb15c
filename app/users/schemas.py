# app/users/schemas.py
from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    username: str = Field(..., min_length=1, max_length=50)

class UserLogin(BaseModel):
    email: EmailStr  # misma normalización que en el registro
    password: str

class TokenOut(BaseModel):
    token: str

class UserOut(BaseModel):
    id: int
    email: str
    username: str
    followers: list[int] = []
    following: list[int] = []

    class Config:
        from_attributes = True
