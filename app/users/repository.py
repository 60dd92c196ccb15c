# app/users/repository.py
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import ConflictError
from app.users.models import User

async def get_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()

async def get_by_id(db: AsyncSession, user_id: int) -> User | None:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()

async def create_user(db: AsyncSession, email: str, hashed_password: str, username: str) -> User:
    if await get_by_email(db, email):
        raise ConflictError("email already exists")

    user = User(email=email, hashed_password=hashed_password, username=username)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # otra request registró el mismo email entre el select y el insert
        raise ConflictError("email already exists")
    await db.refresh(user)
    return user
