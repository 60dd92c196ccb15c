# app/db/session.py
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def build_engine(db_url: str) -> AsyncEngine:
    """
    Crea el engine async. Se llama desde el lifespan de la app,
    nunca al importar el módulo.
    """
    kwargs: dict = {"pool_pre_ping": True}

    # Timeouts cortos: si la DB no responde → falla rápido (5s)
    if db_url.startswith("postgresql+psycopg"):
        kwargs["connect_args"] = {"connect_timeout": 5}
    elif db_url.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {
            "timeout": 5,
            "server_settings": {"client_encoding": "UTF8"},
        }

    if not db_url.startswith("sqlite"):
        kwargs.update(pool_recycle=300, pool_size=5, max_overflow=10)

    engine = create_async_engine(db_url, **kwargs)

    if db_url.startswith("sqlite"):
        # SQLite no aplica FKs si no se pide por conexión
        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_fk_on(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

    return engine


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    sessionmaker = request.app.state.sessionmaker
    async with sessionmaker() as session:
        yield session
