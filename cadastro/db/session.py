# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Any
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from cadastro.core.config import settings

"""
Sessão assíncrona do SQLite via SQLAlchemy 2.0 (driver aiosqlite).


- Garante URL `sqlite+aiosqlite://`.
- `build_engine()` cria o engine async e liga `PRAGMA foreign_keys=ON` em cada conexão.
- Expõe `engine` e `SessionLocal` (async_sessionmaker) para injeção via deps.
"""

SQLITE_PREFIX = "sqlite+aiosqlite://"

if not settings.DATABASE_URL.startswith(SQLITE_PREFIX):
    raise RuntimeError("DATABASE_URL deve usar o prefixo 'sqlite+aiosqlite://' para driver assíncrono.")


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Engine async com chaves estrangeiras ativas no SQLite."""
    new_engine = create_async_engine(url, echo=settings.DB_ECHO, future=True, **kwargs)
    event.listen(new_engine.sync_engine, "connect", _enable_foreign_keys)
    return new_engine


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_sessionmaker(engine)
