"""Pytest configuration and shared fixtures."""

import asyncio
import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from cadastro.api.deps import get_db, session_dependency
from cadastro.db.init_db import init_db
from cadastro.db.session import build_engine, build_sessionmaker
from cadastro.main import start_server


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh SQLite file per test.

    NullPool keeps connections from outliving the event loop that opened them,
    since TestClient and the helpers below each run their own loop.
    """
    return build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def client(engine, session_factory):
    """TestClient wired to the per-test database, already seeded."""
    asyncio.run(init_db(engine))

    start_server.dependency_overrides[get_db] = session_dependency(session_factory)
    yield TestClient(start_server)
    start_server.dependency_overrides = {}


@pytest.fixture
def scalars(session_factory):
    """Run a select against the test database and return its scalars as a list."""

    def _run(stmt):
        async def _go():
            async with session_factory() as session:
                return list((await session.execute(stmt)).scalars().all())

        return asyncio.run(_go())

    return _run


@pytest.fixture
def pessoa_completa() -> dict:
    return {
        "nome": "Maria Silva",
        "idade": 34,
        "documento": "123.456.789-00",
        "tipo_pessoa": "fisica",
        "telefones": [
            {"numero": "+55 11 99999-0000", "tipo_telefone_id": 2},
            {"numero": "+55 11 3333-0000", "tipo_telefone_id": 3},
        ],
        "emails": [{"email": "maria@exemplo.com", "tipo_email_id": 2}],
        "endereco": {
            "logradouro": "Rua das Flores",
            "numero": "100",
            "cidade": "São Paulo",
            "estado": "SP",
            "cep": "01000-000",
            "tipo_endereco_id": 2,
        },
        "usuario": {"login": "maria", "senha": "s3nh4-forte", "perfil_id": 4},
    }
