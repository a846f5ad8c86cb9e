# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import AsyncGenerator, Callable
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from cadastro.db.session import SessionLocal

"""
Dependências reutilizáveis da API.


- `session_dependency(factory)` monta a dependência de sessão sobre qualquer sessionmaker.
- Falha no handler faz rollback explícito antes de propagar: cada requisição é tudo-ou-nada.
- `get_db()` é a dependência padrão, ligada ao `SessionLocal` do app.
"""

def session_dependency(
    factory: async_sessionmaker[AsyncSession],
) -> Callable[[], AsyncGenerator[AsyncSession, None]]:
    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    return _session


get_db = session_dependency(SessionLocal)
