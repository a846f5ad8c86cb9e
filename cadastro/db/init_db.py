# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Dict, List, Type
import logging
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from cadastro.db.base import Base
from cadastro.db.models import Perfil, TipoEmail, TipoEndereco, TipoTelefone
from cadastro.db.session import build_sessionmaker

"""
Inicialização do banco (schema + tabelas de apoio).


- `init_db(engine)` cria o schema se faltar e semeia cada tabela de apoio vazia.
- Idempotente: tabela já populada não é tocada, então pode rodar a cada startup.
- Retorna quantas linhas foram inseridas por tabela (0 quando já existiam).
"""

log = logging.getLogger("cadastro.db")

TIPOS_ENDERECO = [
    "Outro", "Casa", "Apartamento", "Condomínio", "Sítio",
    "Fazenda", "Chácara", "Kitnet", "Sobrado",
]

TIPOS_TELEFONE = ["Outro", "Celular", "Fixo", "Comercial", "Residencial", "Recado"]

TIPOS_EMAIL = ["Outro", "Pessoal", "Profissional", "Institucional", "Suporte", "Financeiro"]

PERFIS = [
    ("Super", "Acesso irrestrito a todo o sistema"),
    ("Admin", "Administra usuários e configurações"),
    ("Manager", "Gerencia cadastros e equipes"),
    ("User", "Usuário padrão com acesso ao próprio cadastro"),
    ("Viewer", "Somente leitura"),
    ("Support", "Atendimento e suporte aos usuários"),
]

SEMENTES: List[tuple[Type[Base], List[Dict[str, Any]]]] = [
    (TipoEndereco, [{"nome": n} for n in TIPOS_ENDERECO]),
    (TipoTelefone, [{"nome": n} for n in TIPOS_TELEFONE]),
    (TipoEmail, [{"nome": n} for n in TIPOS_EMAIL]),
    (Perfil, [{"nome": n, "descricao": d} for n, d in PERFIS]),
]


async def _seed_table(db: AsyncSession, model: Type[Base], rows: List[Dict[str, Any]]) -> int:
    count = (await db.execute(select(func.count()).select_from(model))).scalar_one()
    if count:
        return 0
    db.add_all([model(**row) for row in rows])
    return len(rows)


async def init_db(engine: AsyncEngine) -> Dict[str, int]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    inserted: Dict[str, int] = {}
    async with build_sessionmaker(engine)() as db:
        for model, rows in SEMENTES:
            inserted[model.__tablename__] = await _seed_table(db, model, rows)
        await db.commit()

    for table, n in inserted.items():
        if n:
            log.info("Tabela %s semeada com %d registros", table, n)
    return inserted
