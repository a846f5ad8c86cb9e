# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from time import perf_counter
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from cadastro.api.deps import get_db
from cadastro.core.config import settings

"""
Diagnóstico do serviço e do banco de dados.


- `GET /health` status do processo e ambiente.
- `GET /health/db` verifica conectividade e mede latência.
- Retorna versão do SQLite e contagem de pessoas; trata erros com 503.
"""

router = APIRouter(tags=["Health"])

@router.get("/health")
def health():
    return {"status": "ok", "env": settings.APP_ENV}


@router.get("/health/db")
async def health_db(db: AsyncSession = Depends(get_db)):
    """
    Verifica conexão com o banco e retorna alguns metadados úteis.
    """
    try:
        t0 = perf_counter()
        version = (await db.execute(text("SELECT sqlite_version()"))).scalar_one()
        pessoa_count = (await db.execute(text("SELECT COUNT(*) FROM pessoa"))).scalar_one()
        latency_ms = (perf_counter() - t0) * 1000.0

        return {
            "db": "ok",
            "latency_ms": round(latency_ms, 2),
            "sqlite_version": version,
            "pessoa_count": pessoa_count,
        }
    except Exception as e:
        raise HTTPException(
            status_code=503,
            detail={"db": "error", "type": e.__class__.__name__, "message": str(e)},
        )
