# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from cadastro.core.config import settings
from cadastro.core.exceptions import ApplicationError
from cadastro.api.v1.router import router_v1
from cadastro.db.init_db import init_db
from cadastro.db.session import engine

"""
Cadastro de Pessoas – FastAPI entrypoint.

- Configura logging conforme settings (LOG_LEVEL).
- No startup cria o schema e semeia as tabelas de apoio antes de aceitar requisições.
- Monta as rotas sob `settings.API_PREFIX` e renderiza `ApplicationError` como `{"Erro": ...}`.
- Configura CORS conforme settings (origens, headers, métodos).
"""

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger("cadastro")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await init_db(engine)
    log.info("Banco inicializado em %s", settings.DATABASE_URL)
    yield
    await engine.dispose()


start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

start_server.include_router(router_v1, prefix=settings.API_PREFIX)


@start_server.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    return JSONResponse(status_code=exc.status_code, content={"Erro": exc.message})


origins = list(settings.CORS_ORIGINS)

if not origins:
    origins = ["http://localhost:5173", "http://127.0.0.1:5173"]

start_server.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

log.info("CORS habilitado para: %s", origins)

@start_server.get("/", response_class=PlainTextResponse, include_in_schema=False)
def hello():
    return "Hello World!"


def run() -> None:
    import uvicorn

    uvicorn.run("cadastro.main:start_server", host=settings.HOST, port=settings.PORT)
