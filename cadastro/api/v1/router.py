# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from cadastro.api.v1 import pessoas
from cadastro.api.v1 import health

"""
Roteador principal da API v1.


- Agrega e inclui sub-routers (pessoas, health).
- Importado por `main.py` sob `settings.API_PREFIX` (vazio por padrão: `/pessoa`, `/pessoas`).
"""

router_v1 = APIRouter()

# Sub-rotas
router_v1.include_router(pessoas.router, prefix="", tags=["pessoas"])
router_v1.include_router(health.router,  prefix="")
