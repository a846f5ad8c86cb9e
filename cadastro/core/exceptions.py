# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Optional
from fastapi import status

"""
Erros de aplicação com semântica HTTP.


- `ApplicationError` carrega mensagem + status; renderizado como `{"Erro": mensagem}` em `main.py`.
- `ValidationError` (400) para campo obrigatório ausente.
- `NotFoundError` (404) para recurso/pai inexistente.
"""


class ApplicationError(Exception):
    """Erro base da aplicação."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.message = message


class ValidationError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
