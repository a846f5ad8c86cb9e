# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import bcrypt
from cadastro.core.config import settings

"""
Hash e verificação de senhas (bcrypt).


- `hash_password(plain)` gera hash salgado com custo `settings.BCRYPT_ROUNDS` (padrão 12).
- `verify_password(plain, hashed)` nunca levanta exceção: hash malformado conta como falha.
- bcrypt só considera os primeiros 72 bytes; senhas maiores são recusadas antes (`SENHA_MAX_BYTES`).
"""

SENHA_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Gera o hash bcrypt da senha em texto puro."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Confere a senha contra o hash armazenado."""
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
