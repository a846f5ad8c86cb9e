# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from sqlalchemy.orm import DeclarativeBase

"""
Base declarativa do ORM.


- Todos os modelos de `cadastro.db.models` herdam de `Base`.
- `Base.metadata` é usado por `init_db` para criar o schema.
"""


class Base(DeclarativeBase):
    pass
