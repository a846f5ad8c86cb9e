# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv

"""
Central de configurações (Settings) do Cadastro.


- Carrega variáveis do .env (app/env/db/log/cors/bcrypt/jwt).
- Fornece defaults seguros e tipados via dataclass.
- Expõe `settings` como singleton para uso em toda a app.
"""

load_dotenv()

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Cadastro de Pessoas")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    API_PREFIX: str = os.getenv("API_PREFIX", "")


    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./pessoas.db")
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

    CORS_ORIGINS: tuple[str, ...] = tuple(
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()
    )

    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # JWT: apenas declarado, nenhuma rota exige autenticação ainda.
    JWT_KEY: str = os.getenv("JWT_KEY", "")
    JWT_ISSUER: str = os.getenv("JWT_ISSUER", "cadastro")
    JWT_AUDIENCE: str = os.getenv("JWT_AUDIENCE", "cadastro")
    JWT_EXPIRES_MINUTES: int = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

settings = Settings()
