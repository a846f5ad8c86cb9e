# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from cadastro.db.models import TIPO_PADRAO_ID

"""
Schemas (DTOs) de entrada/saída do cadastro.


- Entrada (`*In`): só ids das tabelas de apoio; objetos de tipo enviados pelo cliente são ignorados.
- Saída (`*Out`): pai embute filhos, filhos expõem apenas `pessoa_id` (sem referência cíclica).
- `UsuarioOut` nunca devolve o hash da senha.
"""

TipoPessoa = Literal["fisica", "juridica"]


# Tabelas de apoio
class TipoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str

class PerfilOut(TipoOut):
    descricao: Optional[str] = None


# Schemas TelefoneIn/EmailIn/EnderecoIn/UsuarioIn/PessoaIn
class TelefoneIn(BaseModel):
    numero: str = Field(..., min_length=1, max_length=30)
    tipo_telefone_id: int = TIPO_PADRAO_ID

class EmailIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=200)
    tipo_email_id: int = TIPO_PADRAO_ID

class EnderecoIn(BaseModel):
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    tipo_endereco_id: int = TIPO_PADRAO_ID

class UsuarioIn(BaseModel):
    login: Optional[str] = Field(None, max_length=100)
    senha: Optional[str] = None
    ativo: bool = True
    perfil_id: Optional[int] = None

class PessoaIn(BaseModel):
    nome: Optional[str] = None
    idade: Optional[int] = Field(None, ge=0)
    documento: Optional[str] = None
    tipo_pessoa: TipoPessoa = "fisica"
    telefones: List[TelefoneIn] = Field(default_factory=list)
    emails: List[EmailIn] = Field(default_factory=list)
    endereco: Optional[EnderecoIn] = None
    usuario: Optional[UsuarioIn] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "nome": "Maria Silva",
                "idade": 34,
                "documento": "123.456.789-00",
                "tipo_pessoa": "fisica",
                "telefones": [{"numero": "+55 11 99999-0000", "tipo_telefone_id": 2}],
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
        }
    }


# Schemas TelefoneOut/EmailOut/EnderecoOut/UsuarioOut/PessoaOut
class TelefoneOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    numero: str
    tipo_telefone_id: int
    pessoa_id: int
    tipo_telefone: Optional[TipoOut] = None

class EmailOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    tipo_email_id: int
    pessoa_id: int
    tipo_email: Optional[TipoOut] = None

class EnderecoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    tipo_endereco_id: int
    pessoa_id: int
    tipo_endereco: Optional[TipoOut] = None

class UsuarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    login: str
    ativo: bool
    criado_em: datetime
    ultimo_acesso: Optional[datetime] = None
    perfil_id: Optional[int] = None
    pessoa_id: int
    perfil: Optional[PerfilOut] = None

class PessoaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    idade: Optional[int] = None
    documento: Optional[str] = None
    tipo_pessoa: TipoPessoa
    telefones: List[TelefoneOut] = Field(default_factory=list)
    emails: List[EmailOut] = Field(default_factory=list)
    endereco: Optional[EnderecoOut] = None
    usuario: Optional[UsuarioOut] = None
