# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from cadastro.api.deps import get_db
from cadastro.db.models import Email, Endereco, Pessoa, Telefone
from cadastro.schemas.pessoa import (
    EmailIn,
    EmailOut,
    EnderecoIn,
    EnderecoOut,
    PessoaIn,
    PessoaOut,
    TelefoneIn,
    TelefoneOut,
)
from cadastro.services import pessoa_service

"""
Endpoints de pessoas.


- `POST /pessoa` cria pessoa com telefones/emails/endereço/usuário aninhados (201 + Location).
- `GET /pessoas` lista todas as pessoas com relações expandidas.
- `GET /pessoa/{pessoa_id}` detalhe (404 `{"Erro": "Pessoa não encontrada."}`).
- `POST /pessoa/{pessoa_id}/telefones` e `/emails` anexam a uma pessoa existente.
- `PUT|POST /pessoa/{pessoa_id}/endereco` upsert do endereço (um por pessoa).
"""

router = APIRouter()

_ERRO_EXEMPLO = {"content": {"application/json": {"example": {"Erro": "Pessoa não encontrada."}}}}


@router.post(
    "/pessoa",
    response_model=PessoaOut,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar pessoa (com filhos aninhados)",
    responses={400: {"description": "Nome ou senha do usuário em branco"}},
)
async def create_pessoa(
    payload: PessoaIn,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> Pessoa:
    pessoa = await pessoa_service.create_pessoa(db, payload)
    response.headers["Location"] = f"/pessoa/{pessoa.id}"
    return pessoa


@router.get("/pessoas", response_model=List[PessoaOut], summary="Listar pessoas")
async def list_pessoas(db: AsyncSession = Depends(get_db)) -> List[Pessoa]:
    return await pessoa_service.list_pessoas(db)


@router.get(
    "/pessoa/{pessoa_id}",
    response_model=PessoaOut,
    summary="Detalhar uma pessoa por id",
    responses={404: _ERRO_EXEMPLO},
)
async def get_pessoa(
    pessoa_id: int = Path(..., description="Id da pessoa"),
    db: AsyncSession = Depends(get_db),
) -> Pessoa:
    return await pessoa_service.get_pessoa_or_404(db, pessoa_id)


@router.post(
    "/pessoa/{pessoa_id}/telefones",
    response_model=TelefoneOut,
    status_code=status.HTTP_201_CREATED,
    summary="Adicionar telefone a uma pessoa",
    responses={404: _ERRO_EXEMPLO},
)
async def add_telefone(
    payload: TelefoneIn,
    pessoa_id: int = Path(..., description="Id da pessoa"),
    db: AsyncSession = Depends(get_db),
) -> Telefone:
    return await pessoa_service.add_telefone(db, pessoa_id, payload)


@router.post(
    "/pessoa/{pessoa_id}/emails",
    response_model=EmailOut,
    status_code=status.HTTP_201_CREATED,
    summary="Adicionar email a uma pessoa",
    responses={404: _ERRO_EXEMPLO},
)
async def add_email(
    payload: EmailIn,
    pessoa_id: int = Path(..., description="Id da pessoa"),
    db: AsyncSession = Depends(get_db),
) -> Email:
    return await pessoa_service.add_email(db, pessoa_id, payload)


@router.api_route(
    "/pessoa/{pessoa_id}/endereco",
    methods=["PUT", "POST"],
    response_model=EnderecoOut,
    summary="Criar ou atualizar o endereço da pessoa",
    responses={404: _ERRO_EXEMPLO},
)
async def upsert_endereco(
    payload: EnderecoIn,
    pessoa_id: int = Path(..., description="Id da pessoa"),
    db: AsyncSession = Depends(get_db),
) -> Endereco:
    return await pessoa_service.upsert_endereco(db, pessoa_id, payload)
