# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Optional
import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from cadastro.core.exceptions import NotFoundError, ValidationError
from cadastro.core.security import SENHA_MAX_BYTES, hash_password
from cadastro.db.models import Email, Endereco, Pessoa, Telefone, Usuario
from cadastro.schemas.pessoa import EmailIn, EnderecoIn, PessoaIn, TelefoneIn

"""
Serviço de cadastro de pessoas.


- Cria pessoa com filhos aninhados numa única transação (senha do usuário vira hash bcrypt).
- Leitura sempre com carga ansiosa de todas as relações (telefones, emails, endereço, usuário).
- Anexa telefone/email a uma pessoa existente.
- Endereço segue upsert por dono: existe -> sobrescreve campos; não existe -> insere.
"""

log = logging.getLogger("cadastro.pessoas")

PESSOA_NAO_ENCONTRADA = "Pessoa não encontrada."

_CAMPOS_ENDERECO = ("logradouro", "numero", "cidade", "estado", "cep", "tipo_endereco_id")


def _carga_completa():
    return (
        selectinload(Pessoa.telefones).selectinload(Telefone.tipo_telefone),
        selectinload(Pessoa.emails).selectinload(Email.tipo_email),
        selectinload(Pessoa.endereco).selectinload(Endereco.tipo_endereco),
        selectinload(Pessoa.usuario).selectinload(Usuario.perfil),
    )


async def get_pessoa(db: AsyncSession, pessoa_id: int) -> Optional[Pessoa]:
    """Busca a pessoa com todas as relações carregadas (None se não existir)."""
    stmt = (
        select(Pessoa)
        .options(*_carga_completa())
        .where(Pessoa.id == pessoa_id)
        .execution_options(populate_existing=True)
    )
    return (await db.execute(stmt)).scalars().first()


async def get_pessoa_or_404(db: AsyncSession, pessoa_id: int) -> Pessoa:
    pessoa = await get_pessoa(db, pessoa_id)
    if pessoa is None:
        log.info("Pessoa %s não encontrada", pessoa_id)
        raise NotFoundError(PESSOA_NAO_ENCONTRADA)
    return pessoa


async def _ensure_pessoa_exists(db: AsyncSession, pessoa_id: int) -> None:
    found = (await db.execute(select(Pessoa.id).where(Pessoa.id == pessoa_id))).scalar()
    if found is None:
        log.info("Pessoa %s não encontrada", pessoa_id)
        raise NotFoundError(PESSOA_NAO_ENCONTRADA)


async def list_pessoas(db: AsyncSession) -> List[Pessoa]:
    stmt = select(Pessoa).options(*_carga_completa()).order_by(Pessoa.id)
    return list((await db.execute(stmt)).scalars().all())


def _validate_pessoa(payload: PessoaIn) -> None:
    if not payload.nome or not payload.nome.strip():
        raise ValidationError("O nome da pessoa é obrigatório.")
    usuario = payload.usuario
    if usuario is None:
        return
    if not usuario.senha or not usuario.senha.strip():
        raise ValidationError("A senha do usuário é obrigatória.")
    if len(usuario.senha.encode("utf-8")) > SENHA_MAX_BYTES:
        raise ValidationError(f"A senha do usuário não pode passar de {SENHA_MAX_BYTES} bytes.")
    if not usuario.login or not usuario.login.strip():
        raise ValidationError("O login do usuário é obrigatório.")


async def create_pessoa(db: AsyncSession, payload: PessoaIn) -> Pessoa:
    """
    Valida e insere pessoa + filhos em uma transação; devolve a pessoa recarregada.

    Erros:
      - ValidationError: nome em branco; usuário aninhado sem login, sem senha ou com senha acima de 72 bytes.
    """
    _validate_pessoa(payload)

    pessoa = Pessoa(
        nome=payload.nome.strip(),
        idade=payload.idade,
        documento=payload.documento,
        tipo_pessoa=payload.tipo_pessoa,
        telefones=[Telefone(**t.model_dump()) for t in payload.telefones],
        emails=[Email(**e.model_dump()) for e in payload.emails],
    )
    if payload.endereco is not None:
        pessoa.endereco = Endereco(**payload.endereco.model_dump())
    if payload.usuario is not None:
        dados = payload.usuario.model_dump(exclude={"senha"})
        dados["login"] = dados["login"].strip()
        pessoa.usuario = Usuario(**dados, senha_hash=hash_password(payload.usuario.senha))

    db.add(pessoa)
    await db.commit()
    log.info("Pessoa %s criada (%d telefones, %d emails)", pessoa.id, len(payload.telefones), len(payload.emails))

    return await get_pessoa_or_404(db, pessoa.id)


async def add_telefone(db: AsyncSession, pessoa_id: int, payload: TelefoneIn) -> Telefone:
    await _ensure_pessoa_exists(db, pessoa_id)

    telefone = Telefone(**payload.model_dump(), pessoa_id=pessoa_id)
    db.add(telefone)
    await db.commit()
    log.info("Telefone %s adicionado à pessoa %s", telefone.id, pessoa_id)

    stmt = (
        select(Telefone)
        .options(selectinload(Telefone.tipo_telefone))
        .where(Telefone.id == telefone.id)
        .execution_options(populate_existing=True)
    )
    return (await db.execute(stmt)).scalar_one()


async def add_email(db: AsyncSession, pessoa_id: int, payload: EmailIn) -> Email:
    await _ensure_pessoa_exists(db, pessoa_id)

    email = Email(**payload.model_dump(), pessoa_id=pessoa_id)
    db.add(email)
    await db.commit()
    log.info("Email %s adicionado à pessoa %s", email.id, pessoa_id)

    stmt = (
        select(Email)
        .options(selectinload(Email.tipo_email))
        .where(Email.id == email.id)
        .execution_options(populate_existing=True)
    )
    return (await db.execute(stmt)).scalar_one()


async def upsert_endereco(db: AsyncSession, pessoa_id: int, payload: EnderecoIn) -> Endereco:
    """Sobrescreve o endereço existente da pessoa ou cria um novo (nunca duplica)."""
    await _ensure_pessoa_exists(db, pessoa_id)

    endereco = (
        await db.execute(select(Endereco).where(Endereco.pessoa_id == pessoa_id))
    ).scalars().first()

    dados = payload.model_dump()
    if endereco is not None:
        for campo in _CAMPOS_ENDERECO:
            setattr(endereco, campo, dados[campo])
        acao = "atualizado"
    else:
        endereco = Endereco(**dados, pessoa_id=pessoa_id)
        db.add(endereco)
        acao = "criado"

    await db.commit()
    log.info("Endereço %s %s para pessoa %s", endereco.id, acao, pessoa_id)

    stmt = (
        select(Endereco)
        .options(selectinload(Endereco.tipo_endereco))
        .where(Endereco.id == endereco.id)
        .execution_options(populate_existing=True)
    )
    return (await db.execute(stmt)).scalar_one()
