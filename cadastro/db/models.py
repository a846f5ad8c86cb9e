# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from cadastro.db.base import Base

"""
Modelos ORM do cadastro.


- Tabelas de apoio (tipo_endereco, tipo_telefone, tipo_email, perfil): semeadas no startup.
- `Pessoa` é a raiz; telefones/emails (1..N), endereco/usuario (0..1) em cascata.
- Endereço e usuário têm `pessoa_id` único: no máximo um por pessoa.
"""

TIPO_PADRAO_ID = 1  # "Outro" é sempre o primeiro registro semeado


# Tabelas de apoio
class TipoEndereco(Base):
    __tablename__ = "tipo_endereco"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)


class TipoTelefone(Base):
    __tablename__ = "tipo_telefone"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)


class TipoEmail(Base):
    __tablename__ = "tipo_email"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)


class Perfil(Base):
    __tablename__ = "perfil"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    descricao: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)


# Entidades
class Pessoa(Base):
    __tablename__ = "pessoa"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    idade: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    documento: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    tipo_pessoa: Mapped[str] = mapped_column(String(10), nullable=False, default="fisica")

    telefones: Mapped[List["Telefone"]] = relationship(
        back_populates="pessoa", cascade="all, delete-orphan", order_by="Telefone.id"
    )
    emails: Mapped[List["Email"]] = relationship(
        back_populates="pessoa", cascade="all, delete-orphan", order_by="Email.id"
    )
    endereco: Mapped[Optional["Endereco"]] = relationship(
        back_populates="pessoa", cascade="all, delete-orphan", uselist=False
    )
    usuario: Mapped[Optional["Usuario"]] = relationship(
        back_populates="pessoa", cascade="all, delete-orphan", uselist=False
    )


class Telefone(Base):
    __tablename__ = "telefone"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    numero: Mapped[str] = mapped_column(String(30), nullable=False)
    tipo_telefone_id: Mapped[int] = mapped_column(
        ForeignKey("tipo_telefone.id"), nullable=False, default=TIPO_PADRAO_ID
    )
    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoa.id"), nullable=False, index=True)

    tipo_telefone: Mapped[TipoTelefone] = relationship()
    pessoa: Mapped[Pessoa] = relationship(back_populates="telefones")


class Email(Base):
    __tablename__ = "email"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    tipo_email_id: Mapped[int] = mapped_column(
        ForeignKey("tipo_email.id"), nullable=False, default=TIPO_PADRAO_ID
    )
    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoa.id"), nullable=False, index=True)

    tipo_email: Mapped[TipoEmail] = relationship()
    pessoa: Mapped[Pessoa] = relationship(back_populates="emails")


class Endereco(Base):
    __tablename__ = "endereco"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    logradouro: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    numero: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    cidade: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    estado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    cep: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    tipo_endereco_id: Mapped[int] = mapped_column(
        ForeignKey("tipo_endereco.id"), nullable=False, default=TIPO_PADRAO_ID
    )
    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoa.id"), nullable=False, unique=True)

    tipo_endereco: Mapped[TipoEndereco] = relationship()
    pessoa: Mapped[Pessoa] = relationship(back_populates="endereco")


class Usuario(Base):
    __tablename__ = "usuario"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    login: Mapped[str] = mapped_column(String(100), nullable=False)
    senha_hash: Mapped[str] = mapped_column(String(200), nullable=False)
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    criado_em: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.current_timestamp())
    ultimo_acesso: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    perfil_id: Mapped[Optional[int]] = mapped_column(ForeignKey("perfil.id"), nullable=True)
    pessoa_id: Mapped[int] = mapped_column(ForeignKey("pessoa.id"), nullable=False, unique=True)

    perfil: Mapped[Optional[Perfil]] = relationship()
    pessoa: Mapped[Pessoa] = relationship(back_populates="usuario")
