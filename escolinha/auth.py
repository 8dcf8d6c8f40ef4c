# -*- coding: utf-8 -*-
"""
Autenticação por sessão e resolução do "principal" de cada requisição.

Existem três portas de entrada independentes (administrador, gestor de
unidade e responsável). Cada login grava os seus próprios campos na sessão;
eles podem coexistir no mesmo cookie, mas cada rota resolve apenas o reino
que lhe interessa.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from fastapi import Depends, HTTPException, Request, status
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from escolinha.models.gestor_unidade import GestorUnidade
from escolinha.models.responsavel import Responsavel
from escolinha.models.usuario import Usuario


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Chaves gravadas no cookie de sessão
SESSAO_ADMIN_ID = "adminId"
SESSAO_ADMIN_USER = "adminUser"
SESSAO_GESTOR_ID = "gestorUnidadeId"
SESSAO_FILIAL_ID = "filialId"
SESSAO_RESPONSAVEL_ID = "responsavelId"


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


# --- PRINCIPAIS ---

@dataclass(frozen=True)
class Admin:
    admin_id: int


@dataclass(frozen=True)
class Gestor:
    gestor_id: int
    filial_id: int


@dataclass(frozen=True)
class ResponsavelLogado:
    responsavel_id: int


def resolver_equipe(sessao) -> Optional[Union[Admin, Gestor]]:
    """
    Resolve o principal da equipe (admin ou gestor) a partir da sessão.
    O administrador sempre vence quando os dois conjuntos de campos existem.
    """
    if sessao.get(SESSAO_ADMIN_ID):
        return Admin(admin_id=sessao[SESSAO_ADMIN_ID])
    if sessao.get(SESSAO_GESTOR_ID) and sessao.get(SESSAO_FILIAL_ID):
        return Gestor(gestor_id=sessao[SESSAO_GESTOR_ID], filial_id=sessao[SESSAO_FILIAL_ID])
    return None


def resolver_responsavel(sessao) -> Optional[ResponsavelLogado]:
    if sessao.get(SESSAO_RESPONSAVEL_ID):
        return ResponsavelLogado(responsavel_id=sessao[SESSAO_RESPONSAVEL_ID])
    return None


def _nao_autenticado():
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Não autenticado")


# --- DEPENDÊNCIAS DE AUTENTICAÇÃO E AUTORIZAÇÃO ---

async def get_principal_equipe(request: Request) -> Union[Admin, Gestor]:
    principal = resolver_equipe(request.session)
    if principal is None:
        raise _nao_autenticado()
    return principal


async def get_admin(principal: Union[Admin, Gestor] = Depends(get_principal_equipe)) -> Admin:
    """
    Operações exclusivas do administrador. Um gestor autenticado recebe 403.
    """
    if not isinstance(principal, Admin):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acesso restrito a administradores."
        )
    return principal


async def get_responsavel_logado(request: Request) -> ResponsavelLogado:
    principal = resolver_responsavel(request.session)
    if principal is None:
        raise _nao_autenticado()
    return principal


# --- AUTENTICAÇÃO CONTRA O BANCO ---

def autenticar_admin(db: Session, email: str, senha: str) -> Optional[Usuario]:
    user = db.query(Usuario).filter(Usuario.email == email).first()
    if not user or not verify_password(senha, user.hashed_password):
        return None
    return user


def autenticar_gestor(db: Session, email: str, senha: str) -> Optional[GestorUnidade]:
    gestor = db.query(GestorUnidade).filter(GestorUnidade.email == email).first()
    if not gestor or not gestor.ativo:
        return None
    if not verify_password(senha, gestor.hashed_password):
        return None
    gestor.ultimo_login = datetime.utcnow()
    db.commit()
    return gestor


def autenticar_responsavel(db: Session, email: str, senha: str) -> Optional[Responsavel]:
    responsavel = db.query(Responsavel).filter(Responsavel.email == email).first()
    if not responsavel or not verify_password(senha, responsavel.hashed_password):
        return None
    return responsavel
