# -*- coding: utf-8 -*-
"""
Rotas de autenticação dos três reinos: administrador, gestor de unidade e
responsável. Nenhum login concede acesso aos outros reinos.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.filial import Filial
from escolinha.models.gestor_unidade import GestorUnidade
from escolinha.models.responsavel import Responsavel
from escolinha.routes.alunos_fastapi import aluno_com_status
from escolinha.schemas.auth import AdminUserRead, GestorCreate, GestorRead, GestorSessaoRead, LoginRequest
from escolinha.schemas.responsavel import ResponsavelComAlunos, ResponsavelCreate, ResponsavelRead
from escolinha.services.responsaveis import ResponsavelDuplicado, criar_responsavel

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Autenticação"])


def _credenciais_invalidas():
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas")


# --- ADMINISTRADOR ---

@router.post("/api/admin/login")
def admin_login(dados: LoginRequest, request: Request, db: Session = Depends(get_db)):
    user = auth.autenticar_admin(db, dados.email, dados.senha)
    if not user:
        logger.info("Falha de login de administrador: %s", dados.email)
        raise _credenciais_invalidas()

    admin_user = AdminUserRead.from_orm(user).dict()
    request.session[auth.SESSAO_ADMIN_ID] = user.id
    request.session[auth.SESSAO_ADMIN_USER] = admin_user
    logger.info("Administrador %s autenticado", user.id)
    return {"success": True, "user": admin_user}


@router.post("/api/admin/logout")
def admin_logout(request: Request):
    request.session.pop(auth.SESSAO_ADMIN_ID, None)
    request.session.pop(auth.SESSAO_ADMIN_USER, None)
    return {"success": True}


@router.get("/api/admin/user")
def admin_user(request: Request, principal: auth.Admin = Depends(auth.get_admin)):
    return request.session.get(auth.SESSAO_ADMIN_USER) or {"id": principal.admin_id}


# --- GESTOR DE UNIDADE ---

@router.post("/api/unidade/login", response_model=GestorSessaoRead)
def unidade_login(dados: LoginRequest, request: Request, db: Session = Depends(get_db)):
    gestor = auth.autenticar_gestor(db, dados.email, dados.senha)
    if not gestor:
        logger.info("Falha de login de gestor: %s", dados.email)
        raise _credenciais_invalidas()

    filial = db.query(Filial).filter(Filial.id == gestor.filial_id, Filial.ativo == True).first()  # noqa: E712
    if not filial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Filial não encontrada")

    request.session[auth.SESSAO_GESTOR_ID] = gestor.id
    request.session[auth.SESSAO_FILIAL_ID] = gestor.filial_id
    logger.info("Gestor %s autenticado na filial %s", gestor.id, gestor.filial_id)
    return {"gestor": gestor, "filial": filial}


@router.post("/api/unidade/logout")
def unidade_logout(request: Request):
    request.session.pop(auth.SESSAO_GESTOR_ID, None)
    request.session.pop(auth.SESSAO_FILIAL_ID, None)
    return {"success": True}


@router.get("/api/unidade/me", response_model=GestorSessaoRead)
def unidade_me(request: Request, db: Session = Depends(get_db)):
    principal = auth.resolver_equipe(request.session)
    if not isinstance(principal, auth.Gestor):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Não autenticado")

    gestor = db.query(GestorUnidade).options(joinedload(GestorUnidade.filial)) \
        .filter(GestorUnidade.id == principal.gestor_id).first()
    if not gestor or not gestor.filial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dados não encontrados")
    return {"gestor": gestor, "filial": gestor.filial}


@router.post("/api/unidade/gestores", response_model=GestorRead, status_code=status.HTTP_201_CREATED)
def create_gestor(dados: GestorCreate, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    """
    Cadastra um gestor vinculado a exatamente uma filial.
    """
    filial = db.query(Filial).filter(Filial.id == dados.filial_id, Filial.ativo == True).first()  # noqa: E712
    if not filial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Filial não encontrada")

    gestor = GestorUnidade(
        nome=dados.nome,
        email=dados.email,
        filial_id=dados.filial_id,
        hashed_password=auth.get_password_hash(dados.senha),
    )
    db.add(gestor)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Gestor duplicado: %s", e.orig)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Este email de gestor já está cadastrado.")
    db.refresh(gestor)
    return gestor


# --- RESPONSÁVEL ---

@router.post("/api/responsavel/login")
@router.post("/api/responsaveis/login", include_in_schema=False)
def responsavel_login(dados: LoginRequest, request: Request, db: Session = Depends(get_db)):
    responsavel = auth.autenticar_responsavel(db, dados.email, dados.senha)
    if not responsavel:
        logger.info("Falha de login de responsável: %s", dados.email)
        raise _credenciais_invalidas()

    request.session[auth.SESSAO_RESPONSAVEL_ID] = responsavel.id
    logger.info("Responsável %s autenticado", responsavel.id)
    return {
        "success": True,
        "responsavel": {"id": responsavel.id, "nome": responsavel.nome, "email": responsavel.email},
    }


@router.post("/api/responsavel/logout")
def responsavel_logout(request: Request):
    request.session.pop(auth.SESSAO_RESPONSAVEL_ID, None)
    return {"success": True}


@router.get("/api/responsaveis/me", response_model=ResponsavelComAlunos)
def responsavel_me(
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    """
    Dados do responsável logado com os alunos (ativos) e a situação financeira de cada um.
    """
    responsavel = db.query(Responsavel).filter(Responsavel.id == principal.responsavel_id).first()
    if not responsavel:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Responsável não encontrado")

    alunos = db.query(Aluno).filter(
        Aluno.responsavel_id == responsavel.id,
        Aluno.ativo == True  # noqa: E712
    ).order_by(Aluno.nome).all()

    resposta = ResponsavelComAlunos.from_orm(responsavel)
    resposta.alunos = [aluno_com_status(a) for a in alunos]
    return resposta


@router.post("/api/responsaveis", response_model=ResponsavelRead, status_code=status.HTTP_201_CREATED)
def create_responsavel(
    dados: ResponsavelCreate,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    try:
        responsavel = criar_responsavel(db, dados)
        db.commit()
    except ResponsavelDuplicado as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    db.refresh(responsavel)
    return responsavel
