# -*- coding: utf-8 -*-
"""
Rotas FastAPI para as Filiais (unidades).
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.filial import Filial
from escolinha.models.pagamento import Pagamento
from escolinha.models.professor import Professor
from escolinha.models.turma import Turma
from escolinha.schemas.filial import FilialCreate, FilialDetalhada, FilialRead, FilialUpdate
from escolinha.services.acesso import garantir_mesma_filial
from escolinha.services.ciclo_vida import excluir
from escolinha.services.status_pagamento import mes_referencia_de

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/filiais",
    tags=["Filiais"],
    responses={404: {"description": "Filial não encontrada"}},
)

NAO_ENCONTRADA = "Filial não encontrada"
MATRIZ_DUPLICADA = "Já existe uma filial matriz cadastrada."


def _obter_filial(db: Session, filial_id: int) -> Filial:
    filial = db.query(Filial).filter(Filial.id == filial_id, Filial.ativo == True).first()  # noqa: E712
    if filial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NAO_ENCONTRADA)
    return filial


def _garantir_matriz_livre(db: Session, exceto_id=None):
    query = db.query(Filial).filter(Filial.matriz == True)  # noqa: E712
    if exceto_id is not None:
        query = query.filter(Filial.id != exceto_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MATRIZ_DUPLICADA)


def _commit_filial(db: Session):
    # O índice parcial uq_filiais_matriz barra duas matrizes mesmo em escritas concorrentes
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # Postgres cita o índice; o SQLite cita a coluna
        texto = str(e.orig).lower()
        if "uq_filiais_matriz" not in texto and "filiais.matriz" not in texto:
            raise
        logger.warning("Conflito ao gravar filial: %s", e.orig)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MATRIZ_DUPLICADA)


@router.get("", response_model=List[FilialRead])
def read_filiais(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Lista as filiais ativas. O gestor vê apenas a própria unidade.
    """
    query = db.query(Filial).filter(Filial.ativo == True)  # noqa: E712
    if isinstance(principal, auth.Gestor):
        query = query.filter(Filial.id == principal.filial_id)
    return query.order_by(Filial.matriz.desc(), Filial.nome).all()


@router.get("/detalhadas", response_model=List[FilialDetalhada])
def read_filiais_detalhadas(db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    """
    Filiais com totais de alunos, professores, turmas e a receita do mês corrente.
    """
    mes_atual = mes_referencia_de(date.today())

    def _contagem(modelo):
        query = db.query(modelo.filial_id, func.count(modelo.id)).filter(modelo.ativo == True)  # noqa: E712
        return dict(query.group_by(modelo.filial_id).all())

    alunos = _contagem(Aluno)
    professores = _contagem(Professor)
    turmas = _contagem(Turma)
    receitas = dict(
        db.query(Aluno.filial_id, func.sum(Pagamento.valor))
        .select_from(Aluno)
        .join(Pagamento, Pagamento.aluno_id == Aluno.id)
        .filter(Pagamento.mes_referencia == mes_atual)
        .group_by(Aluno.filial_id)
        .all()
    )

    resultado = []
    for filial in db.query(Filial).filter(Filial.ativo == True).order_by(Filial.matriz.desc(), Filial.nome).all():  # noqa: E712
        detalhada = FilialDetalhada.from_orm(filial)
        detalhada.total_alunos = alunos.get(filial.id, 0)
        detalhada.total_professores = professores.get(filial.id, 0)
        detalhada.total_turmas = turmas.get(filial.id, 0)
        detalhada.receita_mensal = round(float(receitas.get(filial.id) or 0), 2)
        resultado.append(detalhada)
    return resultado


@router.get("/{filial_id}", response_model=FilialRead)
def read_filial(filial_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    garantir_mesma_filial(principal, filial_id, NAO_ENCONTRADA)
    return _obter_filial(db, filial_id)


@router.post("", response_model=FilialRead, status_code=status.HTTP_201_CREATED)
def create_filial(filial: FilialCreate, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    if filial.matriz:
        _garantir_matriz_livre(db)

    db_filial = Filial(**filial.dict())
    db.add(db_filial)
    _commit_filial(db)
    db.refresh(db_filial)
    logger.info("Filial %s criada (matriz=%s)", db_filial.id, db_filial.matriz)
    return db_filial


@router.patch("/{filial_id}", response_model=FilialRead)
def update_filial(
    filial_id: int,
    filial_update: FilialUpdate,
    db: Session = Depends(get_db),
    principal: auth.Admin = Depends(auth.get_admin),
):
    db_filial = _obter_filial(db, filial_id)

    update_data = {
        k: v for k, v in filial_update.dict(exclude_unset=True).items()
        if v is not None or k in ("telefone", "responsavel")
    }
    if update_data.get("matriz"):
        _garantir_matriz_livre(db, exceto_id=filial_id)
    for key, value in update_data.items():
        setattr(db_filial, key, value)

    _commit_filial(db)
    db.refresh(db_filial)
    return db_filial


@router.delete("/{filial_id}")
def delete_filial(filial_id: int, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    db_filial = _obter_filial(db, filial_id)
    # Filial arquivada deixa de ocupar o posto de matriz
    db_filial.matriz = False
    excluir(db, db_filial)
    return {"success": True}
