# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Turmas.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.professor import Professor
from escolinha.models.turma import Turma
from escolinha.schemas.turma import TurmaCreate, TurmaRead, TurmaUpdate
from escolinha.services.acesso import carimbar_filial, filtrar_por_filial, obter_ou_404, validar_filial
from escolinha.services.ciclo_vida import excluir

router = APIRouter(
    prefix="/api/turmas",
    tags=["Turmas"],
    responses={404: {"description": "Turma não encontrada"}},
)

NAO_ENCONTRADA = "Turma não encontrada"


def _validar_referencias(db: Session, dados: dict, principal):
    validar_filial(db, dados.get("filial_id"))
    # O professor precisa ser visível para quem monta a turma
    if dados.get("professor_id") is not None:
        obter_ou_404(db, Professor, dados["professor_id"], principal, "Professor não encontrado")


@router.get("", response_model=List[TurmaRead])
def read_turmas(
    categoria: Optional[str] = None,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    query = db.query(Turma).filter(Turma.ativo == True)  # noqa: E712
    query = filtrar_por_filial(query, principal, Turma.filial_id)
    if categoria:
        query = query.filter(Turma.categoria == categoria)
    return query.order_by(Turma.nome).all()


@router.post("", response_model=TurmaRead, status_code=status.HTTP_201_CREATED)
def create_turma(turma: TurmaCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    dados = carimbar_filial(turma.dict(exclude_unset=True), principal)
    _validar_referencias(db, dados, principal)

    db_turma = Turma(**dados)
    db.add(db_turma)
    db.commit()
    db.refresh(db_turma)
    return db_turma


@router.patch("/{turma_id}", response_model=TurmaRead)
def update_turma(
    turma_id: int,
    turma_update: TurmaUpdate,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    db_turma = obter_ou_404(db, Turma, turma_id, principal, NAO_ENCONTRADA)
    # nome e categoria são obrigatórios: null explícito é ignorado
    dados = {
        k: v for k, v in turma_update.dict(exclude_unset=True).items()
        if v is not None or k not in ("nome", "categoria", "capacidade_maxima")
    }
    dados = carimbar_filial(dados, principal)
    _validar_referencias(db, dados, principal)
    for key, value in dados.items():
        setattr(db_turma, key, value)
    db.commit()
    db.refresh(db_turma)
    return db_turma


@router.delete("/{turma_id}")
def delete_turma(turma_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_turma = obter_ou_404(db, Turma, turma_id, principal, NAO_ENCONTRADA)
    excluir(db, db_turma)
    return {"success": True}
