# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Professores.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.professor import Professor
from escolinha.schemas.professor import ProfessorCreate, ProfessorRead, ProfessorUpdate
from escolinha.services.acesso import carimbar_filial, filtrar_por_filial, obter_ou_404, validar_filial
from escolinha.services.ciclo_vida import excluir

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/professores",
    tags=["Professores"],
    responses={404: {"description": "Não encontrado"}},
)

NAO_ENCONTRADO = "Professor não encontrado"


def _commit_professor(db: Session):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Professor duplicado: %s", e.orig)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Este email de professor já está cadastrado.")


@router.get("", response_model=List[ProfessorRead])
def read_professores(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    query = db.query(Professor).filter(Professor.ativo == True)  # noqa: E712
    query = filtrar_por_filial(query, principal, Professor.filial_id)
    return query.order_by(Professor.nome).all()


@router.post("", response_model=ProfessorRead, status_code=status.HTTP_201_CREATED)
def create_professor(professor: ProfessorCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    dados = carimbar_filial(professor.dict(exclude_unset=True), principal)
    validar_filial(db, dados.get("filial_id"))

    db_professor = Professor(**dados)
    db.add(db_professor)
    _commit_professor(db)
    db.refresh(db_professor)
    return db_professor


@router.patch("/{professor_id}", response_model=ProfessorRead)
def update_professor(
    professor_id: int,
    professor_update: ProfessorUpdate,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    db_professor = obter_ou_404(db, Professor, professor_id, principal, NAO_ENCONTRADO)
    # nome é obrigatório: null explícito é ignorado
    dados = {k: v for k, v in professor_update.dict(exclude_unset=True).items() if v is not None or k != "nome"}
    dados = carimbar_filial(dados, principal)
    validar_filial(db, dados.get("filial_id"))
    for key, value in dados.items():
        setattr(db_professor, key, value)
    _commit_professor(db)
    db.refresh(db_professor)
    return db_professor


@router.delete("/{professor_id}")
def delete_professor(professor_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_professor = obter_ou_404(db, Professor, professor_id, principal, NAO_ENCONTRADO)
    excluir(db, db_professor)
    return {"success": True}
