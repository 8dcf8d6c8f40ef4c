# -*- coding: utf-8 -*-
"""
Rotas FastAPI para as Matrículas de alunos em turmas.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.matricula import Matricula
from escolinha.models.turma import Turma
from escolinha.schemas.matricula import MatriculaCreate, MatriculaRead
from escolinha.services.acesso import filtrar_por_filial, obter_ou_404

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/matriculas",
    tags=["Matrículas"],
    responses={404: {"description": "Matrícula não encontrada"}},
)


@router.get("", response_model=List[MatriculaRead])
def read_matriculas(
    turma_id: Optional[int] = None,
    aluno_id: Optional[int] = None,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    """
    Matrículas ativas. A unidade da matrícula é a unidade da turma.
    """
    query = db.query(Matricula).join(Turma, Matricula.turma_id == Turma.id) \
        .filter(Matricula.ativo == True)  # noqa: E712
    query = filtrar_por_filial(query, principal, Turma.filial_id)
    if turma_id is not None:
        query = query.filter(Matricula.turma_id == turma_id)
    if aluno_id is not None:
        query = query.filter(Matricula.aluno_id == aluno_id)
    return query.order_by(Matricula.data_matricula.desc(), Matricula.id.desc()).all()


@router.post("", response_model=MatriculaRead, status_code=status.HTTP_201_CREATED)
def create_matricula(matricula: MatriculaCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_turma = obter_ou_404(db, Turma, matricula.turma_id, principal, "Turma não encontrada")
    db_aluno = obter_ou_404(db, Aluno, matricula.aluno_id, principal, "Aluno não encontrado")

    if db_aluno.filial_id != db_turma.filial_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Aluno e turma pertencem a unidades diferentes.")

    ativas = db.query(Matricula).filter(Matricula.turma_id == db_turma.id, Matricula.ativo == True)  # noqa: E712
    if ativas.filter(Matricula.aluno_id == db_aluno.id).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Aluno já está matriculado e ativo nesta turma")
    total = ativas.with_entities(func.count(Matricula.id)).scalar() or 0
    if db_turma.capacidade_maxima is not None and total >= db_turma.capacidade_maxima:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Turma sem vagas")

    dados = matricula.dict(exclude_unset=True)
    if dados.get("data_matricula") is None:
        dados.pop("data_matricula", None)
    db_matricula = Matricula(**dados)
    db.add(db_matricula)
    db.commit()
    db.refresh(db_matricula)
    logger.info("Aluno %s matriculado na turma %s", db_aluno.id, db_turma.id)
    return db_matricula
