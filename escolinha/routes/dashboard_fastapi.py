# Em escolinha/routes/dashboard_fastapi.py

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.filial import Filial
from escolinha.models.pagamento import Pagamento
from escolinha.models.professor import Professor
from escolinha.models.turma import Turma
from escolinha.services.acesso import filtrar_por_filial
from escolinha.services.status_pagamento import alunos_inadimplentes, mes_referencia_de

router = APIRouter(
    tags=["Dashboard"],
    prefix="/api/dashboard"
)


@router.get("/metrics")
def get_metrics(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Totais do painel. Para o gestor, tudo é contado apenas na sua unidade.
    """
    hoje = date.today()
    mes_atual = mes_referencia_de(hoje)

    def _total(modelo):
        query = db.query(func.count(modelo.id)).filter(modelo.ativo == True)  # noqa: E712
        return filtrar_por_filial(query, principal, modelo.filial_id).scalar() or 0

    receita = db.query(func.sum(Pagamento.valor)).select_from(Pagamento) \
        .join(Aluno, Pagamento.aluno_id == Aluno.id) \
        .filter(Pagamento.mes_referencia == mes_atual)
    receita = filtrar_por_filial(receita, principal, Aluno.filial_id).scalar() or 0

    filial_id = principal.filial_id if isinstance(principal, auth.Gestor) else None
    inadimplentes = alunos_inadimplentes(db, hoje, filial_id=filial_id)

    total_filiais = 1
    if isinstance(principal, auth.Admin):
        total_filiais = db.query(func.count(Filial.id)).filter(Filial.ativo == True).scalar() or 0  # noqa: E712

    return {
        "mes_referencia": mes_atual,
        "total_alunos": _total(Aluno),
        "total_professores": _total(Professor),
        "total_turmas": _total(Turma),
        "total_filiais": total_filiais,
        "receita_mes": round(float(receita), 2),
        "alunos_inadimplentes": len(inadimplentes),
    }
