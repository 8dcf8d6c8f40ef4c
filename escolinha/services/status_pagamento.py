# -*- coding: utf-8 -*-
"""
Situação financeira do aluno (em dia / atrasado).

O aluno está em dia se, e somente se, existe um pagamento cujo
``mes_referencia`` é o mês corrente. Fora isso, os dias de atraso contam a
partir do dia 1 do mês corrente, independentemente do ``dia_vencimento`` de
qualquer plano financeiro.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from escolinha.models.aluno import Aluno
from escolinha.models.pagamento import Pagamento


@dataclass
class StatusPagamento:
    em_dia: bool
    ultimo_pagamento: Optional[str] = None
    dias_atraso: Optional[int] = None


def mes_referencia_de(dia: date) -> str:
    return f"{dia.year:04d}-{dia.month:02d}"


def derivar_status(pagamentos: Iterable[Pagamento], hoje: date) -> StatusPagamento:
    pagamentos = list(pagamentos)
    mes_atual = mes_referencia_de(hoje)

    em_dia = any(p.mes_referencia == mes_atual for p in pagamentos)

    ultimo = None
    if pagamentos:
        # Pela data do pagamento, não pela ordem do mês de referência
        mais_recente = max(pagamentos, key=lambda p: (p.data_pagamento, p.id or 0))
        ultimo = mais_recente.mes_referencia

    dias_atraso = None
    if not em_dia:
        dias_atraso = (hoje - hoje.replace(day=1)).days

    return StatusPagamento(em_dia=em_dia, ultimo_pagamento=ultimo, dias_atraso=dias_atraso)


def calcular_status_pagamento(db: Session, aluno_id: int, hoje: Optional[date] = None) -> StatusPagamento:
    pagamentos = db.query(Pagamento).filter(Pagamento.aluno_id == aluno_id).all()
    return derivar_status(pagamentos, hoje or date.today())


def alunos_inadimplentes(db: Session, hoje: Optional[date] = None, filial_id: Optional[int] = None):
    """Alunos ativos que não estão em dia no mês corrente."""
    hoje = hoje or date.today()
    query = db.query(Aluno).filter(Aluno.ativo == True)  # noqa: E712
    if filial_id is not None:
        query = query.filter(Aluno.filial_id == filial_id)
    alunos = query.all()
    return [a for a in alunos if not derivar_status(a.pagamentos, hoje).em_dia]
