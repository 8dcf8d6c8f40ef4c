# -*- coding: utf-8 -*-
"""
Rotas FastAPI para os Pagamentos (mensalidades recebidas).
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.pagamento import Pagamento
from escolinha.models.plano_financeiro import PlanoFinanceiro
from escolinha.schemas.aluno import StatusPagamentoRead
from escolinha.schemas.pagamento import (
    ExtratoRead,
    PagamentoCreate,
    PagamentoLoteCreate,
    PagamentoLoteRead,
    PagamentoRead,
)
from escolinha.services.acesso import filtrar_por_filial, garantir_mesma_filial, obter_ou_404
from escolinha.services.baixa_lote import MesesJaPagos, registrar_pagamentos_em_lote
from escolinha.services.ciclo_vida import excluir
from escolinha.services.status_pagamento import derivar_status

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Pagamentos"],
    responses={404: {"description": "Pagamento não encontrado"}},
)

ALUNO_NAO_ENCONTRADO = "Aluno não encontrado"


def _validar_plano(db: Session, plano_id: Optional[int]):
    if plano_id is None:
        return
    if not db.query(PlanoFinanceiro).filter(PlanoFinanceiro.id == plano_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano financeiro não encontrado")


@router.get("/api/pagamentos", response_model=List[PagamentoRead])
def read_pagamentos(
    mes_referencia: Optional[str] = None,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    """
    Lista os pagamentos, mais recentes primeiro. Para o gestor, apenas os de
    alunos da sua unidade.
    """
    query = db.query(Pagamento).join(Aluno, Pagamento.aluno_id == Aluno.id)
    query = filtrar_por_filial(query, principal, Aluno.filial_id)
    if mes_referencia:
        query = query.filter(Pagamento.mes_referencia == mes_referencia)
    return query.order_by(Pagamento.data_pagamento.desc(), Pagamento.id.desc()).all()


@router.get("/api/pagamentos/aluno/{aluno_id}", response_model=ExtratoRead)
def read_extrato(aluno_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Extrato do aluno: pagamentos, total pago e situação no mês corrente.
    Alunos arquivados continuam com o extrato disponível.
    """
    db_aluno = obter_ou_404(db, Aluno, aluno_id, principal, ALUNO_NAO_ENCONTRADO, apenas_ativos=False)
    pagamentos = db.query(Pagamento).filter(Pagamento.aluno_id == aluno_id) \
        .order_by(Pagamento.data_pagamento.desc(), Pagamento.id.desc()).all()

    return {
        "aluno_id": db_aluno.id,
        "aluno_nome": db_aluno.nome,
        "pagamentos": pagamentos,
        "quantidade": len(pagamentos),
        "total_pago": round(sum(p.valor for p in pagamentos), 2),
        "status_pagamento": StatusPagamentoRead.from_orm(derivar_status(pagamentos, date.today())),
    }


@router.post("/api/pagamentos", response_model=PagamentoRead, status_code=status.HTTP_201_CREATED)
def create_pagamento(pagamento: PagamentoCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    obter_ou_404(db, Aluno, pagamento.aluno_id, principal, ALUNO_NAO_ENCONTRADO)
    _validar_plano(db, pagamento.plano_id)

    db_pagamento = Pagamento(**pagamento.dict(), status="pago")
    db.add(db_pagamento)
    db.commit()
    db.refresh(db_pagamento)
    logger.info("Pagamento %s registrado: aluno %s, mês %s", db_pagamento.id, db_pagamento.aluno_id, db_pagamento.mes_referencia)
    return db_pagamento


@router.post("/api/pagamentos/lote", response_model=PagamentoLoteRead, status_code=status.HTTP_201_CREATED)
def create_pagamentos_lote(lote: PagamentoLoteCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Dá baixa em vários meses de uma vez. Ou todos os meses são gravados, ou nenhum.
    """
    obter_ou_404(db, Aluno, lote.aluno_id, principal, ALUNO_NAO_ENCONTRADO)
    _validar_plano(db, lote.plano_id)

    try:
        pagamentos = registrar_pagamentos_em_lote(
            db,
            aluno_id=lote.aluno_id,
            meses=lote.meses,
            valor=lote.valor,
            data_pagamento=lote.data_pagamento,
            forma_pagamento=lote.forma_pagamento,
            observacoes=lote.observacoes,
            plano_id=lote.plano_id,
        )
    except MesesJaPagos as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(e), "meses_ja_pagos": e.meses},
        )

    return {
        "count": len(pagamentos),
        "meses": [p.mes_referencia for p in pagamentos],
        "pagamentos": pagamentos,
    }


@router.delete("/api/pagamentos/{pagamento_id}")
def delete_pagamento(pagamento_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_pagamento = db.query(Pagamento).filter(Pagamento.id == pagamento_id).first()
    if db_pagamento is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pagamento não encontrado")
    garantir_mesma_filial(principal, db_pagamento.aluno.filial_id, "Pagamento não encontrado")

    excluir(db, db_pagamento)
    return {"success": True}
