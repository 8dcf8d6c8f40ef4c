# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Planos Financeiros.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.plano_financeiro import PlanoFinanceiro
from escolinha.schemas.plano_financeiro import (
    CalculoPlano,
    CalculoPlanoRead,
    PlanoFinanceiroCreate,
    PlanoFinanceiroRead,
    PlanoFinanceiroUpdate,
)
from escolinha.services.acesso import validar_filial
from escolinha.services.ciclo_vida import excluir
from escolinha.services.plano_calculo import calcular_valor_total

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/planos-financeiros",
    tags=["Planos Financeiros"],
    responses={404: {"description": "Plano financeiro não encontrado"}},
)

NAO_ENCONTRADO = "Plano financeiro não encontrado"


def _query_visivel(db: Session, principal):
    """Gestor enxerga os planos globais e os da própria unidade."""
    query = db.query(PlanoFinanceiro).filter(PlanoFinanceiro.ativo == True)  # noqa: E712
    if isinstance(principal, auth.Gestor):
        query = query.filter(or_(PlanoFinanceiro.filial_id.is_(None), PlanoFinanceiro.filial_id == principal.filial_id))
    return query


def _obter_plano(db: Session, plano_id: int, principal) -> PlanoFinanceiro:
    db_plano = _query_visivel(db, principal).filter(PlanoFinanceiro.id == plano_id).first()
    if db_plano is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NAO_ENCONTRADO)
    return db_plano


def _recalcular(db_plano: PlanoFinanceiro):
    db_plano.valor_total = float(calcular_valor_total(
        db_plano.valor_mensal,
        db_plano.quantidade_meses,
        db_plano.desconto_percentual,
    ))


@router.post("/calcular", response_model=CalculoPlanoRead)
def calcular_plano(calculo: CalculoPlano, principal=Depends(auth.get_principal_equipe)):
    """
    Pré-visualização do valor total, com a mesma regra usada ao gravar o plano.
    """
    valor_total = calcular_valor_total(calculo.valor_mensal, calculo.quantidade_meses, calculo.desconto_percentual)
    return {**calculo.dict(), "valor_total": float(valor_total)}


@router.get("", response_model=List[PlanoFinanceiroRead])
def read_planos(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    return _query_visivel(db, principal).order_by(PlanoFinanceiro.valor_mensal, PlanoFinanceiro.nome).all()


@router.get("/{plano_id}", response_model=PlanoFinanceiroRead)
def read_plano(plano_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    return _obter_plano(db, plano_id, principal)


@router.post("", response_model=PlanoFinanceiroRead, status_code=status.HTTP_201_CREATED)
def create_plano(plano: PlanoFinanceiroCreate, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    validar_filial(db, plano.filial_id)

    db_plano = PlanoFinanceiro(**plano.dict())
    _recalcular(db_plano)
    db.add(db_plano)
    db.commit()
    db.refresh(db_plano)
    logger.info("Plano financeiro %s criado: total %.2f", db_plano.id, db_plano.valor_total)
    return db_plano


@router.put("/{plano_id}", response_model=PlanoFinanceiroRead)
def update_plano(
    plano_id: int,
    plano_update: PlanoFinanceiroUpdate,
    db: Session = Depends(get_db),
    principal: auth.Admin = Depends(auth.get_admin),
):
    db_plano = _obter_plano(db, plano_id, principal)

    # Só descrição e filial aceitam null; os demais campos null são ignorados
    update_data = {
        k: v for k, v in plano_update.dict(exclude_unset=True).items()
        if v is not None or k in ("descricao", "filial_id")
    }
    if "filial_id" in update_data:
        validar_filial(db, update_data["filial_id"])
    for key, value in update_data.items():
        setattr(db_plano, key, value)
    _recalcular(db_plano)

    db.commit()
    db.refresh(db_plano)
    return db_plano


@router.delete("/{plano_id}")
def delete_plano(plano_id: int, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    db_plano = _obter_plano(db, plano_id, principal)
    excluir(db, db_plano)
    return {"success": True}
