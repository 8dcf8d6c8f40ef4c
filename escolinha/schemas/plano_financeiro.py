# -*- coding: utf-8 -*-
"""
Schemas Pydantic para o Plano Financeiro.
"""
from typing import Optional

from pydantic import BaseModel, Field


class CalculoPlano(BaseModel):
    valor_mensal: float = Field(..., gt=0)
    quantidade_meses: int = Field(1, gt=0)
    desconto_percentual: float = Field(0, ge=0, le=100)


class CalculoPlanoRead(CalculoPlano):
    valor_total: float


class PlanoFinanceiroBase(CalculoPlano):
    nome: str = Field(..., min_length=1, max_length=100)
    descricao: Optional[str] = None
    dia_vencimento: int = Field(10, ge=1, le=31)
    taxa_matricula: float = Field(0, ge=0)
    filial_id: Optional[int] = None


class PlanoFinanceiroCreate(PlanoFinanceiroBase):
    pass


class PlanoFinanceiroUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    descricao: Optional[str] = None
    valor_mensal: Optional[float] = Field(None, gt=0)
    quantidade_meses: Optional[int] = Field(None, gt=0)
    desconto_percentual: Optional[float] = Field(None, ge=0, le=100)
    dia_vencimento: Optional[int] = Field(None, ge=1, le=31)
    taxa_matricula: Optional[float] = Field(None, ge=0)
    filial_id: Optional[int] = None


class PlanoFinanceiroRead(PlanoFinanceiroBase):
    id: int
    valor_total: float
    ativo: bool

    class Config:
        from_attributes = True
