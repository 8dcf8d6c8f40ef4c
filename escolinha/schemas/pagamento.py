# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Pagamento.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, constr

from escolinha.schemas.aluno import StatusPagamentoRead

MES_REFERENCIA_REGEX = r"^\d{4}-(0[1-9]|1[0-2])$"

MesReferencia = constr(pattern=MES_REFERENCIA_REGEX)


class PagamentoBase(BaseModel):
    aluno_id: int
    valor: float = Field(..., gt=0)
    mes_referencia: MesReferencia
    data_pagamento: date
    forma_pagamento: str = Field(..., min_length=1, max_length=50)
    observacoes: Optional[str] = None
    plano_id: Optional[int] = None


class PagamentoCreate(PagamentoBase):
    pass


class PagamentoRead(PagamentoBase):
    id: int
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PagamentoLoteCreate(BaseModel):
    aluno_id: int
    meses: List[MesReferencia] = Field(..., min_length=1)
    valor: float = Field(..., gt=0)
    data_pagamento: date
    forma_pagamento: str = Field(..., min_length=1, max_length=50)
    observacoes: Optional[str] = None
    plano_id: Optional[int] = None


class PagamentoLoteRead(BaseModel):
    count: int
    meses: List[str]
    pagamentos: List[PagamentoRead]


class PortalPagamentoCreate(BaseModel):
    """Pagamento informado pelo próprio responsável (data = hoje)."""
    mes_referencia: MesReferencia
    valor: float = Field(..., gt=0)
    forma_pagamento: str = Field(..., min_length=1, max_length=50)
    observacoes: Optional[str] = None


class ExtratoRead(BaseModel):
    aluno_id: int
    aluno_nome: str
    pagamentos: List[PagamentoRead]
    quantidade: int
    total_pago: float
    status_pagamento: StatusPagamentoRead
