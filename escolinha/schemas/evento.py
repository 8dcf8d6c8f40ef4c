from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class EventoBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    descricao: Optional[str] = None
    data_evento: date
    local: Optional[str] = Field(None, max_length=255)
    preco: float = Field(0, ge=0)
    vagas_maximas: int = Field(0, ge=0)
    filial_id: Optional[int] = None


class EventoCreate(EventoBase):
    pass


class EventoRead(EventoBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True


class InscricaoEventoCreate(BaseModel):
    aluno_id: int
    observacoes: Optional[str] = None


class InscricaoEventoRead(BaseModel):
    id: int
    aluno_id: int
    evento_id: int
    status: str
    observacoes: Optional[str] = None
    data_inscricao: Optional[datetime] = None

    class Config:
        from_attributes = True
