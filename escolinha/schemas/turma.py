# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Turma.
"""
from typing import Optional

from pydantic import BaseModel, Field


class TurmaBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    categoria: str = Field(..., min_length=1, max_length=100)
    professor_id: Optional[int] = None
    filial_id: Optional[int] = None
    horario: Optional[str] = Field(None, max_length=100)
    dias_semana: Optional[str] = Field(None, max_length=50)
    capacidade_maxima: int = Field(20, gt=0)
    valor_mensalidade: Optional[float] = Field(None, ge=0)


class TurmaCreate(TurmaBase):
    pass


class TurmaUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=255)
    categoria: Optional[str] = Field(None, min_length=1, max_length=100)
    professor_id: Optional[int] = None
    filial_id: Optional[int] = None
    horario: Optional[str] = Field(None, max_length=100)
    dias_semana: Optional[str] = Field(None, max_length=50)
    capacidade_maxima: Optional[int] = Field(None, gt=0)
    valor_mensalidade: Optional[float] = Field(None, ge=0)


class TurmaRead(TurmaBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True
