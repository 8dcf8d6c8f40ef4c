# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Professor.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ProfessorBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)
    especialidade: Optional[str] = Field(None, max_length=100)
    salario: Optional[float] = Field(None, ge=0)
    filial_id: Optional[int] = None


class ProfessorCreate(ProfessorBase):
    pass


class ProfessorUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)
    especialidade: Optional[str] = Field(None, max_length=100)
    salario: Optional[float] = Field(None, ge=0)
    filial_id: Optional[int] = None


class ProfessorRead(ProfessorBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True
