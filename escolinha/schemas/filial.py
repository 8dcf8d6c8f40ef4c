# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Filial.
"""
from typing import Optional

from pydantic import BaseModel, Field


class FilialBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    endereco: str = Field(..., min_length=1)
    telefone: Optional[str] = Field(None, max_length=20)
    responsavel: Optional[str] = Field(None, max_length=100)
    matriz: bool = False


class FilialCreate(FilialBase):
    pass


class FilialUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    endereco: Optional[str] = None
    telefone: Optional[str] = Field(None, max_length=20)
    responsavel: Optional[str] = Field(None, max_length=100)
    matriz: Optional[bool] = None


class FilialRead(FilialBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True


class FilialDetalhada(FilialRead):
    total_alunos: int = 0
    total_professores: int = 0
    total_turmas: int = 0
    receita_mensal: float = 0.0
