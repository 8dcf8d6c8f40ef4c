# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Matrícula.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel


class MatriculaBase(BaseModel):
    aluno_id: int
    turma_id: int
    data_matricula: Optional[date] = None


class MatriculaCreate(MatriculaBase):
    pass


class MatriculaRead(MatriculaBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True
