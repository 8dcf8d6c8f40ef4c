# escolinha/schemas/aluno.py
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, validator


class StatusPagamentoRead(BaseModel):
    em_dia: bool
    ultimo_pagamento: Optional[str] = None
    dias_atraso: Optional[int] = None

    class Config:
        from_attributes = True


class AlunoBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    cpf: Optional[str] = Field(None, max_length=14)
    rg: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)
    data_nascimento: Optional[date] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = Field(None, max_length=100)
    cep: Optional[str] = Field(None, max_length=10)
    cidade: Optional[str] = Field(None, max_length=100)
    estado: Optional[str] = Field(None, max_length=2)
    nome_responsavel: Optional[str] = Field(None, max_length=255)
    telefone_responsavel: Optional[str] = Field(None, max_length=20)
    filial_id: Optional[int] = None

    @validator("email", pre=True)
    def empty_str_to_none(cls, v):
        """Converte strings vazias para None antes da validação principal."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


class AlunoCreate(AlunoBase):
    responsavel_id: Optional[int] = None


class AlunoUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=255)
    cpf: Optional[str] = Field(None, max_length=14)
    rg: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)
    data_nascimento: Optional[date] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = Field(None, max_length=100)
    cep: Optional[str] = Field(None, max_length=10)
    cidade: Optional[str] = Field(None, max_length=100)
    estado: Optional[str] = Field(None, max_length=2)
    nome_responsavel: Optional[str] = Field(None, max_length=255)
    telefone_responsavel: Optional[str] = Field(None, max_length=20)
    filial_id: Optional[int] = None
    responsavel_id: Optional[int] = None

    @validator("email", pre=True)
    def empty_str_to_none_update(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


class AlunoContatoUpdate(BaseModel):
    """Campos que o responsável pode alterar pelo portal."""
    email: Optional[EmailStr] = None
    telefone: Optional[str] = Field(None, max_length=20)
    endereco: Optional[str] = None
    bairro: Optional[str] = Field(None, max_length=100)
    cep: Optional[str] = Field(None, max_length=10)
    cidade: Optional[str] = Field(None, max_length=100)
    estado: Optional[str] = Field(None, max_length=2)


class AlunoRead(AlunoBase):
    id: int
    responsavel_id: Optional[int] = None
    data_matricula: Optional[date] = None
    foto_url: Optional[str] = None
    ativo: bool = True
    created_at: Optional[datetime] = None
    status_pagamento: Optional[StatusPagamentoRead] = None

    class Config:
        from_attributes = True

