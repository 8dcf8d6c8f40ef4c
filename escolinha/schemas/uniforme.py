from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UniformeBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    preco: float = Field(..., gt=0)
    tamanhos: Optional[str] = Field(None, max_length=100)
    cores: Optional[str] = Field(None, max_length=100)
    estoque: int = Field(0, ge=0)


class UniformeCreate(UniformeBase):
    pass


class UniformeRead(UniformeBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True


class CompraUniformeCreate(BaseModel):
    aluno_id: int
    tamanho: str = Field(..., min_length=1, max_length=5)
    cor: Optional[str] = Field(None, max_length=30)
    quantidade: int = Field(1, gt=0)


class CompraUniformeRead(BaseModel):
    id: int
    aluno_id: int
    uniforme_id: int
    tamanho: str
    cor: Optional[str] = None
    quantidade: int
    valor_total: float
    status: str
    data_compra: Optional[datetime] = None

    class Config:
        from_attributes = True
