from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    senha: str = Field(..., min_length=1)


class AdminUserRead(BaseModel):
    id: int
    nome: Optional[str] = None
    email: str
    papel: str

    class Config:
        from_attributes = True


class GestorBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    filial_id: int


class GestorCreate(GestorBase):
    senha: str = Field(..., min_length=6)


class GestorRead(GestorBase):
    id: int
    ativo: bool

    class Config:
        from_attributes = True


class FilialResumo(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class GestorSessaoRead(BaseModel):
    gestor: GestorRead
    filial: FilialResumo
