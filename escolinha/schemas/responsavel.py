from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, validator

from escolinha.schemas.aluno import AlunoBase, AlunoRead


class ResponsavelBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    telefone: Optional[str] = Field(None, max_length=20)
    cpf: Optional[str] = Field(None, max_length=14)
    parentesco: Optional[str] = Field(None, max_length=50)

    @validator("cpf", pre=True)
    def empty_str_to_none(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


class ResponsavelCreate(ResponsavelBase):
    senha: str = Field(..., min_length=6)


class ResponsavelRead(ResponsavelBase):
    id: int

    class Config:
        from_attributes = True


class ResponsavelComAlunos(ResponsavelRead):
    alunos: List[AlunoRead] = []


# Cadastro combinado (aluno + responsável)
class AlunoCompletoCreate(BaseModel):
    aluno: AlunoBase
    responsavel: ResponsavelCreate


class AlunoCompletoRead(BaseModel):
    aluno: AlunoRead
    responsavel: ResponsavelRead
    message: str
