from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class EnvioNotificacao(BaseModel):
    titulo: str = Field(..., min_length=1, max_length=255)
    mensagem: str = Field(..., min_length=1)
    tipo: str = Field("aviso", max_length=50)
    data_vencimento: Optional[date] = None


class EnvioResultado(BaseModel):
    message: str
    count: int


class NotificacaoRead(BaseModel):
    id: int
    titulo: str
    mensagem: str
    tipo: str
    lida: bool
    data_vencimento: Optional[date] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
