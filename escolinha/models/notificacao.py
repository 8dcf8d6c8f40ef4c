from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from escolinha.database import Base


class Notificacao(Base):
    __tablename__ = "notificacoes"

    id = Column(Integer, primary_key=True, index=True)
    responsavel_id = Column(Integer, ForeignKey("responsaveis.id"), nullable=False, index=True)
    titulo = Column(String(255), nullable=False)
    mensagem = Column(Text, nullable=False)
    tipo = Column(String(50), nullable=False)  # aviso, cobranca, evento
    lida = Column(Boolean, nullable=False, default=False)
    data_vencimento = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    responsavel = relationship("Responsavel", back_populates="notificacoes")
