from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from escolinha.database import Base


class GestorUnidade(Base):
    __tablename__ = "gestores_unidade"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=False, index=True)
    ativo = Column(Boolean, nullable=False, default=True)
    ultimo_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    filial = relationship("Filial", back_populates="gestores")
