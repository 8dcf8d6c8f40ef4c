# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para o Responsável (login do portal dos pais).
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from escolinha.database import Base


class Responsavel(Base):
    __tablename__ = "responsaveis"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    cpf = Column(String(14), unique=True, index=True, nullable=True)
    telefone = Column(String(20), nullable=True)
    parentesco = Column(String(50), nullable=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    alunos = relationship("Aluno", back_populates="responsavel_obj")
    notificacoes = relationship("Notificacao", back_populates="responsavel")
