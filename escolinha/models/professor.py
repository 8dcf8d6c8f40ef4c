# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Professor.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from escolinha.database import Base
from escolinha.models.ciclo_vida import Arquivavel


class Professor(Arquivavel, Base):
    __tablename__ = "professores"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=True)
    telefone = Column(String(20), nullable=True)
    especialidade = Column(String(100), nullable=True)  # goleiros, preparação física...
    salario = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    turmas = relationship("Turma", back_populates="professor")
