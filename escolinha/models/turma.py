# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Turma.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from escolinha.database import Base
from escolinha.models.ciclo_vida import Arquivavel


class Turma(Arquivavel, Base):
    __tablename__ = "turmas"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    categoria = Column(String(100), nullable=False)  # Sub-9, Sub-11, Sub-13...
    professor_id = Column(Integer, ForeignKey("professores.id"), nullable=True)
    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=True, index=True)
    horario = Column(String(100), nullable=True)
    dias_semana = Column(String(50), nullable=True)  # "Segunda,Quarta,Sexta"
    capacidade_maxima = Column(Integer, default=20)
    valor_mensalidade = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    professor = relationship("Professor", back_populates="turmas")
