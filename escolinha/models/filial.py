# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Filial (unidade).
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from escolinha.database import Base
from escolinha.models.ciclo_vida import Arquivavel


class Filial(Arquivavel, Base):
    __tablename__ = "filiais"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    endereco = Column(Text, nullable=False)
    telefone = Column(String(20), nullable=True)
    responsavel = Column(String(100), nullable=True)  # nome do coordenador, não é o Responsavel do aluno
    matriz = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    alunos = relationship("Aluno", back_populates="filial")
    gestores = relationship("GestorUnidade", back_populates="filial")


# No máximo uma matriz
Index(
    "uq_filiais_matriz",
    Filial.matriz,
    unique=True,
    sqlite_where=Filial.matriz == True,  # noqa: E712
    postgresql_where=Filial.matriz == True,  # noqa: E712
)
