# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para o Plano Financeiro (modelo de cobrança).
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from escolinha.database import Base
from escolinha.models.ciclo_vida import Arquivavel


class PlanoFinanceiro(Arquivavel, Base):
    __tablename__ = "planos_financeiros"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    descricao = Column(Text, nullable=True)
    valor_mensal = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    quantidade_meses = Column(Integer, nullable=False, default=1)
    desconto_percentual = Column(Numeric(5, 2, asdecimal=False), default=0)
    valor_total = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    # Guardado mas não usado no cálculo de atraso
    dia_vencimento = Column(Integer, default=10)
    taxa_matricula = Column(Numeric(10, 2, asdecimal=False), default=0)
    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=True)  # None = plano global
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
