# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Pagamento (mensalidade recebida).
"""
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from escolinha.database import Base
from escolinha.models.ciclo_vida import Removivel


class Pagamento(Removivel, Base):
    __tablename__ = "pagamentos"

    id = Column(Integer, primary_key=True, index=True)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False, index=True)
    plano_id = Column(Integer, ForeignKey("planos_financeiros.id"), nullable=True)
    valor = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    # Sem unicidade (aluno_id, mes_referencia): dois pagamentos do mesmo mês são aceitos
    mes_referencia = Column(String(7), nullable=False, index=True)  # "2024-01"
    data_pagamento = Column(Date, nullable=False)
    forma_pagamento = Column(String(50), nullable=False)  # Dinheiro, PIX, Cartão
    status = Column(String(20), nullable=False, default="pago")
    observacoes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    aluno = relationship("Aluno", back_populates="pagamentos")
    plano = relationship("PlanoFinanceiro")
