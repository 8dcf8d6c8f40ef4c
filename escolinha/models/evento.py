from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from escolinha.database import Base


class Evento(Base):
    __tablename__ = "eventos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    data_evento = Column(Date, nullable=False)
    local = Column(String(255), nullable=True)
    preco = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    vagas_maximas = Column(Integer, nullable=False, default=0)  # 0 = sem limite
    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=True)  # None = todas as unidades
    ativo = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    inscricoes = relationship("InscricaoEvento", back_populates="evento", cascade="all, delete-orphan")


class InscricaoEvento(Base):
    __tablename__ = "inscricoes_eventos"

    id = Column(Integer, primary_key=True, index=True)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False)
    evento_id = Column(Integer, ForeignKey("eventos.id"), nullable=False)
    data_inscricao = Column(DateTime, default=datetime.utcnow)
    status = Column(String(50), default="pendente")  # pendente, confirmado, cancelado
    observacoes = Column(Text, nullable=True)

    aluno = relationship("Aluno", back_populates="inscricoes")
    evento = relationship("Evento", back_populates="inscricoes")
