from datetime import date, datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from escolinha.database import Base
from escolinha.models.ciclo_vida import Arquivavel


class Aluno(Arquivavel, Base):
    __tablename__ = "alunos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False, index=True)
    cpf = Column(String(14), nullable=True, index=True)
    rg = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    telefone = Column(String(20), nullable=True)
    data_nascimento = Column(Date, nullable=True)
    data_matricula = Column(Date, default=date.today)
    foto_url = Column(String(255), nullable=True)

    endereco = Column(Text, nullable=True)
    bairro = Column(String(100), nullable=True)
    cep = Column(String(10), nullable=True)
    cidade = Column(String(100), nullable=True)
    estado = Column(String(2), nullable=True)

    # Contato avulso quando o responsável não tem login no portal
    nome_responsavel = Column(String(255), nullable=True)
    telefone_responsavel = Column(String(20), nullable=True)

    filial_id = Column(Integer, ForeignKey("filiais.id"), nullable=True, index=True)
    responsavel_id = Column(Integer, ForeignKey("responsaveis.id"), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    filial = relationship("Filial", back_populates="alunos")
    responsavel_obj = relationship("Responsavel", back_populates="alunos")
    pagamentos = relationship("Pagamento", back_populates="aluno")
    inscricoes = relationship("InscricaoEvento", back_populates="aluno")
