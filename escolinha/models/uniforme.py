from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from escolinha.database import Base


class Uniforme(Base):
    __tablename__ = "uniformes"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    preco = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    tamanhos = Column(String(100), nullable=True)  # "PP,P,M,G"
    cores = Column(String(100), nullable=True)
    estoque = Column(Integer, nullable=False, default=0)
    ativo = Column(Boolean, nullable=False, default=True)


class CompraUniforme(Base):
    __tablename__ = "compras_uniformes"

    id = Column(Integer, primary_key=True, index=True)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False)
    uniforme_id = Column(Integer, ForeignKey("uniformes.id"), nullable=False)
    tamanho = Column(String(5), nullable=False)
    cor = Column(String(30), nullable=True)
    quantidade = Column(Integer, nullable=False, default=1)
    valor_total = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    status = Column(String(20), nullable=False, default="pendente")
    data_compra = Column(DateTime, default=datetime.utcnow)

    uniforme = relationship("Uniforme")
