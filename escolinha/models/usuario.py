from sqlalchemy import Column, Integer, String

from escolinha.database import Base


class Usuario(Base):
    """Administrador global do sistema."""
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    nome = Column(String(100))
    hashed_password = Column(String(255), nullable=False)
    papel = Column(String(30), nullable=False, default="administrador")
