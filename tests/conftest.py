import os
import tempfile

import pytest

# O banco precisa estar configurado antes de importar a aplicação
_DB_DIR = tempfile.mkdtemp(prefix="escolinha-testes-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'testes.db')}"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "chave-de-testes"

from fastapi.testclient import TestClient  # noqa: E402

from escolinha.auth import get_password_hash  # noqa: E402
from escolinha.database import Base, SessionLocal, engine  # noqa: E402
from escolinha.models.aluno import Aluno  # noqa: E402
from escolinha.models.filial import Filial  # noqa: E402
from escolinha.models.gestor_unidade import GestorUnidade  # noqa: E402
from escolinha.models.responsavel import Responsavel  # noqa: E402
from escolinha.models.usuario import Usuario  # noqa: E402
from main import app  # noqa: E402

SENHA = "senha123"
ADMIN_EMAIL = "admin@escolinha.com.br"
GESTOR_EMAIL = "gestor7@escolinha.com.br"
RESPONSAVEL_EMAIL = "maria@familia.com.br"


@pytest.fixture(autouse=True)
def banco():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def filiais(db):
    """Duas unidades com ids fixos: 7 (gestor de testes) e 9."""
    sete = Filial(id=7, nome="Unidade Centro", endereco="Rua A, 100")
    nove = Filial(id=9, nome="Unidade Norte", endereco="Rua B, 200")
    db.add_all([sete, nove])
    db.commit()
    return {7: sete, 9: nove}


@pytest.fixture
def admin(db):
    user = Usuario(
        username="admin_testes",
        email=ADMIN_EMAIL,
        nome="Admin de Testes",
        hashed_password=get_password_hash(SENHA),
        papel="administrador",
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def gestor(db, filiais):
    gestor = GestorUnidade(
        nome="Gestor Centro",
        email=GESTOR_EMAIL,
        filial_id=7,
        hashed_password=get_password_hash(SENHA),
    )
    db.add(gestor)
    db.commit()
    return gestor


@pytest.fixture
def responsavel(db):
    return criar_responsavel_db(db, "Maria Souza", RESPONSAVEL_EMAIL)


def criar_responsavel_db(db, nome, email):
    responsavel = Responsavel(nome=nome, email=email, hashed_password=get_password_hash(SENHA))
    db.add(responsavel)
    db.commit()
    return responsavel


def criar_aluno_db(db, nome, filial_id=None, responsavel_id=None, ativo=True):
    aluno = Aluno(nome=nome, filial_id=filial_id, responsavel_id=responsavel_id, ativo=ativo)
    db.add(aluno)
    db.commit()
    return aluno


def _logar(url, email):
    client = TestClient(app)
    response = client.post(url, json={"email": email, "senha": SENHA})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def cliente_admin(admin):
    return _logar("/api/admin/login", ADMIN_EMAIL)


@pytest.fixture
def cliente_gestor(gestor):
    return _logar("/api/unidade/login", GESTOR_EMAIL)


@pytest.fixture
def cliente_responsavel(responsavel):
    return _logar("/api/responsavel/login", RESPONSAVEL_EMAIL)
