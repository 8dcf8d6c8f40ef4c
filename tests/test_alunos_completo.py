from conftest import SENHA, criar_aluno_db
from escolinha.models.aluno import Aluno
from escolinha.models.responsavel import Responsavel


def cadastro(email="ana@familia.com.br", cpf=None):
    return {
        "aluno": {"nome": "Joãozinho", "data_nascimento": "2015-06-01", "filial_id": 7},
        "responsavel": {"nome": "Ana Lima", "email": email, "senha": SENHA, "telefone": "11999990000", "cpf": cpf},
    }


def test_cria_aluno_e_responsavel_juntos(db, filiais, cliente_admin, client):
    response = cliente_admin.post("/api/alunos-completo", json=cadastro(cpf="123.456.789-00"))

    assert response.status_code == 201
    corpo = response.json()
    assert corpo["aluno"]["responsavel_id"] == corpo["responsavel"]["id"]
    assert corpo["aluno"]["nome_responsavel"] == "Ana Lima"
    assert corpo["aluno"]["status_pagamento"]["em_dia"] is False

    aluno = cliente_admin.get(f"/api/alunos/{corpo['aluno']['id']}").json()
    vinculado = db.query(Responsavel).filter(Responsavel.id == aluno["responsavel_id"]).one()
    assert vinculado.email == "ana@familia.com.br"
    assert vinculado.cpf == "123.456.789-00"

    login = client.post("/api/responsavel/login", json={"email": "ana@familia.com.br", "senha": SENHA})
    assert login.status_code == 200
    me = client.get("/api/responsaveis/me").json()
    assert [a["nome"] for a in me["alunos"]] == ["Joãozinho"]


def test_email_duplicado_nao_grava_nada(db, filiais, cliente_admin):
    assert cliente_admin.post("/api/alunos-completo", json=cadastro()).status_code == 201

    response = cliente_admin.post("/api/alunos-completo", json=cadastro())

    assert response.status_code == 400
    assert "email" in response.json()["detail"]
    assert db.query(Responsavel).count() == 1
    assert db.query(Aluno).count() == 1


def test_cpf_duplicado(db, filiais, cliente_admin):
    cliente_admin.post("/api/alunos-completo", json=cadastro(cpf="123.456.789-00"))

    response = cliente_admin.post("/api/alunos-completo", json=cadastro(email="outra@familia.com.br", cpf="123.456.789-00"))

    assert response.status_code == 400
    assert "CPF" in response.json()["detail"]


def test_senha_curta_e_rejeitada(filiais, cliente_admin):
    dados = cadastro()
    dados["responsavel"]["senha"] = "123"

    response = cliente_admin.post("/api/alunos-completo", json=dados)

    assert response.status_code == 400
    assert response.json()["errors"][0]["campo"] == "responsavel.senha"


def test_gestor_cadastra_na_propria_unidade(cliente_gestor):
    dados = cadastro()
    dados["aluno"]["filial_id"] = 9

    response = cliente_gestor.post("/api/alunos-completo", json=dados)

    assert response.json()["aluno"]["filial_id"] == 7


def test_nome_nulo_na_edicao_mantem_o_nome(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.patch(f"/api/alunos/{aluno.id}", json={"nome": None, "telefone": "11988887777"})

    assert response.status_code == 200
    assert response.json()["nome"] == "Pedro"
    assert response.json()["telefone"] == "11988887777"


def test_aluno_em_filial_inexistente(filiais, cliente_admin):
    response = cliente_admin.post("/api/alunos", json={"nome": "Pedro", "filial_id": 999})

    assert response.status_code == 404
    assert response.json()["detail"] == "Filial não encontrada"
