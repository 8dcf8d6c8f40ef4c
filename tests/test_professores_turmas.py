from escolinha.models.professor import Professor


def test_crud_de_professor_na_unidade_do_gestor(db, cliente_gestor):
    criado = cliente_gestor.post("/api/professores", json={"nome": "Carlos", "email": "carlos@escolinha.com.br", "filial_id": 9})
    assert criado.status_code == 201
    professor = criado.json()
    assert professor["filial_id"] == 7

    alterado = cliente_gestor.patch(f"/api/professores/{professor['id']}", json={"especialidade": "goleiros"})
    assert alterado.json()["especialidade"] == "goleiros"

    assert cliente_gestor.delete(f"/api/professores/{professor['id']}").json() == {"success": True}
    assert cliente_gestor.get("/api/professores").json() == []
    assert db.query(Professor).count() == 1


def test_email_de_professor_duplicado(cliente_admin):
    dados = {"nome": "Carlos", "email": "carlos@escolinha.com.br"}
    cliente_admin.post("/api/professores", json=dados)

    assert cliente_admin.post("/api/professores", json=dados).status_code == 400


def test_turma_com_professor_de_outra_unidade(db, cliente_gestor):
    professor = Professor(nome="Rafael", filial_id=9)
    db.add(professor)
    db.commit()

    response = cliente_gestor.post("/api/turmas", json={"nome": "Sub-11 manhã", "categoria": "Sub-11", "professor_id": professor.id})

    assert response.status_code == 404


def test_turmas_filtradas_por_categoria(cliente_gestor):
    cliente_gestor.post("/api/turmas", json={"nome": "Sub-9 tarde", "categoria": "Sub-9"})
    cliente_gestor.post("/api/turmas", json={"nome": "Sub-13 noite", "categoria": "Sub-13"})

    response = cliente_gestor.get("/api/turmas", params={"categoria": "Sub-9"})

    assert [t["nome"] for t in response.json()] == ["Sub-9 tarde"]
    assert response.json()[0]["filial_id"] == 7


def test_nome_nulo_na_edicao_de_professor(cliente_admin):
    professor = cliente_admin.post("/api/professores", json={"nome": "Carlos"}).json()

    response = cliente_admin.patch(f"/api/professores/{professor['id']}", json={"nome": None, "especialidade": "goleiros"})

    assert response.status_code == 200
    assert response.json()["nome"] == "Carlos"
    assert response.json()["especialidade"] == "goleiros"


def test_nome_e_categoria_nulos_na_edicao_de_turma(cliente_gestor):
    turma = cliente_gestor.post("/api/turmas", json={"nome": "Sub-9 tarde", "categoria": "Sub-9"}).json()

    response = cliente_gestor.patch(f"/api/turmas/{turma['id']}", json={"nome": None, "categoria": None, "horario": "15h"})

    assert response.status_code == 200
    assert response.json()["nome"] == "Sub-9 tarde"
    assert response.json()["categoria"] == "Sub-9"
    assert response.json()["horario"] == "15h"


def test_professor_em_filial_inexistente(filiais, cliente_admin):
    response = cliente_admin.post("/api/professores", json={"nome": "Carlos", "filial_id": 999})

    assert response.status_code == 404
    assert response.json()["detail"] == "Filial não encontrada"

    professor = cliente_admin.post("/api/professores", json={"nome": "Carlos", "filial_id": 7}).json()
    assert cliente_admin.patch(f"/api/professores/{professor['id']}", json={"filial_id": 999}).status_code == 404


def test_turma_em_filial_arquivada(db, filiais, cliente_admin):
    filiais[9].arquivar()
    db.commit()

    response = cliente_admin.post("/api/turmas", json={"nome": "Sub-11 manhã", "categoria": "Sub-11", "filial_id": 9})

    assert response.status_code == 404
    assert response.json()["detail"] == "Filial não encontrada"

    turma = cliente_admin.post("/api/turmas", json={"nome": "Sub-11 manhã", "categoria": "Sub-11", "filial_id": 7}).json()
    assert cliente_admin.patch(f"/api/turmas/{turma['id']}", json={"filial_id": 999}).status_code == 404
