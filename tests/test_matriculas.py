from conftest import criar_aluno_db
from escolinha.models.matricula import Matricula
from escolinha.models.turma import Turma


def criar_turma_db(db, nome, filial_id, capacidade_maxima=20):
    turma = Turma(nome=nome, categoria="Sub-11", filial_id=filial_id, capacidade_maxima=capacidade_maxima)
    db.add(turma)
    db.commit()
    return turma


def test_gestor_lista_apenas_matriculas_da_propria_unidade(db, cliente_gestor):
    centro = criar_turma_db(db, "Sub-11 Centro", 7)
    norte = criar_turma_db(db, "Sub-11 Norte", 9)
    pedro = criar_aluno_db(db, "Pedro", filial_id=7)
    lucas = criar_aluno_db(db, "Lucas", filial_id=9)
    db.add_all([Matricula(aluno_id=pedro.id, turma_id=centro.id), Matricula(aluno_id=lucas.id, turma_id=norte.id)])
    db.commit()

    response = cliente_gestor.get("/api/matriculas")

    assert response.status_code == 200
    assert [(m["aluno_id"], m["turma_id"]) for m in response.json()] == [(pedro.id, centro.id)]
    assert cliente_gestor.get("/api/matriculas", params={"turma_id": norte.id}).json() == []


def test_admin_matricula_e_lista_por_turma(db, filiais, cliente_admin):
    turma = criar_turma_db(db, "Sub-11 Centro", 7)
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.post("/api/matriculas", json={"aluno_id": aluno.id, "turma_id": turma.id})

    assert response.status_code == 201
    assert response.json()["ativo"] is True
    assert response.json()["data_matricula"] is not None
    listadas = cliente_admin.get("/api/matriculas", params={"turma_id": turma.id}).json()
    assert [m["aluno_id"] for m in listadas] == [aluno.id]


def test_aluno_e_turma_de_unidades_diferentes(db, filiais, cliente_admin):
    turma = criar_turma_db(db, "Sub-11 Norte", 9)
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.post("/api/matriculas", json={"aluno_id": aluno.id, "turma_id": turma.id})

    assert response.status_code == 400
    assert response.json()["detail"] == "Aluno e turma pertencem a unidades diferentes."
    assert db.query(Matricula).count() == 0


def test_gestor_nao_matricula_em_turma_de_outra_unidade(db, cliente_gestor):
    turma = criar_turma_db(db, "Sub-11 Norte", 9)
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_gestor.post("/api/matriculas", json={"aluno_id": aluno.id, "turma_id": turma.id})

    assert response.status_code == 404
    assert response.json()["detail"] == "Turma não encontrada"


def test_matricula_duplicada(db, cliente_gestor):
    turma = criar_turma_db(db, "Sub-11 Centro", 7)
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)
    cliente_gestor.post("/api/matriculas", json={"aluno_id": aluno.id, "turma_id": turma.id})

    response = cliente_gestor.post("/api/matriculas", json={"aluno_id": aluno.id, "turma_id": turma.id})

    assert response.status_code == 400
    assert db.query(Matricula).count() == 1


def test_turma_lotada(db, cliente_gestor):
    turma = criar_turma_db(db, "Sub-11 Centro", 7, capacidade_maxima=1)
    pedro = criar_aluno_db(db, "Pedro", filial_id=7)
    lucas = criar_aluno_db(db, "Lucas", filial_id=7)
    cliente_gestor.post("/api/matriculas", json={"aluno_id": pedro.id, "turma_id": turma.id})

    response = cliente_gestor.post("/api/matriculas", json={"aluno_id": lucas.id, "turma_id": turma.id})

    assert response.status_code == 400
    assert response.json()["detail"] == "Turma sem vagas"
