from datetime import date

from conftest import criar_aluno_db
from escolinha.models.pagamento import Pagamento
from escolinha.services.status_pagamento import mes_referencia_de


def pagamento(aluno_id, mes, data_pagamento="2024-03-05", valor=150.0):
    return {
        "aluno_id": aluno_id,
        "valor": valor,
        "mes_referencia": mes,
        "data_pagamento": data_pagamento,
        "forma_pagamento": "PIX",
    }


def test_pagamento_do_mes_corrente_deixa_aluno_em_dia(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)
    hoje = date.today()

    antes = cliente_admin.get(f"/api/alunos/{aluno.id}/status-pagamento").json()
    response = cliente_admin.post("/api/pagamentos", json=pagamento(aluno.id, mes_referencia_de(hoje), hoje.isoformat()))
    depois = cliente_admin.get(f"/api/alunos/{aluno.id}/status-pagamento").json()

    assert response.status_code == 201
    assert antes["em_dia"] is False
    assert antes["dias_atraso"] == hoje.day - 1
    assert depois == {"em_dia": True, "ultimo_pagamento": mes_referencia_de(hoje), "dias_atraso": None}


def test_extrato_do_aluno(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)
    cliente_admin.post("/api/pagamentos", json=pagamento(aluno.id, "2024-01", "2024-01-10", 150.0))
    cliente_admin.post("/api/pagamentos", json=pagamento(aluno.id, "2024-02", "2024-02-10", 160.5))

    extrato = cliente_admin.get(f"/api/pagamentos/aluno/{aluno.id}").json()

    assert extrato["quantidade"] == 2
    assert extrato["total_pago"] == 310.5
    assert [p["mes_referencia"] for p in extrato["pagamentos"]] == ["2024-02", "2024-01"]
    assert extrato["status_pagamento"]["ultimo_pagamento"] == "2024-02"


def test_gestor_lista_apenas_pagamentos_da_propria_unidade(db, cliente_gestor):
    pedro = criar_aluno_db(db, "Pedro", filial_id=7)
    lucas = criar_aluno_db(db, "Lucas", filial_id=9)
    db.add_all([
        Pagamento(aluno_id=pedro.id, valor=100, mes_referencia="2024-01", data_pagamento=date(2024, 1, 5), forma_pagamento="PIX"),
        Pagamento(aluno_id=lucas.id, valor=100, mes_referencia="2024-01", data_pagamento=date(2024, 1, 5), forma_pagamento="PIX"),
    ])
    db.commit()

    response = cliente_gestor.get("/api/pagamentos")

    assert [p["aluno_id"] for p in response.json()] == [pedro.id]


def test_pagamento_para_aluno_de_outra_unidade(db, cliente_gestor):
    lucas = criar_aluno_db(db, "Lucas", filial_id=9)

    assert cliente_gestor.post("/api/pagamentos", json=pagamento(lucas.id, "2024-01")).status_code == 404


def test_excluir_pagamento_apaga_a_linha(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)
    criado = cliente_admin.post("/api/pagamentos", json=pagamento(aluno.id, "2024-01")).json()

    response = cliente_admin.delete(f"/api/pagamentos/{criado['id']}")

    assert response.json() == {"success": True}
    assert db.query(Pagamento).count() == 0
    assert cliente_admin.delete(f"/api/pagamentos/{criado['id']}").status_code == 404


def test_gestor_nao_exclui_pagamento_de_outra_unidade(db, cliente_gestor):
    lucas = criar_aluno_db(db, "Lucas", filial_id=9)
    db.add(Pagamento(aluno_id=lucas.id, valor=100, mes_referencia="2024-01", data_pagamento=date(2024, 1, 5), forma_pagamento="PIX"))
    db.commit()
    pagamento_id = db.query(Pagamento.id).scalar()

    assert cliente_gestor.delete(f"/api/pagamentos/{pagamento_id}").status_code == 404
    assert db.query(Pagamento).count() == 1
