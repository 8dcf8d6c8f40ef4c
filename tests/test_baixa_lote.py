from datetime import date

import pytest

from conftest import criar_aluno_db
from escolinha.models.pagamento import Pagamento
from escolinha.services.baixa_lote import MesesJaPagos, normalizar_meses, registrar_pagamentos_em_lote


def lote(aluno_id, meses, **extra):
    return {
        "aluno_id": aluno_id,
        "meses": meses,
        "valor": 150.0,
        "data_pagamento": "2024-03-05",
        "forma_pagamento": "PIX",
        **extra,
    }


def test_normalizar_meses_mantem_a_ordem():
    assert normalizar_meses(["2024-02", "2024-01", "2024-02"]) == ["2024-02", "2024-01"]


def test_um_pagamento_por_mes(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, ["2024-01", "2024-02", "2024-03"]))

    assert response.status_code == 201
    corpo = response.json()
    assert corpo["count"] == 3
    assert corpo["meses"] == ["2024-01", "2024-02", "2024-03"]
    assert all(p["valor"] == 150.0 and p["status"] == "pago" for p in corpo["pagamentos"])
    assert db.query(Pagamento).filter(Pagamento.aluno_id == aluno.id).count() == 3


def test_meses_repetidos_no_pedido_viram_um_so(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, ["2024-01", "2024-01", "2024-02"]))

    assert response.json()["count"] == 2


def test_meses_ja_pagos_rejeitam_o_lote_inteiro(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)
    cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, ["2024-02"]))

    response = cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, ["2024-01", "2024-02"]))

    assert response.status_code == 400
    assert response.json()["meses_ja_pagos"] == ["2024-02"]
    meses = [m for (m,) in db.query(Pagamento.mes_referencia).filter(Pagamento.aluno_id == aluno.id)]
    assert meses == ["2024-02"]


@pytest.mark.parametrize("mes", ["2024-13", "2024-1", "24-01", "2024/01"])
def test_mes_fora_do_formato(db, filiais, cliente_admin, mes):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    response = cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, [mes]))

    assert response.status_code == 400
    assert response.json()["detail"] == "Dados inválidos"


def test_lista_de_meses_vazia(db, filiais, cliente_admin):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    assert cliente_admin.post("/api/pagamentos/lote", json=lote(aluno.id, [])).status_code == 400


def test_gestor_nao_da_baixa_em_aluno_de_outra_unidade(db, cliente_gestor):
    aluno = criar_aluno_db(db, "Lucas", filial_id=9)

    response = cliente_gestor.post("/api/pagamentos/lote", json=lote(aluno.id, ["2024-01"]))

    assert response.status_code == 404
    assert db.query(Pagamento).count() == 0


def test_servico_grava_tudo_numa_transacao(db, filiais):
    aluno = criar_aluno_db(db, "Pedro", filial_id=7)

    pagamentos = registrar_pagamentos_em_lote(db, aluno.id, ["2024-04", "2024-05"], 120.0, date(2024, 4, 1), "Dinheiro")

    assert [p.mes_referencia for p in pagamentos] == ["2024-04", "2024-05"]
    assert all(p.id is not None for p in pagamentos)

    with pytest.raises(MesesJaPagos) as erro:
        registrar_pagamentos_em_lote(db, aluno.id, ["2024-05", "2024-06"], 120.0, date(2024, 4, 1), "Dinheiro")
    assert erro.value.meses == ["2024-05"]
    assert db.query(Pagamento).count() == 2
