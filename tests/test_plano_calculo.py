from decimal import Decimal

from escolinha.services.plano_calculo import calcular_valor_total


def test_trimestral_com_desconto():
    assert calcular_valor_total(150, 3, 10) == Decimal("405.00")


def test_mensal_sem_desconto():
    assert calcular_valor_total(200, 1, 0) == Decimal("200.00")


def test_desconto_ausente_vale_zero():
    assert calcular_valor_total(99.9, 2, None) == Decimal("199.80")


def test_arredonda_uma_unica_vez_em_centavos():
    # 33.33 * 3 * 0.9 = 89.991
    assert calcular_valor_total(33.33, 3, 10) == Decimal("89.99")


def test_meio_centavo_arredonda_para_cima():
    # 0.25 * 1 * 0.5 = 0.125
    assert calcular_valor_total(Decimal("0.25"), 1, 50) == Decimal("0.13")


def test_previa_e_plano_gravado_usam_o_mesmo_valor(cliente_admin):
    dados = {"valor_mensal": 150, "quantidade_meses": 3, "desconto_percentual": 10}

    previa = cliente_admin.post("/api/planos-financeiros/calcular", json=dados)
    assert previa.status_code == 200
    assert previa.json()["valor_total"] == 405.0

    criado = cliente_admin.post("/api/planos-financeiros", json={**dados, "nome": "Trimestral"})
    assert criado.status_code == 201
    assert criado.json()["valor_total"] == 405.0


def test_alterar_plano_recalcula_o_total(cliente_admin):
    plano = cliente_admin.post(
        "/api/planos-financeiros",
        json={"nome": "Mensal", "valor_mensal": 200, "quantidade_meses": 1},
    ).json()

    response = cliente_admin.put(f"/api/planos-financeiros/{plano['id']}", json={"quantidade_meses": 6, "desconto_percentual": 15})

    assert response.status_code == 200
    assert response.json()["valor_total"] == 1020.0


def test_gestor_nao_cria_plano(cliente_gestor):
    response = cliente_gestor.post(
        "/api/planos-financeiros",
        json={"nome": "Mensal", "valor_mensal": 200, "quantidade_meses": 1},
    )
    assert response.status_code == 403


def test_gestor_ve_planos_globais_e_da_propria_unidade(cliente_admin, cliente_gestor):
    for nome, filial_id in (("Global", None), ("Centro", 7), ("Norte", 9)):
        response = cliente_admin.post(
            "/api/planos-financeiros",
            json={"nome": nome, "valor_mensal": 100, "filial_id": filial_id},
        )
        assert response.status_code == 201

    nomes = {p["nome"] for p in cliente_gestor.get("/api/planos-financeiros").json()}

    assert nomes == {"Global", "Centro"}
