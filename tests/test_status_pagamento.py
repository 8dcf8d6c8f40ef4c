from datetime import date
from types import SimpleNamespace

from escolinha.services.status_pagamento import derivar_status, mes_referencia_de


def pagamento(mes, data_pagamento, id=1):
    return SimpleNamespace(mes_referencia=mes, data_pagamento=data_pagamento, id=id)


def test_mes_referencia_tem_zero_a_esquerda():
    assert mes_referencia_de(date(2024, 3, 15)) == "2024-03"


def test_em_dia_quando_ha_pagamento_do_mes_corrente():
    status = derivar_status([pagamento("2024-03", date(2024, 3, 5))], date(2024, 3, 15))

    assert status.em_dia is True
    assert status.dias_atraso is None
    assert status.ultimo_pagamento == "2024-03"


def test_sem_pagamentos_conta_atraso_desde_o_dia_1():
    status = derivar_status([], date(2024, 3, 15))

    assert status.em_dia is False
    assert status.ultimo_pagamento is None
    assert status.dias_atraso == 14


def test_primeiro_dia_do_mes_tem_zero_dias_de_atraso():
    status = derivar_status([pagamento("2024-02", date(2024, 2, 10))], date(2024, 3, 1))

    assert status.em_dia is False
    assert status.dias_atraso == 0


def test_pagamento_adiantado_nao_cobre_o_mes_corrente():
    status = derivar_status([pagamento("2024-05", date(2024, 3, 2))], date(2024, 3, 20))

    assert status.em_dia is False
    assert status.dias_atraso == 19
    assert status.ultimo_pagamento == "2024-05"


def test_ultimo_pagamento_segue_a_data_do_pagamento():
    pagamentos = [
        pagamento("2024-05", date(2024, 2, 10), id=1),
        pagamento("2024-02", date(2024, 2, 20), id=2),
    ]
    status = derivar_status(pagamentos, date(2024, 3, 10))

    assert status.ultimo_pagamento == "2024-02"


def test_empate_na_data_desempata_pelo_maior_id():
    pagamentos = [
        pagamento("2024-01", date(2024, 2, 10), id=5),
        pagamento("2024-02", date(2024, 2, 10), id=3),
    ]
    status = derivar_status(pagamentos, date(2024, 3, 10))

    assert status.ultimo_pagamento == "2024-01"
