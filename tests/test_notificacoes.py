from datetime import date

from conftest import criar_aluno_db, criar_responsavel_db
from escolinha.models.notificacao import Notificacao
from escolinha.models.pagamento import Pagamento
from escolinha.services.notificacoes import enviar_para_inadimplentes
from escolinha.services.status_pagamento import mes_referencia_de

AVISO = {"titulo": "Mensalidade em aberto", "mensagem": "Regularize o pagamento.", "tipo": "cobranca"}


def pagar_mes_corrente(db, aluno):
    hoje = date.today()
    db.add(Pagamento(
        aluno_id=aluno.id,
        valor=150,
        mes_referencia=mes_referencia_de(hoje),
        data_pagamento=hoje,
        forma_pagamento="PIX",
    ))
    db.commit()


def test_um_aviso_por_responsavel_inadimplente(db, filiais, cliente_admin):
    maria = criar_responsavel_db(db, "Maria", "maria@familia.com.br")
    joao = criar_responsavel_db(db, "João", "joao@familia.com.br")
    criar_aluno_db(db, "Pedro", filial_id=7, responsavel_id=maria.id)
    criar_aluno_db(db, "Paulo", filial_id=9, responsavel_id=maria.id)
    em_dia = criar_aluno_db(db, "Lucas", filial_id=7, responsavel_id=joao.id)
    pagar_mes_corrente(db, em_dia)

    response = cliente_admin.post("/api/notificacoes/enviar-inadimplentes", json=AVISO)

    assert response.status_code == 200
    assert response.json()["count"] == 1
    notificacoes = db.query(Notificacao).all()
    assert [n.responsavel_id for n in notificacoes] == [maria.id]
    assert notificacoes[0].lida is False


def test_aluno_arquivado_nao_gera_cobranca(db, filiais):
    maria = criar_responsavel_db(db, "Maria", "maria@familia.com.br")
    criar_aluno_db(db, "Pedro", filial_id=7, responsavel_id=maria.id, ativo=False)

    assert enviar_para_inadimplentes(db, "Aviso", "Texto", "cobranca") == 0
    assert db.query(Notificacao).count() == 0


def test_aluno_sem_responsavel_e_ignorado(db, filiais):
    criar_aluno_db(db, "Pedro", filial_id=7)

    assert enviar_para_inadimplentes(db, "Aviso", "Texto", "cobranca") == 0


def test_enviar_para_todos(db, cliente_admin):
    for nome in ("ana", "bia", "caio"):
        criar_responsavel_db(db, nome, f"{nome}@familia.com.br")

    response = cliente_admin.post("/api/notificacoes/enviar-todos", json={**AVISO, "tipo": "aviso"})

    assert response.json()["count"] == 3
    assert db.query(Notificacao).count() == 3


def test_gestor_nao_dispara_notificacoes(cliente_gestor):
    assert cliente_gestor.post("/api/notificacoes/enviar-todos", json=AVISO).status_code == 403


def test_script_de_cobranca(db, filiais):
    from cobrar_inadimplentes import cobrar_inadimplentes

    maria = criar_responsavel_db(db, "Maria", "maria@familia.com.br")
    criar_aluno_db(db, "Pedro", filial_id=7, responsavel_id=maria.id)

    assert cobrar_inadimplentes(["--vencimento", "2024-03-10"]) == 1
    notificacao = db.query(Notificacao).one()
    assert notificacao.tipo == "cobranca"
    assert notificacao.data_vencimento == date(2024, 3, 10)
