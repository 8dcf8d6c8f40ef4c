import argparse
import logging
from datetime import date

import escolinha.models  # noqa: F401
from escolinha.database import SessionLocal
from escolinha.services.notificacoes import enviar_para_inadimplentes
from escolinha.services.status_pagamento import mes_referencia_de

# Configuração básica de logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def cobrar_inadimplentes(argv=None):
    """
    Envia a notificação de cobrança do mês corrente para os responsáveis com
    alunos em atraso. Pensado para rodar num cron no início de cada mês.
    """
    parser = argparse.ArgumentParser(description='Cobrança de mensalidades em atraso')
    parser.add_argument('--titulo', default=None, help='Título da notificação')
    parser.add_argument('--mensagem', default=None, help='Texto da notificação')
    parser.add_argument('--vencimento', type=date.fromisoformat, default=None, help='Data de vencimento (AAAA-MM-DD)')
    args = parser.parse_args(argv)

    mes_atual = mes_referencia_de(date.today())
    titulo = args.titulo or f"Mensalidade {mes_atual} em aberto"
    mensagem = args.mensagem or (
        f"Não identificamos o pagamento da mensalidade de {mes_atual}. "
        "Se já pagou, desconsidere este aviso."
    )

    db = SessionLocal()
    try:
        total = enviar_para_inadimplentes(db, titulo, mensagem, "cobranca", args.vencimento)
        logging.info("Processo finalizado. %s responsáveis notificados.", total)
    finally:
        db.close()
    return total


if __name__ == "__main__":
    cobrar_inadimplentes()
