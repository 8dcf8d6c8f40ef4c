# -*- coding: utf-8 -*-
"""
Disparo de notificações para os responsáveis.
"""
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from escolinha.models.notificacao import Notificacao
from escolinha.models.responsavel import Responsavel
from escolinha.services.status_pagamento import alunos_inadimplentes

logger = logging.getLogger(__name__)


def _gravar(db: Session, responsavel_ids, titulo, mensagem, tipo, data_vencimento=None) -> int:
    notificacoes = [
        Notificacao(
            responsavel_id=responsavel_id,
            titulo=titulo,
            mensagem=mensagem,
            tipo=tipo,
            data_vencimento=data_vencimento,
        )
        for responsavel_id in responsavel_ids
    ]
    try:
        db.add_all(notificacoes)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return len(notificacoes)


def enviar_para_todos(db: Session, titulo: str, mensagem: str, tipo: str, data_vencimento=None) -> int:
    ids = [r.id for r in db.query(Responsavel.id).order_by(Responsavel.id).all()]
    total = _gravar(db, ids, titulo, mensagem, tipo, data_vencimento)
    logger.info("Notificação '%s' enviada para %s responsáveis", titulo, total)
    return total


def enviar_para_inadimplentes(
    db: Session,
    titulo: str,
    mensagem: str,
    tipo: str,
    data_vencimento=None,
    hoje: Optional[date] = None,
) -> int:
    """
    Uma notificação por responsável, mesmo que ele tenha vários alunos em atraso.
    """
    ids = {a.responsavel_id for a in alunos_inadimplentes(db, hoje) if a.responsavel_id is not None}
    total = _gravar(db, sorted(ids), titulo, mensagem, tipo, data_vencimento)
    logger.info("Notificação '%s' enviada para %s responsáveis inadimplentes", titulo, total)
    return total
