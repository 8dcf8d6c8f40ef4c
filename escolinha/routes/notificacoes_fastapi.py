# -*- coding: utf-8 -*-
"""
Disparo de notificações pela administração.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.schemas.notificacao import EnvioNotificacao, EnvioResultado
from escolinha.services.notificacoes import enviar_para_inadimplentes, enviar_para_todos

router = APIRouter(
    prefix="/api/notificacoes",
    tags=["Notificações"],
)


@router.post("/enviar-todos", response_model=EnvioResultado)
def enviar_todos(envio: EnvioNotificacao, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    count = enviar_para_todos(db, envio.titulo, envio.mensagem, envio.tipo, envio.data_vencimento)
    return {"message": f"Notificação enviada para {count} responsáveis", "count": count}


@router.post("/enviar-inadimplentes", response_model=EnvioResultado)
def enviar_inadimplentes(envio: EnvioNotificacao, db: Session = Depends(get_db), principal: auth.Admin = Depends(auth.get_admin)):
    """
    Notifica uma única vez cada responsável com pelo menos um aluno ativo em atraso.
    """
    count = enviar_para_inadimplentes(db, envio.titulo, envio.mensagem, envio.tipo, envio.data_vencimento)
    return {"message": f"Notificação enviada para {count} responsáveis inadimplentes", "count": count}
