# -*- coding: utf-8 -*-
"""
Rotas FastAPI para os Eventos (amistosos, torneios, festas).
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.evento import Evento
from escolinha.schemas.evento import EventoCreate, EventoRead
from escolinha.services.acesso import carimbar_filial, validar_filial

router = APIRouter(
    prefix="/api/eventos",
    tags=["Eventos"],
)


@router.get("", response_model=List[EventoRead])
def read_eventos(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Eventos ativos. O gestor vê os eventos gerais e os da própria unidade.
    """
    query = db.query(Evento).filter(Evento.ativo == True)  # noqa: E712
    if isinstance(principal, auth.Gestor):
        query = query.filter(or_(Evento.filial_id.is_(None), Evento.filial_id == principal.filial_id))
    return query.order_by(Evento.data_evento).all()


@router.post("", response_model=EventoRead, status_code=status.HTTP_201_CREATED)
def create_evento(evento: EventoCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    dados = carimbar_filial(evento.dict(), principal)
    validar_filial(db, dados.get("filial_id"))

    db_evento = Evento(**dados)
    db.add(db_evento)
    db.commit()
    db.refresh(db_evento)
    return db_evento
