# -*- coding: utf-8 -*-
"""
Portal dos pais: tudo aqui é resolvido a partir do responsável logado.
Aluno, notificação ou inscrição de outro responsável responde 404.
"""
import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy import or_
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.aluno import Aluno
from escolinha.models.evento import Evento, InscricaoEvento
from escolinha.models.notificacao import Notificacao
from escolinha.models.pagamento import Pagamento
from escolinha.models.uniforme import CompraUniforme, Uniforme
from escolinha.routes.alunos_fastapi import aluno_com_status
from escolinha.schemas.aluno import AlunoContatoUpdate, AlunoRead
from escolinha.schemas.evento import EventoRead, InscricaoEventoCreate, InscricaoEventoRead
from escolinha.schemas.notificacao import NotificacaoRead
from escolinha.schemas.pagamento import PagamentoRead, PortalPagamentoCreate
from escolinha.schemas.uniforme import CompraUniformeCreate, CompraUniformeRead, UniformeRead
from escolinha.services.baixa_lote import MesesJaPagos, registrar_pagamentos_em_lote

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/portal",
    tags=["Portal do Responsável"],
)

ALUNO_NAO_ENCONTRADO = "Aluno não encontrado"


def _aluno_do_responsavel(db: Session, aluno_id: int, principal: auth.ResponsavelLogado) -> Aluno:
    db_aluno = db.query(Aluno).filter(
        Aluno.id == aluno_id,
        Aluno.responsavel_id == principal.responsavel_id,
        Aluno.ativo == True  # noqa: E712
    ).first()
    if db_aluno is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ALUNO_NAO_ENCONTRADO)
    return db_aluno


def _filiais_do_responsavel(db: Session, principal: auth.ResponsavelLogado):
    linhas = db.query(Aluno.filial_id).filter(
        Aluno.responsavel_id == principal.responsavel_id,
        Aluno.ativo == True,  # noqa: E712
        Aluno.filial_id.isnot(None)
    ).distinct().all()
    return [filial_id for (filial_id,) in linhas]


def _eventos_visiveis(db: Session, principal: auth.ResponsavelLogado):
    filiais = _filiais_do_responsavel(db, principal)
    return db.query(Evento).filter(or_(Evento.filial_id.is_(None), Evento.filial_id.in_(filiais)))


# --- NOTIFICAÇÕES ---

@router.get("/notificacoes", response_model=List[NotificacaoRead])
def read_notificacoes(db: Session = Depends(get_db), principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado)):
    return db.query(Notificacao).filter(Notificacao.responsavel_id == principal.responsavel_id) \
        .order_by(Notificacao.created_at.desc(), Notificacao.id.desc()).all()


@router.patch("/notificacoes/{notificacao_id}/lida", response_model=NotificacaoRead)
def marcar_notificacao_lida(
    notificacao_id: int,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    notificacao = db.query(Notificacao).filter(
        Notificacao.id == notificacao_id,
        Notificacao.responsavel_id == principal.responsavel_id
    ).first()
    if notificacao is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notificação não encontrada")
    notificacao.lida = True
    db.commit()
    db.refresh(notificacao)
    return notificacao


# --- ALUNOS ---

@router.patch("/alunos/{aluno_id}/contact", response_model=AlunoRead)
def update_contato_aluno(
    aluno_id: int,
    contato: AlunoContatoUpdate,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    """
    O responsável só altera os dados de contato; cadastro e unidade ficam com a escola.
    """
    db_aluno = _aluno_do_responsavel(db, aluno_id, principal)
    for key, value in contato.dict(exclude_unset=True).items():
        setattr(db_aluno, key, value)
    db.commit()
    db.refresh(db_aluno)
    return aluno_com_status(db_aluno)


@router.get("/alunos/{aluno_id}/pagamentos", response_model=List[PagamentoRead])
def read_pagamentos_aluno(
    aluno_id: int,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    _aluno_do_responsavel(db, aluno_id, principal)
    return db.query(Pagamento).filter(Pagamento.aluno_id == aluno_id) \
        .order_by(Pagamento.data_pagamento.desc(), Pagamento.id.desc()).all()


@router.post("/alunos/{aluno_id}/pagamentos", response_model=PagamentoRead, status_code=status.HTTP_201_CREATED)
def create_pagamento_aluno(
    aluno_id: int,
    pagamento: PortalPagamentoCreate,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    """
    Registra o pagamento informado pelo responsável, datado de hoje.
    """
    _aluno_do_responsavel(db, aluno_id, principal)
    try:
        pagamentos = registrar_pagamentos_em_lote(
            db,
            aluno_id=aluno_id,
            meses=[pagamento.mes_referencia],
            valor=pagamento.valor,
            data_pagamento=date.today(),
            forma_pagamento=pagamento.forma_pagamento,
            observacoes=pagamento.observacoes,
        )
    except MesesJaPagos as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(e), "meses_ja_pagos": e.meses},
        )
    return pagamentos[0]


@router.get("/alunos/{aluno_id}/inscricoes", response_model=List[InscricaoEventoRead])
def read_inscricoes_aluno(
    aluno_id: int,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    _aluno_do_responsavel(db, aluno_id, principal)
    return db.query(InscricaoEvento).filter(InscricaoEvento.aluno_id == aluno_id) \
        .order_by(InscricaoEvento.data_inscricao.desc()).all()


# --- EVENTOS ---

@router.get("/eventos", response_model=List[EventoRead])
def read_eventos(db: Session = Depends(get_db), principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado)):
    """Eventos gerais e das unidades onde os alunos do responsável estudam."""
    query = _eventos_visiveis(db, principal).filter(Evento.ativo == True)  # noqa: E712
    return query.order_by(Evento.data_evento).all()


@router.post("/eventos/{evento_id}/inscricoes", response_model=InscricaoEventoRead, status_code=status.HTTP_201_CREATED)
def inscrever_aluno(
    evento_id: int,
    inscricao: InscricaoEventoCreate,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    db_aluno = _aluno_do_responsavel(db, inscricao.aluno_id, principal)

    evento = _eventos_visiveis(db, principal).filter(Evento.id == evento_id).first()
    if evento is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Evento não encontrado")
    if not evento.ativo:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Evento não está aberto para inscrições.")

    inscricoes_validas = db.query(InscricaoEvento).filter(
        InscricaoEvento.evento_id == evento.id,
        InscricaoEvento.status != "cancelado"
    )
    if inscricoes_validas.filter(InscricaoEvento.aluno_id == db_aluno.id).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Aluno já inscrito neste evento.")
    if evento.vagas_maximas and inscricoes_validas.count() >= evento.vagas_maximas:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Não há vagas disponíveis neste evento.")

    db_inscricao = InscricaoEvento(
        aluno_id=db_aluno.id,
        evento_id=evento.id,
        observacoes=inscricao.observacoes,
        status="pendente",
    )
    db.add(db_inscricao)
    db.commit()
    db.refresh(db_inscricao)
    logger.info("Aluno %s inscrito no evento %s", db_aluno.id, evento.id)
    return db_inscricao


# --- UNIFORMES ---

@router.get("/uniformes", response_model=List[UniformeRead])
def read_uniformes(db: Session = Depends(get_db), principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado)):
    return db.query(Uniforme).filter(Uniforme.ativo == True).order_by(Uniforme.nome).all()  # noqa: E712


@router.post("/uniformes/{uniforme_id}/compras", response_model=CompraUniformeRead, status_code=status.HTTP_201_CREATED)
def comprar_uniforme(
    uniforme_id: int,
    compra: CompraUniformeCreate,
    db: Session = Depends(get_db),
    principal: auth.ResponsavelLogado = Depends(auth.get_responsavel_logado),
):
    db_aluno = _aluno_do_responsavel(db, compra.aluno_id, principal)

    uniforme = db.query(Uniforme).filter(Uniforme.id == uniforme_id, Uniforme.ativo == True).first()  # noqa: E712
    if uniforme is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Uniforme não encontrado")
    if uniforme.tamanhos:
        tamanhos = [t.strip().upper() for t in uniforme.tamanhos.split(",")]
        if compra.tamanho.strip().upper() not in tamanhos:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Tamanho indisponível para este uniforme.")
    if uniforme.estoque < compra.quantidade:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Estoque insuficiente.")

    valor_total = (Decimal(str(uniforme.preco)) * compra.quantidade).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    db_compra = CompraUniforme(
        aluno_id=db_aluno.id,
        uniforme_id=uniforme.id,
        tamanho=compra.tamanho,
        cor=compra.cor,
        quantidade=compra.quantidade,
        valor_total=float(valor_total),
        status="pendente",
    )
    uniforme.estoque -= compra.quantidade
    db.add(db_compra)
    db.commit()
    db.refresh(db_compra)
    logger.info("Compra de uniforme %s: aluno %s, %s unidade(s)", uniforme.id, db_aluno.id, compra.quantidade)
    return db_compra
