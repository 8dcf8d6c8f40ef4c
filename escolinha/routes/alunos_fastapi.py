# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Alunos.
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from escolinha import auth, config
from escolinha.database import get_db
from escolinha.image_utils import process_avatar_image, upload_foto_aluno
from escolinha.models.aluno import Aluno
from escolinha.models.responsavel import Responsavel
from escolinha.schemas.aluno import AlunoCreate, AlunoRead, AlunoUpdate, StatusPagamentoRead
from escolinha.schemas.responsavel import AlunoCompletoCreate, AlunoCompletoRead
from escolinha.services.acesso import carimbar_filial, filtrar_por_filial, obter_ou_404, validar_filial
from escolinha.services.ciclo_vida import excluir
from escolinha.services.responsaveis import ResponsavelDuplicado, criar_responsavel
from escolinha.services.status_pagamento import calcular_status_pagamento, derivar_status

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Alunos"],
    responses={404: {"description": "Aluno não encontrado"}},
)

NAO_ENCONTRADO = "Aluno não encontrado"


def aluno_com_status(aluno: Aluno, hoje: Optional[date] = None) -> AlunoRead:
    aluno_read = AlunoRead.from_orm(aluno)
    status_pagamento = derivar_status(aluno.pagamentos, hoje or date.today())
    aluno_read.status_pagamento = StatusPagamentoRead.from_orm(status_pagamento)
    return aluno_read


def _validar_referencias(db: Session, dados: dict):
    validar_filial(db, dados.get("filial_id"))
    if dados.get("responsavel_id") is not None:
        if not db.query(Responsavel).filter(Responsavel.id == dados["responsavel_id"]).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Responsável não encontrado")


@router.get("/api/alunos", response_model=List[AlunoRead])
def read_alunos(
    nome: Optional[str] = None,
    filial_id: Optional[int] = None,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    """
    Lista os alunos ativos visíveis ao usuário, com a situação financeira de cada um.
    """
    query = db.query(Aluno).filter(Aluno.ativo == True)  # noqa: E712
    query = filtrar_por_filial(query, principal, Aluno.filial_id)
    if nome:
        query = query.filter(Aluno.nome.ilike(f"%{nome}%"))
    if filial_id is not None:
        query = query.filter(Aluno.filial_id == filial_id)

    hoje = date.today()
    return [aluno_com_status(a, hoje) for a in query.order_by(Aluno.created_at.desc(), Aluno.id.desc()).all()]


@router.get("/api/alunos/{aluno_id}", response_model=AlunoRead)
def read_aluno(aluno_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_aluno = obter_ou_404(db, Aluno, aluno_id, principal, NAO_ENCONTRADO)
    return aluno_com_status(db_aluno)


@router.get("/api/alunos/{aluno_id}/status-pagamento", response_model=StatusPagamentoRead)
def read_status_pagamento(aluno_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    obter_ou_404(db, Aluno, aluno_id, principal, NAO_ENCONTRADO)
    return StatusPagamentoRead.from_orm(calcular_status_pagamento(db, aluno_id))


@router.post("/api/alunos", response_model=AlunoRead, status_code=status.HTTP_201_CREATED)
def create_aluno(aluno: AlunoCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    dados = carimbar_filial(aluno.dict(exclude_unset=True), principal)
    _validar_referencias(db, dados)

    db_aluno = Aluno(**dados)
    db.add(db_aluno)
    db.commit()
    db.refresh(db_aluno)
    logger.info("Aluno %s cadastrado na filial %s", db_aluno.id, db_aluno.filial_id)
    return aluno_com_status(db_aluno)


@router.post("/api/alunos-completo", response_model=AlunoCompletoRead, status_code=status.HTTP_201_CREATED)
def create_aluno_completo(
    dados: AlunoCompletoCreate,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    """
    Cria o responsável e o aluno vinculado a ele numa única transação.
    """
    dados_aluno = carimbar_filial(dados.aluno.dict(exclude_unset=True), principal)
    _validar_referencias(db, dados_aluno)

    try:
        responsavel = criar_responsavel(db, dados.responsavel)
    except ResponsavelDuplicado as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    db_aluno = Aluno(**dados_aluno)
    db_aluno.responsavel_obj = responsavel
    if not db_aluno.nome_responsavel:
        db_aluno.nome_responsavel = responsavel.nome
    if not db_aluno.telefone_responsavel:
        db_aluno.telefone_responsavel = responsavel.telefone
    db.add(db_aluno)
    db.commit()
    db.refresh(db_aluno)
    db.refresh(responsavel)

    logger.info("Aluno %s e responsável %s cadastrados", db_aluno.id, responsavel.id)
    return {
        "aluno": aluno_com_status(db_aluno),
        "responsavel": responsavel,
        "message": "Aluno e responsável cadastrados com sucesso",
    }


@router.put("/api/alunos/{aluno_id}", response_model=AlunoRead)
@router.patch("/api/alunos/{aluno_id}", response_model=AlunoRead)
def update_aluno(
    aluno_id: int,
    aluno_update: AlunoUpdate,
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    db_aluno = obter_ou_404(db, Aluno, aluno_id, principal, NAO_ENCONTRADO)

    # nome é obrigatório: null explícito é ignorado
    update_data = {
        k: v for k, v in aluno_update.dict(exclude_unset=True).items()
        if v is not None or k != "nome"
    }
    # Gestor nunca move o aluno para outra unidade
    update_data = carimbar_filial(update_data, principal)
    _validar_referencias(db, update_data)
    for key, value in update_data.items():
        setattr(db_aluno, key, value)

    db.commit()
    db.refresh(db_aluno)
    return aluno_com_status(db_aluno)


@router.delete("/api/alunos/{aluno_id}")
def delete_aluno(aluno_id: int, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    """
    Exclusão lógica: o aluno deixa de aparecer, mas o histórico financeiro fica.
    """
    db_aluno = obter_ou_404(db, Aluno, aluno_id, principal, NAO_ENCONTRADO)
    excluir(db, db_aluno)
    return {"success": True}


@router.post("/api/alunos/{aluno_id}/foto", response_model=AlunoRead)
def upload_foto(
    aluno_id: int,
    foto: UploadFile = File(...),
    db: Session = Depends(get_db),
    principal=Depends(auth.get_principal_equipe),
):
    db_aluno = obter_ou_404(db, Aluno, aluno_id, principal, NAO_ENCONTRADO)

    if not config.storage_configured():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Armazenamento de fotos não configurado.")

    processed_image, mime_type = process_avatar_image(foto.file)
    if not processed_image:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Arquivo enviado não é uma imagem válida.")

    db_aluno.foto_url = upload_foto_aluno(db_aluno.id, foto.filename or "foto", processed_image, mime_type)
    db.commit()
    db.refresh(db_aluno)
    return aluno_com_status(db_aluno)
