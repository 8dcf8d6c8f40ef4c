import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from escolinha.auth import get_password_hash
from escolinha.models.responsavel import Responsavel

logger = logging.getLogger(__name__)


class ResponsavelDuplicado(Exception):
    pass


def _mensagem_conflito(erro: IntegrityError) -> str:
    # Postgres: responsaveis_email_key / SQLite: UNIQUE constraint failed: responsaveis.email
    texto = str(erro.orig).lower()
    if "cpf" in texto:
        return "Este CPF de responsável já está cadastrado."
    if "email" in texto:
        return "Este email de responsável já está cadastrado."
    return "Responsável já cadastrado."


def criar_responsavel(db: Session, dados) -> Responsavel:
    """
    Adiciona o responsável à transação corrente (flush, sem commit).
    Conflitos de email/CPF são detectados pelo erro do banco, não por consulta prévia.
    """
    responsavel = Responsavel(
        nome=dados.nome,
        email=dados.email,
        telefone=dados.telefone,
        cpf=dados.cpf,
        parentesco=dados.parentesco,
        hashed_password=get_password_hash(dados.senha),
    )
    db.add(responsavel)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Responsável duplicado: %s", e.orig)
        raise ResponsavelDuplicado(_mensagem_conflito(e))
    return responsavel
