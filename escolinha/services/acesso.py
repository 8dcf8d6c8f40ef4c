# -*- coding: utf-8 -*-
"""
Regras de acesso por unidade (multi-tenant).

Política única: linha de outra unidade (ou de outro responsável) é tratada
como inexistente (404), para não vazar a existência do registro. Papel
insuficiente dentro do próprio reino responde 403 (ver ``auth.get_admin``).
"""
from fastapi import HTTPException, status

from escolinha.auth import Admin, Gestor
from escolinha.models.filial import Filial


def filtrar_por_filial(query, principal, coluna_filial):
    """Aplica o filtro de unidade a uma query. Administrador vê tudo."""
    if isinstance(principal, Gestor):
        return query.filter(coluna_filial == principal.filial_id)
    return query


def carimbar_filial(dados: dict, principal) -> dict:
    """
    Força o ``filial_id`` do gestor no payload de escrita, sobrescrevendo em
    silêncio qualquer valor enviado pelo cliente.
    """
    if isinstance(principal, Gestor):
        dados["filial_id"] = principal.filial_id
    return dados


def pode_ver_filial(principal, filial_id) -> bool:
    if isinstance(principal, Admin):
        return True
    return isinstance(principal, Gestor) and filial_id == principal.filial_id


def garantir_mesma_filial(principal, filial_id, detail="Registro não encontrado"):
    if not pode_ver_filial(principal, filial_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def obter_ou_404(db, modelo, obj_id, principal, detail, apenas_ativos=True):
    """
    Busca um registro com ``filial_id`` respeitando a unidade do principal.
    Registros arquivados também respondem 404.
    """
    query = db.query(modelo).filter(modelo.id == obj_id)
    if apenas_ativos:
        query = query.filter(modelo.ativo == True)  # noqa: E712
    obj = query.first()
    if obj is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    garantir_mesma_filial(principal, obj.filial_id, detail)
    return obj


def validar_filial(db, filial_id, detail="Filial não encontrada"):
    """``filial_id`` vazio significa sem unidade; senão a filial precisa existir e estar ativa."""
    if filial_id is None:
        return
    if not db.query(Filial).filter(Filial.id == filial_id, Filial.ativo == True).first():  # noqa: E712
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
