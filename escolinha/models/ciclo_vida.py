# -*- coding: utf-8 -*-
"""
Capacidades de ciclo de vida das entidades.

Entidades *arquiváveis* (aluno, professor, turma, matrícula, filial, plano) nunca saem
do banco: excluir significa desligar ``ativo``. Entidades *removíveis*
(pagamento) são apagadas fisicamente. As duas não se misturam.
"""
from sqlalchemy import Boolean, Column


class Arquivavel:
    ativo = Column(Boolean, nullable=False, default=True)

    def arquivar(self):
        self.ativo = False


class Removivel:
    pass
