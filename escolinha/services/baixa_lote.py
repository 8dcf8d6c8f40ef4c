# -*- coding: utf-8 -*-
"""
Baixa em lote: registra um pagamento por mês de referência.

Todos os meses entram na mesma transação. Se qualquer inserção falhar, nada
é gravado; o chamador nunca vê um lote pela metade.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from escolinha.models.pagamento import Pagamento

logger = logging.getLogger(__name__)


class MesesJaPagos(Exception):
    def __init__(self, meses):
        self.meses = sorted(meses)
        super().__init__(f"Meses já pagos: {', '.join(self.meses)}")


def normalizar_meses(meses) -> List[str]:
    """Remove repetições mantendo a ordem em que os meses foram enviados."""
    vistos = []
    for mes in meses:
        if mes not in vistos:
            vistos.append(mes)
    return vistos


def registrar_pagamentos_em_lote(
    db: Session,
    aluno_id: int,
    meses: List[str],
    valor: float,
    data_pagamento: date,
    forma_pagamento: str,
    observacoes: Optional[str] = None,
    plano_id: Optional[int] = None,
) -> List[Pagamento]:
    meses = normalizar_meses(meses)

    # Não protege contra dois lotes concorrentes: não há unicidade (aluno, mês) no banco
    ja_pagos = {
        mes for (mes,) in db.query(Pagamento.mes_referencia)
        .filter(Pagamento.aluno_id == aluno_id, Pagamento.mes_referencia.in_(meses))
        .all()
    }
    if ja_pagos:
        raise MesesJaPagos(ja_pagos)

    pagamentos = [
        Pagamento(
            aluno_id=aluno_id,
            plano_id=plano_id,
            valor=valor,
            mes_referencia=mes,
            data_pagamento=data_pagamento,
            forma_pagamento=forma_pagamento,
            observacoes=observacoes,
            status="pago",
        )
        for mes in meses
    ]
    try:
        db.add_all(pagamentos)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Falha na baixa em lote do aluno %s; nenhum mês foi gravado", aluno_id)
        raise

    for pagamento in pagamentos:
        db.refresh(pagamento)
    logger.info("Baixa em lote: aluno %s, meses %s", aluno_id, ", ".join(meses))
    return pagamentos
