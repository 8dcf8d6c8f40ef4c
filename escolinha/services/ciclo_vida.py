import logging

from sqlalchemy.orm import Session

from escolinha.models.ciclo_vida import Arquivavel, Removivel

logger = logging.getLogger(__name__)


def excluir(db: Session, obj):
    """Arquiva o que é arquivável, apaga o que é removível."""
    if isinstance(obj, Arquivavel):
        obj.arquivar()
        logger.info("%s %s arquivado", type(obj).__name__, obj.id)
    elif isinstance(obj, Removivel):
        db.delete(obj)
        logger.info("%s %s removido", type(obj).__name__, obj.id)
    else:
        raise TypeError(f"{type(obj).__name__} não declara ciclo de vida")
    db.commit()
