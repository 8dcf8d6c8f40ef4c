# Importa todos os modelos para o SQLAlchemy registrar os relacionamentos por nome
from escolinha.models import (  # noqa: F401
    aluno,
    evento,
    filial,
    gestor_unidade,
    matricula,
    notificacao,
    pagamento,
    plano_financeiro,
    professor,
    responsavel,
    turma,
    uniforme,
    usuario,
)
