# -*- coding: utf-8 -*-
"""
Cálculo do valor total de um plano financeiro.

A mesma função atende a pré-visualização do formulário e o valor gravado,
para que os dois nunca divirjam.
"""
from decimal import ROUND_HALF_UP, Decimal

CENTAVOS = Decimal("0.01")


def _decimal(valor) -> Decimal:
    # str() evita carregar o ruído binário do float
    return valor if isinstance(valor, Decimal) else Decimal(str(valor))


def calcular_valor_total(valor_mensal, quantidade_meses, desconto_percentual=0) -> Decimal:
    """
    valor_total = valor_mensal × quantidade_meses × (1 − desconto / 100),
    arredondado (meio para cima) uma única vez, em centavos.
    """
    bruto = _decimal(valor_mensal) * int(quantidade_meses)
    fator = 1 - _decimal(desconto_percentual or 0) / 100
    return (bruto * fator).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
