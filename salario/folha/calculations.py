# No arquivo: salario/folha/calculations.py

"""
As "Ferramentas" (A Lógica de Cálculo)
Tabelas progressivas de INSS e IRRF com as regras especiais de 2026.
"""

import math
from typing import List, Tuple

from salario.logging_config import log

# Formato das tabelas: (limite_da_faixa, aliquota, deducao_da_parcela)
Faixa = Tuple[float, float, float]

# --- CONSTANTES DE INSS (2026) ---
INSS_TABLE_2026: List[Faixa] = [
    (1621.00, 0.075, 0.0),
    (2902.84, 0.09, 24.32),
    (4354.27, 0.12, 111.40),
    (8475.55, 0.14, 198.49),
]
INSS_LIMITE_TETO_2026 = 8475.55
INSS_TETO_2026 = 988.09

# --- CONSTANTES DE IRRF (2026) ---
IRRF_DEDUCAO_DEPENDENTE_2026 = 189.59
IRRF_DESCONTO_SIMPLIFICADO_2026 = 607.20

IRRF_TABLE_2026: List[Faixa] = [
    (2428.80, 0.0, 0.0),  # Isento
    (2826.65, 0.075, 182.16),
    (3751.05, 0.15, 394.16),
    (4664.68, 0.225, 675.49),
    # Acima de 4664.68 é a última faixa
    (float("inf"), 0.275, 908.73),
]

# Regra especial 2026: isenção total até 5.000,00 e redução linear até 7.350,00
IRRF_LIMITE_ISENCAO_2026 = 5000.00
IRRF_LIMITE_REDUCAO_2026 = 7350.00
IRRF_REDUCAO_FIXA_2026 = 978.62
IRRF_REDUCAO_FATOR_2026 = 0.133145


# --- FUNÇÕES DE CÁLCULO ---


def calc_faixa_progressiva(tabela: List[Faixa], base: float) -> float:
    """
    Aplica (base * aliquota) - deducao da primeira faixa cujo limite >= base.
    Acima do último limite explícito vale a última faixa da tabela.
    """
    for limite, aliquota, deducao in tabela:
        if base <= limite:
            return (base * aliquota) - deducao

    limite, aliquota, deducao = tabela[-1]
    return (base * aliquota) - deducao


def calc_inss(salario_bruto: float) -> float:
    """
    Calcula o INSS progressivo sobre o salário bruto, respeitando o teto.
    """
    if not math.isfinite(salario_bruto) or salario_bruto < 0:
        log.warning(f"[Cálculo] INSS: base inválida ({salario_bruto}), tratada como 0.")
        salario_bruto = 0.0

    if salario_bruto > INSS_LIMITE_TETO_2026:
        log.debug(f"[Cálculo] INSS: Base R$ {salario_bruto} acima do teto, R$ {INSS_TETO_2026}")
        return INSS_TETO_2026

    inss_calculado = calc_faixa_progressiva(INSS_TABLE_2026, salario_bruto)
    log.debug(f"[Cálculo] INSS: Base R$ {salario_bruto}, Calculado R$ {inss_calculado}")
    return inss_calculado


def calc_deducao_irrf(inss_descontado: float, dependentes: int) -> float:
    """
    Usa a dedução mais vantajosa: legal (INSS + dependentes) ou simplificada.
    """
    deducao_legal = inss_descontado + (dependentes * IRRF_DEDUCAO_DEPENDENTE_2026)
    return max(deducao_legal, IRRF_DESCONTO_SIMPLIFICADO_2026)


def calc_reducao_irrf(salario_bruto: float) -> float:
    """Redução adicional da faixa 5.000,01 a 7.350,00 (0 fora dela)."""
    if IRRF_LIMITE_ISENCAO_2026 < salario_bruto <= IRRF_LIMITE_REDUCAO_2026:
        return IRRF_REDUCAO_FIXA_2026 - (IRRF_REDUCAO_FATOR_2026 * salario_bruto)
    return 0.0


def calc_irrf(salario_bruto: float, inss_descontado: float, dependentes: int) -> float:
    """
    Calcula o IRRF retido na fonte.

    1. Isenção total se o bruto for até 5.000,00.
    2. Base = bruto - maior dedução (legal ou simplificada), nunca negativa.
    3. Aplica a tabela progressiva.
    4. Aplica a redução da faixa de transição.
    """
    if salario_bruto <= IRRF_LIMITE_ISENCAO_2026:
        log.debug(f"[Cálculo] IRRF: Bruto R$ {salario_bruto} isento.")
        return 0.0

    deducao = calc_deducao_irrf(inss_descontado, dependentes)
    base_de_calculo_irrf = max(0.0, salario_bruto - deducao)

    irrf_calculado = calc_faixa_progressiva(IRRF_TABLE_2026, base_de_calculo_irrf)
    irrf_calculado -= calc_reducao_irrf(salario_bruto)

    log.debug(
        f"[Cálculo] IRRF: Bruto R$ {salario_bruto}, Dedução R$ {deducao}, Base R$ {base_de_calculo_irrf}, Calculado R$ {irrf_calculado}"
    )

    # IRRF nunca pode ser negativo
    return max(0.0, irrf_calculado)
