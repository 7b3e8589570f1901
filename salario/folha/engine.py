# No arquivo: salario/folha/engine.py

"""
Motor de remuneração: deriva comissão, participação, periculosidade e horas
extras, monta o salário bruto e aplica INSS e IRRF.
A ordem dos passos importa, cada valor alimenta os seguintes.
"""

from salario.folha import calculations
from salario.folha.models import Configuracao, EntradaSalario, ResultadoCalculo
from salario.logging_config import log

PERCENTUAL_PARTICIPACAO = 0.01
PERCENTUAL_PERICULOSIDADE = 0.30
DIVISOR_HORAS_MES = 220
ADICIONAL_HE50 = 1.5
ADICIONAL_HE100 = 2.0


def compute_compensation(
    entrada: EntradaSalario, config: Configuracao
) -> ResultadoCalculo:
    # 1. Comissão
    comissao = entrada.faturamento_mensal * config.taxa_comissao

    # 2. Participação
    participacao = (
        entrada.faturamento_mensal * PERCENTUAL_PARTICIPACAO
    ) / config.divisor_participacao

    # 3. Adicional de Periculosidade (30% do base)
    periculosidade = entrada.salario_base * PERCENTUAL_PERICULOSIDADE

    # 4. Base de cálculo da hora (sem participação)
    base_calculo_hora = entrada.salario_base + comissao + periculosidade

    # 5. Valor hora padrão
    valor_hora_padrao = base_calculo_hora / DIVISOR_HORAS_MES

    # 6. Horas extras
    valor_he50 = valor_hora_padrao * ADICIONAL_HE50
    total_he50 = valor_he50 * entrada.horas_50

    valor_he100 = valor_hora_padrao * ADICIONAL_HE100
    total_he100 = valor_he100 * entrada.horas_100

    chamada_plantao = entrada.chamada_plantao + config.valor_plantao

    # 7. Salário bruto
    salario_bruto = (
        entrada.salario_base
        + comissao
        + participacao
        + periculosidade
        + total_he50
        + total_he100
        + chamada_plantao
    )
    log.debug(
        f"[Motor] Comissão R$ {comissao}, Participação R$ {participacao}, "
        f"Periculosidade R$ {periculosidade}, Hora R$ {valor_hora_padrao}, "
        f"HE50 R$ {total_he50}, HE100 R$ {total_he100}, Bruto R$ {salario_bruto}"
    )

    # 8. Impostos
    inss = calculations.calc_inss(salario_bruto)
    irrf = calculations.calc_irrf(salario_bruto, inss, config.numero_dependentes)

    # 9. Salário líquido
    total_descontos = inss + irrf + entrada.descontos_adicionais
    salario_liquido = salario_bruto - total_descontos

    log.info(
        f"[Motor] Bruto R$ {salario_bruto:.2f} | Descontos R$ {total_descontos:.2f} | Líquido R$ {salario_liquido:.2f}"
    )

    return ResultadoCalculo(
        comissao=comissao,
        participacao=participacao,
        periculosidade=periculosidade,
        base_calculo_hora=base_calculo_hora,
        valor_hora_padrao=valor_hora_padrao,
        valor_he50=valor_he50,
        valor_he100=valor_he100,
        total_he50=total_he50,
        total_he100=total_he100,
        chamada_plantao=chamada_plantao,
        salario_bruto=salario_bruto,
        inss=inss,
        irrf=irrf,
        descontos_adicionais=entrada.descontos_adicionais,
        total_descontos=total_descontos,
        salario_liquido=salario_liquido,
    )
