# No arquivo: salario/folha/report.py

"""
Dados prontos para a camada de apresentação: cartões de resumo, composição
do bruto (gráfico) e a tabela detalhada.
"""

from typing import Dict, List

import pandas as pd

from salario.folha.models import EntradaSalario, ResultadoCalculo


def build_summary(resultado: ResultadoCalculo) -> Dict[str, float]:
    """Os três totais exibidos nos cartões de resumo."""
    return {
        "salario_bruto": resultado.salario_bruto,
        "total_descontos": resultado.total_descontos,
        "salario_liquido": resultado.salario_liquido,
    }


def build_composition(
    entrada: EntradaSalario, resultado: ResultadoCalculo
) -> List[Dict[str, object]]:
    """
    Composição do salário bruto por categoria, para o gráfico.
    Categorias zeradas ficam de fora.
    """
    categorias = [
        ("Fixo", entrada.salario_base + resultado.periculosidade),
        ("Variável", resultado.comissao + resultado.participacao),
        ("Horas Extras", resultado.total_he50 + resultado.total_he100),
        ("Chamada Plantão", resultado.chamada_plantao),
    ]
    return [
        {"categoria": categoria, "valor": valor}
        for categoria, valor in categorias
        if valor > 0
    ]


def build_line_items(resultado: ResultadoCalculo) -> pd.DataFrame:
    linhas = [
        ("Base de Cálculo da Hora", resultado.base_calculo_hora, "base"),
        ("Valor Hora Padrão (÷220)", resultado.valor_hora_padrao, "base"),
        ("Comissão", resultado.comissao, "provento"),
        ("Participação", resultado.participacao, "provento"),
        ("Periculosidade (30%)", resultado.periculosidade, "provento"),
        ("Horas Extras 50%", resultado.total_he50, "provento"),
        ("Horas Extras 100%", resultado.total_he100, "provento"),
        ("Chamada Plantão", resultado.chamada_plantao, "provento"),
        ("Salário Bruto", resultado.salario_bruto, "subtotal"),
        ("INSS (Progressivo)", resultado.inss, "desconto"),
        ("IRRF (Retido na Fonte)", resultado.irrf, "desconto"),
        ("Descontos Adicionais", resultado.descontos_adicionais, "desconto"),
        ("Salário Líquido", resultado.salario_liquido, "liquido"),
    ]
    return pd.DataFrame(linhas, columns=["Componente", "Valor", "Tipo"])
