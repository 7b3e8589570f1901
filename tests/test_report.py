# tests/test_report.py

import pytest
from salario.folha.engine import compute_compensation
from salario.folha.models import Configuracao, EntradaSalario
from salario.folha.report import build_composition, build_line_items, build_summary


def calcular(**dados):
    entrada = EntradaSalario(**dados)
    return entrada, compute_compensation(entrada, Configuracao())


def test_resumo_tem_os_tres_totais():
    _, resultado = calcular(salario_base=3000.00)
    resumo = build_summary(resultado)
    assert resumo == {
        "salario_bruto": resultado.salario_bruto,
        "total_descontos": resultado.total_descontos,
        "salario_liquido": resultado.salario_liquido,
    }


def test_composicao_omite_categorias_zeradas():
    entrada, resultado = calcular(salario_base=3000.00)
    composicao = build_composition(entrada, resultado)
    assert composicao == [{"categoria": "Fixo", "valor": pytest.approx(3900.00)}]


def test_composicao_completa():
    entrada, resultado = calcular(
        salario_base=3000.00,
        faturamento_mensal=100000.00,
        horas_50=2.0,
        chamada_plantao=150.00,
    )
    composicao = build_composition(entrada, resultado)

    assert [c["categoria"] for c in composicao] == [
        "Fixo",
        "Variável",
        "Horas Extras",
        "Chamada Plantão",
    ]
    assert sum(c["valor"] for c in composicao) == pytest.approx(resultado.salario_bruto)


def test_tabela_detalhada():
    _, resultado = calcular(salario_base=6000.00, descontos_adicionais=120.00)
    df = build_line_items(resultado)

    assert list(df.columns) == ["Componente", "Valor", "Tipo"]
    assert len(df) == 13
    assert df.iloc[-1]["Componente"] == "Salário Líquido"
    assert df.iloc[-1]["Valor"] == pytest.approx(resultado.salario_liquido)

    descontos = df[df["Tipo"] == "desconto"]["Valor"].sum()
    assert descontos == pytest.approx(resultado.total_descontos)
