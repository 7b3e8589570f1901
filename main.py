# main.py
# Executa o cálculo a partir da linha de comando, com os valores como são
# digitados no formulário ("3.000,00", "01:30").

import argparse

import pandas as pd

from salario.folha.engine import compute_compensation
from salario.folha.models import Configuracao, EntradaSalarioTexto
from salario.folha.report import build_line_items, build_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculadora de salário líquido (regras 2026)")
    parser.add_argument("--salario-base", default="")
    parser.add_argument("--faturamento-mensal", default="")
    parser.add_argument("--horas-50", default="", help="HH:MM")
    parser.add_argument("--horas-100", default="", help="HH:MM")
    parser.add_argument("--chamada-plantao", default="")
    parser.add_argument("--descontos-adicionais", default="")
    parser.add_argument("--dependentes", type=int, default=None)
    return parser


def run(args: argparse.Namespace) -> pd.DataFrame:
    entrada = EntradaSalarioTexto(
        salario_base=args.salario_base,
        faturamento_mensal=args.faturamento_mensal,
        horas_50=args.horas_50,
        horas_100=args.horas_100,
        chamada_plantao=args.chamada_plantao,
        descontos_adicionais=args.descontos_adicionais,
    ).to_entrada()

    config = Configuracao.from_settings()
    if args.dependentes is not None:
        config = Configuracao(**{**config.model_dump(), "numero_dependentes": args.dependentes})

    resultado = compute_compensation(entrada, config)

    for nome, valor in build_summary(resultado).items():
        print(f"{nome}: {valor:.2f}")

    return build_line_items(resultado)


if __name__ == "__main__":
    df_detalhado = run(build_parser().parse_args())
    print(df_detalhado.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
