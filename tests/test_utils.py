# tests/test_utils.py

import pytest
from salario.shared.utils import parse_duration_text, parse_monetary_text


@pytest.mark.parametrize(
    "texto, esperado",
    [
        ("1.234,56", 1234.56),
        ("3.000,00", 3000.0),
        ("0,75", 0.75),
        ("12,5x", 12.5),
        ("1e5", 100000.0),
        ("2,5e2", 250.0),
        ("1e", 1.0),
        ("1e400", 0.0),
        ("150", 150.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("-5,00", 0.0),
    ],
)
def test_parse_monetary_text(texto, esperado):
    assert parse_monetary_text(texto) == pytest.approx(esperado)


def test_parse_monetary_text_aceita_numero():
    assert parse_monetary_text(2500) == 2500.0
    assert parse_monetary_text(float("nan")) == 0.0
    assert parse_monetary_text(float("inf")) == 0.0


@pytest.mark.parametrize(
    "texto, esperado",
    [
        ("01:30", 1.5),
        ("00:45", 0.75),
        ("10", 10.0),
        ("02:", 2.0),
        ("", 0.0),
        (None, 0.0),
        ("ab:30", 0.0),
        ("-1:00", 0.0),
    ],
)
def test_parse_duration_text(texto, esperado):
    assert parse_duration_text(texto) == pytest.approx(esperado)
