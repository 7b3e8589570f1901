import math
import re
from typing import Any

# Prefixo numérico aceito (equivalente ao parseFloat/parseInt do formulário):
# "12,50abc" vira 12.5, "abc" vira 0.
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _valor_seguro(valor: float) -> float:
    """Valores negativos ou não finitos viram 0."""
    if not math.isfinite(valor) or valor < 0:
        return 0.0
    return valor


def parse_monetary_text(value: Any) -> float:
    """Converte texto monetário no padrão brasileiro ("1.234,56") para float.

    Pontos são separadores de milhar e a primeira vírgula é o separador
    decimal. Texto vazio, inválido, negativo ou não finito retorna 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return _valor_seguro(float(value))

    cleaned = str(value).replace(".", "").replace(",", ".", 1)
    match = _FLOAT_PREFIX.match(cleaned)
    if not match:
        return 0.0
    return _valor_seguro(float(match.group(1)))


def _parse_int_prefix(text: str):
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_duration_text(value: Any) -> float:
    """Converte "HH:MM" (ou só as horas, "10") em horas decimais.

    "01:30" -> 1.5. Texto vazio ou inválido retorna 0.
    """
    if not value:
        return 0.0

    partes = str(value).split(":")
    horas = _parse_int_prefix(partes[0])
    if horas is None:
        return 0.0

    minutos = 0
    if len(partes) > 1 and partes[1]:
        minutos = _parse_int_prefix(partes[1]) or 0

    return _valor_seguro(horas + minutos / 60)
