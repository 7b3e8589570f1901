# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from api import app

client = TestClient(app)

CONFIG = {
    "taxa_comissao": 0.0005,
    "divisor_participacao": 36,
    "numero_dependentes": 0,
    "valor_plantao": 0,
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_configuracao_padrao():
    response = client.get("/api/v1/salario/configuracao")
    assert response.status_code == 200
    assert set(response.json()) == set(CONFIG)


def test_calcular_a_partir_do_texto_do_formulario():
    # Arrange
    payload = {"salario_base": "3.000,00", "horas_50": "", "configuracao": CONFIG}
    # Act
    response = client.post("/api/v1/salario/calcular", json=payload)
    # Assert
    assert response.status_code == 200
    body = response.json()
    assert body["resultado"]["salario_bruto"] == pytest.approx(3900.00)
    assert body["resumo"]["salario_liquido"] == pytest.approx(3543.40, abs=1e-6)
    assert body["composicao"] == [{"categoria": "Fixo", "valor": pytest.approx(3900.00)}]
    assert body["detalhamento"][-1]["Componente"] == "Salário Líquido"


def test_texto_invalido_vira_zero():
    payload = {"salario_base": "abc", "horas_100": "xx:yy", "configuracao": CONFIG}
    response = client.post("/api/v1/salario/calcular", json=payload)
    assert response.status_code == 200
    assert response.json()["resultado"]["salario_liquido"] == 0.0


def test_configuracao_invalida_retorna_422():
    payload = {"salario_base": "3.000,00", "configuracao": {**CONFIG, "divisor_participacao": 0}}
    response = client.post("/api/v1/salario/calcular", json=payload)
    assert response.status_code == 422


def test_configuracao_infinita_retorna_422():
    # JSON com o token Infinity, aceito pelo parser do FastAPI
    corpo = (
        '{"salario_base": "3.000,00", "configuracao": '
        '{"taxa_comissao": Infinity, "divisor_participacao": 36, '
        '"numero_dependentes": 0, "valor_plantao": 0}}'
    )
    response = client.post(
        "/api/v1/salario/calcular",
        content=corpo,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
