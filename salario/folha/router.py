# No arquivo: salario/folha/router.py

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from salario.folha import engine, report
from salario.folha.models import Configuracao, EntradaSalarioTexto
from salario.logging_config import log

router = APIRouter(prefix="/api/v1/salario", tags=["Calculadora Salarial"])


# --- MODELOS ---


class CalculoRequest(EntradaSalarioTexto):
    # Sem configuração, valem os parâmetros globais do .env
    configuracao: Optional[Configuracao] = None


class CalculoResponse(BaseModel):
    resultado: dict
    resumo: dict
    composicao: list
    detalhamento: list


# --- ENDPOINTS ---


@router.get("/configuracao")
def get_configuracao():
    return Configuracao.from_settings()


@router.post("/calcular", response_model=CalculoResponse)
def calcular_salario(request: CalculoRequest):
    entrada = request.to_entrada()
    config = request.configuracao or Configuracao.from_settings()

    try:
        resultado = engine.compute_compensation(entrada, config)
    except Exception as e:
        log.exception(f"Erro ao calcular salário: {e}")
        raise HTTPException(status_code=500, detail=f"Falha no cálculo: {e}")

    return {
        "resultado": resultado.model_dump(),
        "resumo": report.build_summary(resultado),
        "composicao": report.build_composition(entrada, resultado),
        "detalhamento": report.build_line_items(resultado).to_dict(orient="records"),
    }
