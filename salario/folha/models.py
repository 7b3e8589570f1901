# salario/folha/models.py
# Moldes dos dados que entram e saem do motor de cálculo.

from pydantic import BaseModel, ConfigDict, Field

from salario.config import settings
from salario.shared.utils import parse_duration_text, parse_monetary_text


class EntradaSalario(BaseModel):
    """Valores do mês já convertidos para número (horas em decimal)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    salario_base: float = Field(default=0.0, ge=0)
    faturamento_mensal: float = Field(default=0.0, ge=0)
    horas_50: float = Field(default=0.0, ge=0)
    horas_100: float = Field(default=0.0, ge=0)
    chamada_plantao: float = Field(default=0.0, ge=0)
    descontos_adicionais: float = Field(default=0.0, ge=0)


class EntradaSalarioTexto(BaseModel):
    """Campos do formulário como foram digitados ("1.234,56", "01:30")."""

    salario_base: str = ""
    faturamento_mensal: str = ""
    horas_50: str = ""
    horas_100: str = ""
    chamada_plantao: str = ""
    descontos_adicionais: str = ""

    def to_entrada(self) -> EntradaSalario:
        return EntradaSalario(
            salario_base=parse_monetary_text(self.salario_base),
            faturamento_mensal=parse_monetary_text(self.faturamento_mensal),
            horas_50=parse_duration_text(self.horas_50),
            horas_100=parse_duration_text(self.horas_100),
            chamada_plantao=parse_monetary_text(self.chamada_plantao),
            descontos_adicionais=parse_monetary_text(self.descontos_adicionais),
        )


class Configuracao(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    taxa_comissao: float = Field(default=0.0005, ge=0)
    divisor_participacao: float = Field(default=36, gt=0)
    numero_dependentes: int = Field(default=0, ge=0)
    valor_plantao: float = Field(default=0.0, ge=0)

    @classmethod
    def from_settings(cls) -> "Configuracao":
        return cls(
            taxa_comissao=settings.TAXA_COMISSAO,
            divisor_participacao=settings.DIVISOR_PARTICIPACAO,
            numero_dependentes=settings.NUMERO_DEPENDENTES,
            valor_plantao=settings.VALOR_PLANTAO,
        )


class ResultadoCalculo(BaseModel):
    model_config = ConfigDict(frozen=True)

    comissao: float
    participacao: float
    periculosidade: float
    base_calculo_hora: float
    valor_hora_padrao: float
    valor_he50: float
    valor_he100: float
    total_he50: float
    total_he100: float
    chamada_plantao: float  # Chamada informada + plantão fixo da configuração
    salario_bruto: float
    inss: float
    irrf: float
    descontos_adicionais: float
    total_descontos: float
    salario_liquido: float
