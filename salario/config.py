# salario/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # --- Identificação do Ambiente ---
    APP_NAME: str = "Calculadora Salarial"

    # --- Logs ---
    # LOG_DIR vazio desativa o arquivo de log (fica só o console)
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # --- Parâmetros Globais (aba "Configurações") ---
    TAXA_COMISSAO: float = 0.0005
    DIVISOR_PARTICIPACAO: float = 36
    NUMERO_DEPENDENTES: int = 0
    VALOR_PLANTAO: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


# Instância global
settings = get_settings()
