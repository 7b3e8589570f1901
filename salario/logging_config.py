# salario/logging_config.py

import os
import sys
from loguru import logger

from salario.config import settings

# Remove o handler padrão para evitar duplicação de logs no console.
logger.remove()

# Console com formato limpo e colorido, no nível definido em LOG_LEVEL.
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

# Arquivo de log em DEBUG, com rotação a cada 10 MB e retenção de 30 dias.
if settings.LOG_DIR:
    logger.add(
        os.path.join(settings.LOG_DIR, "calculadora_{time}.log"),
        rotation="10 MB",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )

# Exporta o logger configurado para ser usado em outros módulos.
log = logger
