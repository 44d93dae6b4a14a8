"""
Configuración centralizada de logging con rotación diaria.

Cada entrypoint escribe a su propio archivo en logs/:
- logs/batch_cli.log → CLI del cliente de jobs

Los archivos rotan a medianoche y se eliminan después de N días.
La librería batch_client nunca configura logging al importarse;
solo usa logging.getLogger(__name__).
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import Optional, TextIO

from config.settings import settings

# Directorio de logs (relativo a la raíz del proyecto)
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Configuración
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logs_directory() -> Path:
    """Retorna el directorio de logs."""
    logs_dir = Path(settings.logging.LOG_DIR)
    if not logs_dir.is_absolute():
        logs_dir = PROJECT_ROOT / logs_dir
    return logs_dir


def get_log_file_path(service_name: str = "batch_cli") -> Path:
    """Retorna la ruta al archivo de log de un servicio."""
    return get_logs_directory() / f"{service_name}.log"


def setup_logging(
    service_name: str = "batch_cli",
    log_level: Optional[str] = None,
    log_to_file: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configura logging con rotación diaria para un servicio específico.

    Args:
        service_name: Nombre del servicio. Define el archivo de log:
                     - "batch_cli" → logs/batch_cli.log
        log_level: Nivel a usar (default: settings.general.LOG_LEVEL)
        log_to_file: Si False, solo se escribe a consola
        stream: Stream de consola (default: stdout)

    Returns:
        Logger raíz configurado
    """
    level_name = (log_level or settings.general.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    # Obtener logger raíz
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Limpiar handlers existentes (evita duplicados en reloads)
    root_logger.handlers.clear()

    # Formatter común
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not log_to_file:
        logging.getLogger(__name__).info(
            f"Logging iniciado [{service_name}] [{settings.general.ENVIRONMENT}] → consola"
        )
        return root_logger

    # Handler 2: Archivo con rotación diaria
    log_file = get_log_file_path(service_name)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.logging.LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=False
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    # Sufijo para archivos rotados: batch_cli.log.2026-01-23
    file_handler.suffix = "%Y-%m-%d"

    root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging iniciado [{service_name}] [{settings.general.ENVIRONMENT}] → {log_file}"
    )

    return root_logger
