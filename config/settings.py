from pydantic import Field, validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    ENVIRONMENT: str = Field(
        default="development",
        description="Entorno: development, staging, production"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True


class BatchServiceSettings(BaseSettings):
    """Configuracion del servicio remoto de procesamiento por lotes"""

    BATCH_SERVICE_BASE_URL: str = Field(
        default="http://localhost:8080/api/movie-rating",
        description="URL base de todos los endpoints del servicio"
    )
    BATCH_SERVICE_TIMEOUT: float = Field(
        default=30.0,
        description="Timeout en segundos para cada request"
    )

    @validator("BATCH_SERVICE_BASE_URL")
    def validate_base_url(cls, v):
        """Remover trailing slash de la URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    @validator("BATCH_SERVICE_TIMEOUT")
    def validate_timeout(cls, v):
        """El timeout debe ser positivo"""
        if v <= 0:
            raise ValueError("BATCH_SERVICE_TIMEOUT debe ser mayor que 0")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


class LoggingSettings(BaseSettings):
    """Configuracion de logging"""

    LOG_DIR: str = Field(
        default="logs",
        description="Directorio de archivos de log"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=1,
        description="Dias de logs rotados a mantener"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.batch_service.BATCH_SERVICE_BASE_URL, settings.LOG_LEVEL, etc
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    batch_service: BatchServiceSettings = BatchServiceSettings()
    logging: LoggingSettings = LoggingSettings()

    # Shortcuts para acceso directo
    @property
    def ENVIRONMENT(self) -> str:
        return self.general.ENVIRONMENT

    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def BATCH_SERVICE_BASE_URL(self) -> str:
        return self.batch_service.BATCH_SERVICE_BASE_URL

    @property
    def BATCH_SERVICE_TIMEOUT(self) -> float:
        return self.batch_service.BATCH_SERVICE_TIMEOUT

    class Config:
        env_file = ".env"
        case_sensitive = True


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
