from enum import Enum


class Endpoint(str, Enum):
    """Endpoints del servicio de procesamiento por lotes"""

    PROCESS = "/process"
    PROGRESS = "/progress"
    STATUS = "/status"
    HEALTH = "/health"


# Headers por defecto en cada request

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
}

# Query param opcional de POST /process
CSV_FILE_PATH_PARAM = "csvFilePath"


# Codigos de error

class ErrorCode(str, Enum):
    """Codigos de error estandarizados"""

    SERVER_ERROR = "SERVER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    LOCAL_ERROR = "LOCAL_ERROR"


# Mensajes de error

NETWORK_ERROR_MESSAGE = "网络连接失败，请检查网络设置"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
SERVER_ERROR_TEMPLATE = "Server error ({status_code})"

ERROR_MESSAGES = {
    ErrorCode.NETWORK_ERROR: NETWORK_ERROR_MESSAGE,
    ErrorCode.LOCAL_ERROR: UNKNOWN_ERROR_MESSAGE,
}
