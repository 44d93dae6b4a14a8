import logging

import httpx
import pytest

from batch_client import ClientConfig, JobStatusClient


BASE_URL = "http://batch.test/api/movie-rating"


@pytest.fixture
def client_config():
    """Configuración apuntando a un host de pruebas."""
    return ClientConfig(base_url=BASE_URL, timeout=30.0)


@pytest.fixture
def sent_requests():
    """Requests que llegaron al transport, en orden."""
    return []


@pytest.fixture
def make_client(client_config, sent_requests):
    """
    Fábrica de clientes sobre httpx.MockTransport.

    Uso:
        client = make_client(lambda request: httpx.Response(200, json={}))
    """
    def _make(handler, **kwargs):
        async def _record(request):
            sent_requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        return JobStatusClient(
            client_config,
            transport=httpx.MockTransport(_record),
            **kwargs
        )

    return _make


@pytest.fixture
def restore_root_logger():
    """Restaura handlers y nivel del logger raíz tras tests de logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def sample_start_result():
    """Respuesta de ejemplo de POST /process."""
    return {
        "status": "success",
        "message": "电影评分处理作业已启动",
        "jobId": "movie-rating-1a2b3c4d",
        "csvFilePath": "data/ml-latest/ratings.csv",
    }


@pytest.fixture
def sample_job_progress():
    """Respuesta de ejemplo de GET /progress/{jobId}."""
    return {
        "status": "success",
        "jobId": "movie-rating-1a2b3c4d",
        "jobStatus": "运行中",
        "totalRecords": 30000000,
        "processedRecords": 1250000,
        "savedRecords": 1200000,
        "progressPercentage": "4.17%",
    }
