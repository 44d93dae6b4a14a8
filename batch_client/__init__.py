"""
Paquete batch_client - Cliente para el servicio de procesamiento por lotes.

Proporciona un cliente async para iniciar jobs y consultar su progreso
y el estado del servicio.

Uso:
    from batch_client import JobStatusClient, JobStatusClientError

    client = JobStatusClient()
    result = await client.start_processing()
    progress = await client.get_job_progress(result["jobId"])
"""

from batch_client.errors import (
    JobStatusClientError,
    LocalError,
    NetworkError,
    ServerError,
)
from batch_client.job_status_client import JobStatusClient
from batch_client.middleware import compose, log_exchange, normalize_errors
from batch_client.models import ClientConfig

__all__ = [
    "ClientConfig",
    "JobStatusClient",
    "JobStatusClientError",
    "LocalError",
    "NetworkError",
    "ServerError",
    "compose",
    "log_exchange",
    "normalize_errors",
]
