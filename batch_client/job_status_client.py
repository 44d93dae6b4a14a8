"""
Job Status Client - async HTTP client for the batch-processing service.

Talks to the service endpoints under the configured base URL:
- POST /process: start a batch-processing job
- GET /progress/{job_id}: progress of one job
- GET /progress: progress of every known job
- GET /status: service status
- GET /health: liveness probe

Successful bodies are returned as-is. Every failure is raised as a
JobStatusClientError subclass; nothing is retried or cached.
"""

import logging
from typing import Any, Iterable, Optional
from urllib.parse import quote

import httpx

from batch_client.errors import JobStatusClientError, LocalError
from batch_client.middleware import (
    DEFAULT_MIDDLEWARES,
    Middleware,
    compose,
    decode_body,
    normalize_errors,
    translate_exception,
)
from batch_client.models import ClientConfig
from config.constants import CSV_FILE_PATH_PARAM, Endpoint

logger = logging.getLogger(__name__)


class JobStatusClient:
    """Async client for starting and polling batch-processing jobs."""

    # Endpoints
    PROCESS_ENDPOINT = Endpoint.PROCESS.value
    PROGRESS_ENDPOINT = Endpoint.PROGRESS.value
    STATUS_ENDPOINT = Endpoint.STATUS.value
    HEALTH_ENDPOINT = Endpoint.HEALTH.value

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        middlewares: Optional[Iterable[Middleware]] = None
    ):
        """
        Initialize the client.

        Args:
            config: Transport configuration (default: built from settings)
            transport: httpx transport to send requests through (default: network)
            middlewares: Middlewares run inside error normalization, first
                         outermost (default: request/response logging)
        """
        self.config = config or ClientConfig.from_settings()
        self._transport = transport
        self._middlewares = (normalize_errors,) + tuple(
            DEFAULT_MIDDLEWARES if middlewares is None else middlewares
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    async def start_processing(self, csv_file_path: Optional[str] = None) -> Any:
        """
        Start a batch-processing job.

        Endpoint: POST {base_url}/process

        Args:
            csv_file_path: Input data file for the job, sent as ``csvFilePath``
                           (optional, the service picks its default when omitted)

        Returns:
            The service's response body, unchanged

        Raises:
            JobStatusClientError: On any failure
        """
        params = {CSV_FILE_PATH_PARAM: csv_file_path} if csv_file_path else None
        try:
            return await self._request("POST", self.PROCESS_ENDPOINT, params=params)
        except JobStatusClientError as e:
            logger.error(f"Failed to start batch processing: {e}")
            raise

    async def get_job_progress(self, job_id: str) -> Any:
        """
        Get the progress of one job.

        Endpoint: GET {base_url}/progress/{job_id}

        Args:
            job_id: Identifier returned by the service when the job started

        Returns:
            The service's response body, unchanged

        Raises:
            LocalError: If job_id is empty, not a string, or "." / ".."
            JobStatusClientError: On any other failure
        """
        try:
            path = self._job_progress_path(job_id)
            return await self._request("GET", path)
        except JobStatusClientError as e:
            logger.error(f"Failed to get progress of job {job_id!r}: {e}")
            raise

    async def get_all_progress(self) -> Any:
        """Get the progress of every known job. Endpoint: GET {base_url}/progress"""
        try:
            return await self._request("GET", self.PROGRESS_ENDPOINT)
        except JobStatusClientError as e:
            logger.error(f"Failed to get progress of all jobs: {e}")
            raise

    async def get_system_status(self) -> Any:
        """Get the service status. Endpoint: GET {base_url}/status"""
        try:
            return await self._request("GET", self.STATUS_ENDPOINT)
        except JobStatusClientError as e:
            logger.error(f"Failed to get system status: {e}")
            raise

    async def health_check(self) -> Any:
        """Probe service liveness. Endpoint: GET {base_url}/health"""
        try:
            return await self._request("GET", self.HEALTH_ENDPOINT)
        except JobStatusClientError as e:
            logger.error(f"Health check failed: {e}")
            raise

    def _job_progress_path(self, job_id: str) -> str:
        if not isinstance(job_id, str) or not job_id:
            raise LocalError(f"Job id must be a non-empty string, got {job_id!r}")
        # "." and ".." would be resolved as dot segments by the URL parser
        if job_id in (".", ".."):
            raise LocalError(f"Job id cannot be a dot segment, got {job_id!r}")
        # Whole id stays in one path segment
        return f"{self.PROGRESS_ENDPOINT}/{quote(job_id, safe='')}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None
    ) -> Any:
        """
        Send one request through the middleware chain.

        Args:
            method: HTTP method
            path: Endpoint path relative to base_url
            params: Query parameters (optional)

        Returns:
            Decoded response body

        Raises:
            JobStatusClientError: On any failure
        """
        try:
            http = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers=dict(self.config.default_headers),
                timeout=self.config.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        except Exception as e:
            raise translate_exception(e) from e

        async with http:
            try:
                request = http.build_request(method, path, params=params)
            except Exception as e:
                raise translate_exception(e) from e

            handler = compose(http.send, self._middlewares)
            response = await handler(request)

        return decode_body(response)
