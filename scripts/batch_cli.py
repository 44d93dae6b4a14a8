"""
CLI para consultar el servicio de procesamiento por lotes.

Uso:
    python -m scripts.batch_cli start [--csv data/ml-latest/ratings.csv]
    python -m scripts.batch_cli progress [JOB_ID]
    python -m scripts.batch_cli status
    python -m scripts.batch_cli health

    # Apuntando a otro servicio:
    python -m scripts.batch_cli --base-url http://batch:8080/api/movie-rating status
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from batch_client import ClientConfig, JobStatusClient, JobStatusClientError
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construir parser de argumentos."""
    parser = argparse.ArgumentParser(
        prog="batch_cli",
        description="Cliente del servicio de procesamiento por lotes"
    )
    parser.add_argument(
        "--base-url",
        default=settings.batch_service.BATCH_SERVICE_BASE_URL,
        help="URL base del servicio"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.batch_service.BATCH_SERVICE_TIMEOUT,
        help="Timeout en segundos por request"
    )
    parser.add_argument(
        "--log-level",
        default=settings.general.LOG_LEVEL,
        help="Nivel de logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    start = subparsers.add_parser("start", help="Iniciar un job")
    start.add_argument("--csv", dest="csv_file_path", default=None, help="Ruta del CSV a procesar")

    progress = subparsers.add_parser("progress", help="Progreso de un job o de todos")
    progress.add_argument("job_id", nargs="?", default=None, help="ID del job (todos si se omite)")

    subparsers.add_parser("status", help="Estado del servicio")
    subparsers.add_parser("health", help="Health check del servicio")

    return parser


async def run_command(client: JobStatusClient, args: argparse.Namespace):
    """Ejecutar el comando pedido y retornar el body de respuesta."""
    if args.command == "start":
        return await client.start_processing(args.csv_file_path)
    if args.command == "progress":
        if args.job_id is None:
            return await client.get_all_progress()
        return await client.get_job_progress(args.job_id)
    if args.command == "status":
        return await client.get_system_status()
    if args.command == "health":
        return await client.health_check()
    raise ValueError(f"Comando desconocido: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Punto de entrada. Retorna el exit code."""
    args = build_parser().parse_args(argv)

    # stdout queda para el body JSON
    setup_logging(service_name="batch_cli", log_level=args.log_level, stream=sys.stderr)

    config = ClientConfig(base_url=args.base_url, timeout=args.timeout)
    logger.info(f"Ejecutando comando '{args.command}' con config {config.to_dict()}")
    client = JobStatusClient(config)

    try:
        body = asyncio.run(run_command(client, args))
    except JobStatusClientError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(body, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
