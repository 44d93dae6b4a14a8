"""
Tests unitarios para ClientConfig.

python -m pytest tests/test_client/test_client_config.py
"""

import dataclasses
from unittest.mock import MagicMock

import pytest

from batch_client.models import ClientConfig


class TestClientConfigDefaults:
    """Tests de valores por defecto."""

    def test_defaults(self):
        """Debe usar base URL, timeout de 30s y Content-Type JSON."""
        config = ClientConfig()

        assert config.base_url == "http://localhost:8080/api/movie-rating"
        assert config.timeout == 30.0
        assert dict(config.default_headers) == {"Content-Type": "application/json"}

    def test_to_dict(self):
        """Debe exportar a diccionario."""
        config = ClientConfig(base_url="http://batch.test/api", timeout=5)

        assert config.to_dict() == {
            "base_url": "http://batch.test/api",
            "timeout": 5,
            "default_headers": {"Content-Type": "application/json"},
        }


class TestClientConfigImmutability:
    """Tests de inmutabilidad."""

    def test_fields_frozen(self):
        """No debe permitir reasignar campos."""
        config = ClientConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.timeout = 1.0

    def test_headers_read_only(self):
        """Los headers por defecto son de solo lectura."""
        config = ClientConfig()

        with pytest.raises(TypeError):
            config.default_headers["X-Extra"] = "1"

    def test_headers_copied(self):
        """Mutar el dict original no afecta la configuración."""
        headers = {"Content-Type": "application/json"}
        config = ClientConfig(default_headers=headers)

        headers["X-Extra"] = "1"

        assert "X-Extra" not in config.default_headers


class TestClientConfigValidation:
    """Tests de validación."""

    def test_strips_trailing_slash(self):
        """Debe remover el trailing slash de la URL."""
        assert ClientConfig(base_url="http://batch.test/api/").base_url == "http://batch.test/api"

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_rejects_non_positive_timeout(self, timeout):
        """Timeout debe ser positivo."""
        with pytest.raises(ValueError):
            ClientConfig(timeout=timeout)

    def test_rejects_empty_base_url(self):
        """base_url no puede ser vacía."""
        with pytest.raises(ValueError):
            ClientConfig(base_url="")


class TestFromSettings:
    """Tests de ClientConfig.from_settings."""

    def test_reads_batch_service_group(self):
        """Debe leer URL y timeout del grupo batch_service."""
        settings = MagicMock()
        settings.batch_service.BATCH_SERVICE_BASE_URL = "https://batch.example.com/api/movie-rating"
        settings.batch_service.BATCH_SERVICE_TIMEOUT = 10.0

        config = ClientConfig.from_settings(settings)

        assert config.base_url == "https://batch.example.com/api/movie-rating"
        assert config.timeout == 10.0
        assert dict(config.default_headers) == {"Content-Type": "application/json"}
