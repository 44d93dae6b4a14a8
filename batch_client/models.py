"""
Client configuration value object.

Built once and shared by whoever needs to talk to the batch service.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from config.constants import DEFAULT_HEADERS
from config.settings import Settings, get_settings


def _default_headers() -> Mapping[str, str]:
    return MappingProxyType(dict(DEFAULT_HEADERS))


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable transport configuration for JobStatusClient.

    Attributes:
        base_url: Root for every relative endpoint path
        timeout: Seconds before a single request is abandoned
        default_headers: Headers merged into every outgoing request
    """

    base_url: str = "http://localhost:8080/api/movie-rating"
    timeout: float = 30.0
    default_headers: Mapping[str, str] = field(default_factory=_default_headers, hash=False)

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(
            self, "default_headers", MappingProxyType(dict(self.default_headers))
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ClientConfig":
        """Create from the batch service settings group."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.batch_service.BATCH_SERVICE_BASE_URL,
            timeout=settings.batch_service.BATCH_SERVICE_TIMEOUT,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "default_headers": dict(self.default_headers),
        }
