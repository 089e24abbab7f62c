"""Configuration models for Docker Home."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from ..core.constants import (
    CURATION_FILE_NAME,
    DATA_DIR_NAME,
    DEFAULT_BIND_HOST,
    DEFAULT_HOSTNAME,
    DEFAULT_PORT,
    DOCKER_TIMEOUT,
    PROBE_TIMEOUT,
    REGISTRY_TIMEOUT,
)


class DashboardSettings(BaseModel):
    """Runtime settings for the dashboard server."""
    hostname: str = DEFAULT_HOSTNAME
    bind_host: str = DEFAULT_BIND_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    data_dir: Path = Path(DATA_DIR_NAME)
    docker_host: Optional[str] = None
    probe_timeout: float = Field(PROBE_TIMEOUT, gt=0)
    docker_timeout: int = Field(DOCKER_TIMEOUT, gt=0)
    registry_timeout: float = Field(REGISTRY_TIMEOUT, gt=0)
    static_dir: Optional[Path] = None

    @property
    def curation_file(self) -> Path:
        return self.data_dir / CURATION_FILE_NAME
