"""Service layer for Docker, Docker Hub and dashboard operations."""

from .dashboard_service import DashboardService
from .docker_service import DockerService
from .endpoint_prober import EndpointProber
from .registry_service import DockerHubClient, normalize_image_name
from .exceptions import (
    ServiceError,
    DockerServiceError,
    EndpointNotFoundError,
    ContainerNotFoundError,
    RegistryError,
    CurationStoreError,
)

__all__ = [
    "DashboardService",
    "DockerService",
    "EndpointProber",
    "DockerHubClient",
    "normalize_image_name",
    "ServiceError",
    "DockerServiceError",
    "EndpointNotFoundError",
    "ContainerNotFoundError",
    "RegistryError",
    "CurationStoreError",
]
