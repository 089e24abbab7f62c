"""Docker Hub metadata lookups."""

import asyncio
import logging
from typing import Dict, Iterable, Optional
from urllib.parse import quote

import httpx

from ..core.constants import (
    DEFAULT_NAMESPACE,
    HUB_LOGO_URL,
    HUB_PAGE_URL,
    HUB_REPOSITORY_URL,
    REGISTRY_HOST_PREFIXES,
    REGISTRY_TIMEOUT,
)
from ..models.container import ContainerRecord
from ..models.registry import RegistryFailure, RegistryInfo
from .exceptions import RegistryError

logger = logging.getLogger(__name__)


def normalize_image_name(image_name: str) -> str:
    """Reduce an image reference to Docker Hub's ``namespace/repository`` form.

    >>> normalize_image_name("redis:7-alpine")
    'library/redis'
    >>> normalize_image_name("docker.elastic.co/elasticsearch/elasticsearch:8.12")
    'elasticsearch/elasticsearch'
    """
    if not image_name or not image_name.strip():
        return ""

    name = image_name.strip().lower()

    for prefix in REGISTRY_HOST_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break

    name = name.split("@", 1)[0]

    # A colon before the last slash belongs to a registry host:port
    tag_index = name.rfind(":")
    if tag_index > name.rfind("/"):
        name = name[:tag_index]

    segments = [segment for segment in name.split("/") if segment]
    if not segments:
        return ""
    if len(segments) == 1:
        return f"{DEFAULT_NAMESPACE}/{segments[0]}"
    return "/".join(segments[-2:])


def logo_url(repository: str) -> str:
    """Build the Docker Hub logo URL for a normalized repository name."""
    return HUB_LOGO_URL.format(repo=quote(repository, safe=""))


class DockerHubClient:
    """Fetches repository descriptions from the Docker Hub API."""

    def __init__(self, http: Optional[httpx.AsyncClient] = None, timeout: float = REGISTRY_TIMEOUT):
        """Initialize Docker Hub client.

        Args:
            http: Shared async HTTP client; one is created when omitted
            timeout: Request timeout used for a created client
        """
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def fetch(self, image_name: str) -> RegistryInfo:
        """Look up registry metadata for an image.

        Never raises: any failure results in an empty RegistryInfo whose
        ``error`` tells what went wrong.
        """
        repository = normalize_image_name(image_name)
        if not repository:
            return RegistryInfo.empty(repository, RegistryFailure.INVALID_IMAGE)

        try:
            description = await self._fetch_description(repository)
        except RegistryError as e:
            logger.debug(f"No Docker Hub info for {image_name}: {e}")
            return RegistryInfo.empty(repository, RegistryFailure(e.kind))
        except Exception as e:
            logger.warning(f"Unexpected error looking up {image_name} on Docker Hub: {e}")
            return RegistryInfo.empty(repository, RegistryFailure.NETWORK_ERROR)

        return RegistryInfo(
            repository=repository,
            description=description,
            icon_url=logo_url(repository),
            hub_url=HUB_PAGE_URL.format(repo=repository),
        )

    async def _fetch_description(self, repository: str) -> str:
        url = HUB_REPOSITORY_URL.format(repo=repository)
        try:
            response = await self.http.get(url)
        except httpx.HTTPError as e:
            raise RegistryError(RegistryFailure.NETWORK_ERROR.value, str(e)) from e

        if response.status_code == 404:
            raise RegistryError(RegistryFailure.NOT_FOUND.value, f"{repository} not found")
        if not response.is_success:
            raise RegistryError(
                RegistryFailure.HTTP_ERROR.value,
                f"Docker Hub returned {response.status_code} for {repository}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RegistryError(RegistryFailure.INVALID_RESPONSE.value, f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise RegistryError(RegistryFailure.INVALID_RESPONSE.value, "Unexpected response shape")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise RegistryError(RegistryFailure.INVALID_RESPONSE.value, "Description is not a string")
        return description or ""

    async def enrich(self, records: Iterable[ContainerRecord]) -> None:
        """Fill description, icon and hub link of records in place.

        Each distinct image is looked up once; lookups run concurrently.
        """
        records = list(records)
        images = list(dict.fromkeys(record.image for record in records if record.image))
        results = await asyncio.gather(*(self.fetch(image) for image in images))
        info_by_image: Dict[str, RegistryInfo] = dict(zip(images, results))

        for record in records:
            info = info_by_image.get(record.image)
            if info is None or info.is_empty:
                continue
            record.description = info.description
            record.icon_url = info.icon_url
            record.hub_url = info.hub_url
