"""Dashboard service combining live containers, registry data and curation."""

import asyncio
import logging
from typing import Dict, Iterable, List

from ..core.constants import DEFAULT_HOSTNAME, STOP_GRACE_PERIOD
from ..core.container_mapper import find_by_id_prefix, group_by_project, map_container
from ..core.curation_store import CurationStore, merge_with_live
from ..models.container import ContainerRecord, CurationRecord
from ..models.operation import OperationResult
from .docker_service import DockerService
from .exceptions import ContainerNotFoundError, CurationStoreError
from .registry_service import DockerHubClient

logger = logging.getLogger(__name__)


class DashboardService:
    """Operations behind the overview and curation views."""

    def __init__(
        self,
        docker_service: DockerService,
        hub_client: DockerHubClient,
        store: CurationStore,
        hostname: str = DEFAULT_HOSTNAME,
    ):
        self.docker_service = docker_service
        self.hub_client = hub_client
        self.store = store
        self.hostname = hostname

    def live_containers(self, all: bool = True) -> List[ContainerRecord]:
        """Current containers mapped for display, without registry data.

        Raises:
            DockerServiceError: If the runtime cannot be queried
        """
        raw = self.docker_service.list_containers(all=all)
        return [map_container(entry, self.hostname) for entry in raw]

    async def list_containers(self, all: bool = True, enrich: bool = True) -> List[ContainerRecord]:
        """Current containers, enriched with Docker Hub metadata when asked."""
        records = await asyncio.to_thread(self.live_containers, all)
        if enrich:
            await self.hub_client.enrich(records)
        return records

    def get_container(self, id_prefix: str) -> ContainerRecord:
        """Find a container by full id or id prefix.

        Raises:
            ContainerNotFoundError: If no container id starts with id_prefix
        """
        record = find_by_id_prefix(self.live_containers(all=True), id_prefix)
        if record is None:
            raise ContainerNotFoundError(f"Container '{id_prefix}' not found")
        return record

    def list_projects(self) -> Dict[str, List[ContainerRecord]]:
        return group_by_project(self.live_containers(all=True))

    async def get_display(self) -> List[CurationRecord]:
        """Curation merged with live state; empty until something is saved."""
        if not self.store.exists():
            return []

        curated = self.store.load()
        live = await asyncio.to_thread(self.live_containers, True)
        await self.hub_client.enrich(_needing_enrichment(curated, live))
        return merge_with_live(curated, live)

    def save_display(self, records: Iterable[CurationRecord]) -> int:
        """Overwrite the stored curation.

        Raises:
            CurationStoreError: If the file cannot be written
        """
        records = list(records)
        try:
            self.store.save(records)
        except OSError as e:
            raise CurationStoreError(f"Failed to save curation: {e}") from e
        logger.info(f"Saved {len(records)} curation record(s)")
        return len(records)

    def start_container(self, container_id: str) -> OperationResult:
        return self.docker_service.start_container(container_id)

    def stop_container(self, container_id: str, grace_period: int = STOP_GRACE_PERIOD) -> OperationResult:
        return self.docker_service.stop_container(container_id, grace_period)


def _needing_enrichment(
    curated: Iterable[CurationRecord], live: Iterable[ContainerRecord]
) -> List[ContainerRecord]:
    # Only containers whose curation would still take registry fields
    by_id = {record.id: record for record in curated}
    needed = []
    for container in live:
        record = by_id.get(container.id)
        if record is None or not record.description or not record.icon_url:
            needed.append(container)
    return needed
