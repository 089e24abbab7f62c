"""Mapping of raw Docker Engine container records to display records."""

from typing import Any, Dict, Iterable, List, Optional

from .constants import (
    COMPOSE_PROJECT_LABEL,
    HTTP_PRIVATE_PORTS,
    HTTPS_PRIVATE_PORTS,
    RUNNING_STATE,
    UNCATEGORIZED,
)
from ..models.container import ContainerRecord


def _public_port(binding: Dict[str, Any]) -> int:
    return int(binding.get("PublicPort") or 0)


def infer_urls(port_bindings: Iterable[Dict[str, Any]], hostname: str) -> List[str]:
    """Guess reachable URLs from port bindings.

    Only bindings published on the host whose private port is a well-known web
    port produce a URL. The public port is always written out explicitly.
    """
    urls: List[str] = []
    for binding in port_bindings:
        public_port = _public_port(binding)
        if not public_port:
            continue
        private_port = binding.get("PrivatePort")
        if private_port in HTTP_PRIVATE_PORTS:
            url = f"http://{hostname}:{public_port}"
        elif private_port in HTTPS_PRIVATE_PORTS:
            url = f"https://{hostname}:{public_port}"
        else:
            continue
        if url not in urls:
            urls.append(url)
    return urls


def map_container(raw: Dict[str, Any], hostname: str) -> ContainerRecord:
    """Convert one entry of the Engine container list into a ContainerRecord.

    Args:
        raw: Container entry as returned by the Engine list endpoint
        hostname: Host name used when building inferred URLs

    Returns:
        ContainerRecord for display
    """
    port_bindings = raw.get("Ports") or []
    names = raw.get("Names") or []
    labels = raw.get("Labels") or {}

    return ContainerRecord(
        id=raw["Id"],
        name=names[0].lstrip("/") if names else "",
        image=raw.get("Image") or "",
        running=raw.get("State") == RUNNING_STATE,
        ports=[_public_port(b) for b in port_bindings if _public_port(b)],
        urls=infer_urls(port_bindings, hostname),
        group_label=labels.get(COMPOSE_PROJECT_LABEL) or UNCATEGORIZED,
    )


def group_by_project(records: Iterable[ContainerRecord]) -> Dict[str, List[ContainerRecord]]:
    """Group containers by compose project, keeping first-seen order."""
    groups: Dict[str, List[ContainerRecord]] = {}
    for record in records:
        groups.setdefault(record.group_label, []).append(record)
    return groups


def find_by_id_prefix(records: Iterable[ContainerRecord], prefix: str) -> Optional[ContainerRecord]:
    """Return the first container whose id starts with prefix."""
    if not prefix:
        return None
    return next((r for r in records if r.id.startswith(prefix)), None)
