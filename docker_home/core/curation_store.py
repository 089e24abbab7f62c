"""Curation storage and merging with live container state."""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import ValidationError

from ..models.container import ContainerRecord, CurationRecord

logger = logging.getLogger(__name__)

# Curation field -> container field, filled while the curation field is blank
_BACKFILL_FIELDS = {
    "display_name": "name",
    "description": "description",
    "icon_url": "icon_url",
    "group_label": "group_label",
}


class CurationStore:
    """Persists the curation collection as a single JSON file."""

    def __init__(self, path: Path):
        """Initialize curation store.

        Args:
            path: Location of the curation JSON file
        """
        self.path = Path(path)
        self._lock = threading.Lock()

    def exists(self) -> bool:
        """Check whether any curation has been saved yet."""
        return self.path.is_file()

    def load(self) -> List[CurationRecord]:
        """Load the curation collection.

        A missing or unreadable file is treated as an empty collection.
        """
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [CurationRecord.model_validate(item) for item in data]
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable curation file {self.path}: {e}")
            return []

    def save(self, records: Iterable[CurationRecord]) -> None:
        """Replace the whole curation collection on disk.

        The file is written next to its destination and renamed into place so
        readers never see a partial write.
        """
        payload = [record.model_dump(by_alias=True) for record in _unique_by_id(records)]

        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise


def _unique_by_id(records: Iterable[CurationRecord]) -> List[CurationRecord]:
    # Last record wins for a repeated id, keeping the position of the first
    by_id: Dict[str, CurationRecord] = {}
    for record in records:
        by_id[record.id] = record
    return list(by_id.values())


def merge_with_live(
    curated: Iterable[CurationRecord], live: Iterable[ContainerRecord]
) -> List[CurationRecord]:
    """Merge stored curation with the current container list.

    Args:
        curated: Stored curation records
        live: Containers as currently reported by the runtime

    Returns:
        New list of curation records. Existing records keep their position and
        user edits; containers seen for the first time are appended.
    """
    merged: Dict[str, CurationRecord] = {
        record.id: record.model_copy(update={"running": False})
        for record in curated
    }

    for container in live:
        existing = merged.get(container.id)
        if existing is None:
            merged[container.id] = CurationRecord.from_container(container)
            continue

        updates = {"running": container.running}
        for field, source in _BACKFILL_FIELDS.items():
            if not getattr(existing, field):
                updates[field] = getattr(container, source)
        if existing.urls is None:
            updates["urls"] = list(container.urls)
        merged[container.id] = existing.model_copy(update=updates)

    return list(merged.values())
