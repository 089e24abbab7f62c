"""Container and curation models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import UNCATEGORIZED


class ContainerRecord(BaseModel):
    """Display-ready view of a container, rebuilt on every query."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    image: str = ""
    running: bool = False
    ports: List[int] = Field(default_factory=list)
    urls: List[str] = Field(default_factory=list)
    group_label: str = Field(UNCATEGORIZED, alias="composeProject")
    # Filled in by registry enrichment
    description: str = ""
    icon_url: str = Field("", alias="iconUrl")
    hub_url: str = Field("", alias="hubUrl")


class CurationRecord(BaseModel):
    """User-edited display settings for one container."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_name: Optional[str] = Field(None, alias="name")
    description: Optional[str] = None
    icon_url: Optional[str] = Field(None, alias="iconUrl")
    group_label: Optional[str] = Field(None, alias="composeProject")
    urls: Optional[List[str]] = None
    selected: bool = False
    running: bool = False

    @classmethod
    def from_container(cls, container: ContainerRecord) -> "CurationRecord":
        """Create the initial curation record for a newly seen container."""
        return cls(
            id=container.id,
            display_name=container.name,
            description=container.description,
            icon_url=container.icon_url,
            group_label=container.group_label,
            urls=list(container.urls),
            selected=bool(container.urls),
            running=container.running,
        )
