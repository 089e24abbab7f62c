"""Registry metadata models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegistryFailure(str, Enum):
    """Why a registry lookup came back empty."""
    INVALID_IMAGE = "invalid_image"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"


class RegistryInfo(BaseModel):
    """Description and icon for a public repository."""

    model_config = ConfigDict(populate_by_name=True)

    repository: str = ""
    description: str = ""
    icon_url: str = Field("", alias="iconUrl")
    hub_url: str = Field("", alias="hubUrl")
    error: Optional[RegistryFailure] = Field(None, exclude=True)

    @classmethod
    def empty(cls, repository: str, error: RegistryFailure) -> "RegistryInfo":
        """Create a blank result carrying the failure kind."""
        return cls(repository=repository, error=error)

    @property
    def is_empty(self) -> bool:
        return self.error is not None
