"""Result model for container start/stop operations."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OperationFailure(str, Enum):
    """Failure kinds for start/stop operations."""
    NOT_FOUND = "not_found"
    ALREADY_IN_STATE = "already_in_state"
    TIMEOUT = "timeout"
    RUNTIME_ERROR = "runtime_error"


class OperationResult(BaseModel):
    """Outcome of a start or stop request."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    action: str
    container_id: str = Field(alias="containerId")
    failure: Optional[OperationFailure] = None
    message: str = ""

    @classmethod
    def ok(cls, action: str, container_id: str) -> "OperationResult":
        return cls(success=True, action=action, container_id=container_id)

    @classmethod
    def failed(
        cls, action: str, container_id: str, failure: OperationFailure, message: str
    ) -> "OperationResult":
        return cls(
            success=False,
            action=action,
            container_id=container_id,
            failure=failure,
            message=message,
        )
