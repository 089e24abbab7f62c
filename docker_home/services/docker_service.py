"""Docker service for abstracting Docker operations."""

import logging
from typing import Any, Optional

import docker
import docker.errors
import requests

from ..core.constants import DOCKER_TIMEOUT, RUNNING_STATE, STOP_GRACE_PERIOD
from ..models.operation import OperationFailure, OperationResult
from .exceptions import DockerServiceError

logger = logging.getLogger(__name__)

# Low-level errors that mean the session itself is gone
_CONNECTION_ERRORS = (requests.exceptions.ConnectionError, ConnectionError)


class DockerService:
    """Service for Docker operations on an auto-detected endpoint."""

    def __init__(self, prober, timeout: int = DOCKER_TIMEOUT):
        """Initialize Docker service.

        Args:
            prober: EndpointProber used to find the runtime endpoint
            timeout: Timeout for regular Docker API calls in seconds
        """
        self.prober = prober
        self.timeout = timeout
        self.endpoint: Optional[str] = None
        self._client: Optional[docker.DockerClient] = None

    def connect(self) -> str:
        """Probe for an endpoint and open the long-lived client.

        Returns:
            The endpoint in use

        Raises:
            EndpointNotFoundError: If no endpoint answers
        """
        endpoint = self.prober.detect_endpoint()
        self._client = docker.DockerClient(base_url=endpoint, timeout=self.timeout)
        self.endpoint = endpoint
        return endpoint

    @property
    def client(self) -> docker.DockerClient:
        """Docker client, probing again if the previous session was dropped."""
        if self._client is None:
            self.connect()
        return self._client

    def reset(self) -> None:
        """Drop the current session so the next call probes again."""
        if self._client is not None:
            try:
                self._client.close()
            except Exception as e:
                logger.debug(f"Error closing Docker client: {e}")
        self._client = None
        self.endpoint = None

    def close(self) -> None:
        self.reset()

    def version(self) -> dict[str, Any]:
        """Get the Docker engine version information.

        Raises:
            DockerServiceError: If the engine cannot be reached
        """
        try:
            return self.client.version()
        except DockerServiceError:
            raise
        except _CONNECTION_ERRORS as e:
            self.reset()
            raise DockerServiceError(f"Lost connection to Docker: {e}") from e
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            raise DockerServiceError(f"Failed to get Docker version: {e}") from e

    def list_containers(self, all: bool = True) -> list[dict[str, Any]]:
        """List containers as raw Engine records.

        Args:
            all: Include stopped containers

        Returns:
            List of container entries from the Engine list endpoint

        Raises:
            DockerServiceError: If listing fails
        """
        try:
            containers = self.client.containers.list(all=all, sparse=True)
            return [container.attrs for container in containers]
        except DockerServiceError:
            raise
        except _CONNECTION_ERRORS as e:
            self.reset()
            raise DockerServiceError(f"Lost connection to Docker: {e}") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list containers: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error listing containers: {e}") from e

    def start_container(self, container_id: str) -> OperationResult:
        """Start a container.

        Args:
            container_id: Container ID or name

        Returns:
            OperationResult describing the outcome
        """
        return self._change_state("start", container_id, lambda c: c.start())

    def stop_container(
        self, container_id: str, grace_period: int = STOP_GRACE_PERIOD
    ) -> OperationResult:
        """Stop a container.

        Args:
            container_id: Container ID or name
            grace_period: Seconds to wait before the container is killed

        Returns:
            OperationResult describing the outcome
        """
        return self._change_state("stop", container_id, lambda c: c.stop(timeout=grace_period))

    def _change_state(self, action: str, container_id: str, apply) -> OperationResult:
        should_run = action == "start"
        try:
            container = self.client.containers.get(container_id)
            if (container.status == RUNNING_STATE) == should_run:
                state = "running" if should_run else "not running"
                return OperationResult.failed(
                    action, container_id, OperationFailure.ALREADY_IN_STATE,
                    f"Container '{container_id}' is already {state}",
                )
            apply(container)
            logger.info(f"Container {container_id[:12]} {action} requested")
            return OperationResult.ok(action, container_id)
        except docker.errors.NotFound:
            return OperationResult.failed(
                action, container_id, OperationFailure.NOT_FOUND,
                f"Container '{container_id}' not found",
            )
        except requests.exceptions.Timeout as e:
            return OperationResult.failed(
                action, container_id, OperationFailure.TIMEOUT,
                f"Timed out trying to {action} container: {e}",
            )
        except _CONNECTION_ERRORS as e:
            self.reset()
            return OperationResult.failed(
                action, container_id, OperationFailure.RUNTIME_ERROR,
                f"Lost connection to Docker: {e}",
            )
        except (docker.errors.DockerException, DockerServiceError) as e:
            logger.warning(f"Failed to {action} container {container_id}: {e}")
            return OperationResult.failed(
                action, container_id, OperationFailure.RUNTIME_ERROR,
                f"Failed to {action} container: {e}",
            )
