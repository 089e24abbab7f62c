"""Docker endpoint auto-detection."""

import logging
import os
import sys
from typing import List, Optional

import docker
import requests

from ..core.constants import (
    LOOPBACK_ALIAS_ENDPOINT,
    LOOPBACK_ENDPOINT,
    NAMED_PIPE_ENDPOINT,
    PROBE_TIMEOUT,
    UNIX_SOCKET_PATH,
)
from .exceptions import EndpointNotFoundError

logger = logging.getLogger(__name__)


class EndpointProber:
    """Finds the first Docker endpoint that answers a version query."""

    def __init__(
        self,
        configured_endpoint: Optional[str] = None,
        timeout: float = PROBE_TIMEOUT,
        socket_path: str = UNIX_SOCKET_PATH,
        platform: str = sys.platform,
    ):
        """Initialize the prober.

        Args:
            configured_endpoint: Endpoint to try before the built-in candidates
            timeout: Per-candidate timeout in seconds
            socket_path: Local socket checked for existence before probing
            platform: Platform name used to decide on the named pipe
        """
        self.configured_endpoint = configured_endpoint
        self.timeout = timeout
        self.socket_path = socket_path
        self.platform = platform

    def candidates(self) -> List[str]:
        """Return the endpoints worth trying, in priority order."""
        endpoints = []
        if self.configured_endpoint:
            endpoints.append(self.configured_endpoint)
        if os.path.exists(self.socket_path):
            endpoints.append(f"unix://{self.socket_path}")
        if self.platform.startswith("win"):
            endpoints.append(NAMED_PIPE_ENDPOINT)
        endpoints.extend([LOOPBACK_ALIAS_ENDPOINT, LOOPBACK_ENDPOINT])
        return endpoints

    def probe(self, endpoint: str) -> bool:
        """Check whether a single endpoint answers a version query."""
        client = None
        try:
            client = docker.DockerClient(base_url=endpoint, timeout=self.timeout)
            client.version()
            return True
        except (docker.errors.DockerException, requests.exceptions.RequestException, OSError) as e:
            logger.debug(f"Docker endpoint {endpoint} did not answer: {e}")
            return False
        finally:
            if client is not None:
                client.close()

    def detect_endpoint(self) -> str:
        """Return the first endpoint that responds.

        Raises:
            EndpointNotFoundError: If no candidate responds
        """
        candidates = self.candidates()
        for endpoint in candidates:
            if self.probe(endpoint):
                logger.info(f"Using Docker endpoint {endpoint}")
                return endpoint
        raise EndpointNotFoundError(candidates)
