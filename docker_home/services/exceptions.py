"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class EndpointNotFoundError(DockerServiceError):
    """Exception raised when no Docker endpoint answers a version query."""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        tried = ", ".join(self.candidates) or "none"
        super().__init__(f"No reachable Docker endpoint (tried: {tried})")


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class RegistryError(ServiceError):
    """Exception raised for registry lookups that did not succeed."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(message)


class CurationStoreError(ServiceError):
    """Exception raised when the curation file cannot be written."""

    pass
