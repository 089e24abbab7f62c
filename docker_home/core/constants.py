"""Constants used throughout the Docker Home application."""


# Runtime endpoint candidates, in probe order
UNIX_SOCKET_PATH = "/var/run/docker.sock"
NAMED_PIPE_ENDPOINT = "npipe:////./pipe/docker_engine"
LOOPBACK_ALIAS_ENDPOINT = "tcp://host.docker.internal:2375"
LOOPBACK_ENDPOINT = "tcp://127.0.0.1:2375"

# Timeout values (seconds)
PROBE_TIMEOUT = 0.5
DOCKER_TIMEOUT = 30
REGISTRY_TIMEOUT = 5.0
STOP_GRACE_PERIOD = 5

# Container mapping
RUNNING_STATE = "running"
COMPOSE_PROJECT_LABEL = "com.docker.compose.project"
UNCATEGORIZED = "uncategorized"
HTTP_PRIVATE_PORTS = (80, 8080)
HTTPS_PRIVATE_PORTS = (443,)

# Docker Hub
DEFAULT_NAMESPACE = "library"
REGISTRY_HOST_PREFIXES = (
    "docker.io/",
    "index.docker.io/",
    "registry-1.docker.io/",
)
HUB_REPOSITORY_URL = "https://hub.docker.com/v2/repositories/{repo}/"
HUB_LOGO_URL = "https://hub.docker.com/api/media/repos_logo/v1/{repo}?type=logo"
HUB_PAGE_URL = "https://hub.docker.com/r/{repo}"

# Server defaults
DEFAULT_HOSTNAME = "localhost"
DEFAULT_BIND_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DATA_DIR_NAME = ".docker-home"
CURATION_FILE_NAME = "curation.json"
