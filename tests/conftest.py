import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock


def make_raw_container(
    container_id="abc123def4567890",
    names=("/web",),
    image="nginx:latest",
    state="running",
    ports=None,
    labels=None,
):
    """Build a container entry shaped like the Engine list response."""
    return {
        "Id": container_id,
        "Names": list(names),
        "Image": image,
        "State": state,
        "Ports": ports if ports is not None else [],
        "Labels": labels if labels is not None else {},
    }


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def raw_container():
    """Provides the raw container factory."""
    return make_raw_container


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.version.return_value = {"Version": "27.0.1", "ApiVersion": "1.46"}
    mock_client.containers.list.return_value = []
    return mock_client


@pytest.fixture
def curation_file(tmp_path):
    """Provides a curation file path inside a temporary data directory."""
    return tmp_path / ".docker-home" / "curation.json"
