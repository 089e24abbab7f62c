"""Tests for Docker service."""

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
import docker.errors

from docker_home.models.operation import OperationFailure
from docker_home.services.docker_service import DockerService
from docker_home.services.exceptions import DockerServiceError, EndpointNotFoundError


@pytest.fixture
def prober():
    mock_prober = Mock()
    mock_prober.detect_endpoint.return_value = "unix:///var/run/docker.sock"
    return mock_prober


class TestDockerService:
    """Test cases for DockerService."""

    @patch('docker_home.services.docker_service.docker.DockerClient')
    def test_connect(self, mock_client_class, prober, mock_docker_client):
        mock_client_class.return_value = mock_docker_client

        service = DockerService(prober, timeout=12)
        endpoint = service.connect()

        assert endpoint == "unix:///var/run/docker.sock"
        assert service.endpoint == endpoint
        assert service.client == mock_docker_client
        mock_client_class.assert_called_once_with(base_url=endpoint, timeout=12)

    def test_connect_without_endpoint(self, prober):
        prober.detect_endpoint.side_effect = EndpointNotFoundError(["tcp://127.0.0.1:2375"])

        with pytest.raises(EndpointNotFoundError):
            DockerService(prober).connect()

    @patch('docker_home.services.docker_service.docker.DockerClient')
    def test_list_containers(self, mock_client_class, prober, mock_docker_client, raw_container):
        mock_client_class.return_value = mock_docker_client
        raw = raw_container()
        mock_docker_client.containers.list.return_value = [Mock(attrs=raw)]

        service = DockerService(prober)
        result = service.list_containers(all=False)

        assert result == [raw]
        mock_docker_client.containers.list.assert_called_once_with(all=False, sparse=True)

    @patch('docker_home.services.docker_service.docker.DockerClient')
    def test_list_containers_api_error(self, mock_client_class, prober, mock_docker_client):
        mock_client_class.return_value = mock_docker_client
        mock_docker_client.containers.list.side_effect = docker.errors.APIError("boom")

        service = DockerService(prober)
        with pytest.raises(DockerServiceError, match="Failed to list containers"):
            service.list_containers()

    @patch('docker_home.services.docker_service.docker.DockerClient')
    def test_lost_connection_probes_again(self, mock_client_class, prober, mock_docker_client):
        mock_client_class.return_value = mock_docker_client
        mock_docker_client.containers.list.side_effect = [
            requests.exceptions.ConnectionError("socket closed"),
            [],
        ]

        service = DockerService(prober)
        with pytest.raises(DockerServiceError, match="Lost connection"):
            service.list_containers()
        assert service.endpoint is None

        assert service.list_containers() == []
        assert prober.detect_endpoint.call_count == 2

    @patch('docker_home.services.docker_service.docker.DockerClient')
    def test_version(self, mock_client_class, prober, mock_docker_client):
        mock_client_class.return_value = mock_docker_client

        assert DockerService(prober).version()["Version"] == "27.0.1"


class TestContainerActions:
    """Test start/stop results."""

    @pytest.fixture
    def service(self, prober, mock_docker_client):
        with patch('docker_home.services.docker_service.docker.DockerClient') as mock_client_class:
            mock_client_class.return_value = mock_docker_client
            service = DockerService(prober)
            service.connect()
        return service

    def test_start_success(self, service, mock_docker_client):
        container = MagicMock(status="exited")
        mock_docker_client.containers.get.return_value = container

        result = service.start_container("abc123")

        assert result.success is True
        assert result.action == "start"
        assert result.failure is None
        container.start.assert_called_once()

    def test_start_not_found(self, service, mock_docker_client):
        mock_docker_client.containers.get.side_effect = docker.errors.NotFound("No such container")

        result = service.start_container("missing")

        assert result.success is False
        assert result.failure == OperationFailure.NOT_FOUND

    def test_start_already_running(self, service, mock_docker_client):
        container = MagicMock(status="running")
        mock_docker_client.containers.get.return_value = container

        result = service.start_container("abc123")

        assert result.failure == OperationFailure.ALREADY_IN_STATE
        container.start.assert_not_called()

    def test_start_timeout(self, service, mock_docker_client):
        container = MagicMock(status="created")
        container.start.side_effect = requests.exceptions.ReadTimeout("read timed out")
        mock_docker_client.containers.get.return_value = container

        result = service.start_container("abc123")

        assert result.failure == OperationFailure.TIMEOUT

    def test_start_runtime_error(self, service, mock_docker_client):
        container = MagicMock(status="exited")
        container.start.side_effect = docker.errors.APIError("port is already allocated")
        mock_docker_client.containers.get.return_value = container

        result = service.start_container("abc123")

        assert result.failure == OperationFailure.RUNTIME_ERROR
        assert "port is already allocated" in result.message

    def test_stop_with_grace_period(self, service, mock_docker_client):
        container = MagicMock(status="running")
        mock_docker_client.containers.get.return_value = container

        result = service.stop_container("abc123", grace_period=10)

        assert result.success is True
        assert result.action == "stop"
        container.stop.assert_called_once_with(timeout=10)

    def test_stop_already_stopped(self, service, mock_docker_client):
        mock_docker_client.containers.get.return_value = MagicMock(status="exited")

        result = service.stop_container("abc123")

        assert result.failure == OperationFailure.ALREADY_IN_STATE
        assert "not running" in result.message
