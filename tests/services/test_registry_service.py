"""Tests for Docker Hub lookups."""

import asyncio

import httpx
import pytest

from docker_home.models.container import ContainerRecord
from docker_home.models.registry import RegistryFailure
from docker_home.services.registry_service import DockerHubClient, logo_url, normalize_image_name


def hub_client(handler):
    """DockerHubClient whose requests are answered by handler."""
    return DockerHubClient(http=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestNormalizeImageName:
    """Test image reference normalization."""

    @pytest.mark.parametrize("image, expected", [
        ("redis:7-alpine", "library/redis"),
        ("docker.elastic.co/elasticsearch/elasticsearch:8.12", "elasticsearch/elasticsearch"),
        ("myregistry.local/team/app@sha256:abcd", "team/app"),
        ("nginx", "library/nginx"),
        ("  Grafana/Grafana:latest  ", "grafana/grafana"),
        ("docker.io/library/postgres:16", "library/postgres"),
        ("docker.io/portainer/portainer-ce", "portainer/portainer-ce"),
        ("ghcr.io/home-assistant/home-assistant:stable", "home-assistant/home-assistant"),
        ("localhost:5000/app", "localhost:5000/app"),
        ("registry.example.com:5000/team/app:1.2", "team/app"),
    ])
    def test_normalize(self, image, expected):
        assert normalize_image_name(image) == expected

    @pytest.mark.parametrize("image", ["", "   ", None])
    def test_blank_image(self, image):
        assert normalize_image_name(image) == ""

    def test_logo_url_encodes_repository(self):
        assert logo_url("library/redis") == (
            "https://hub.docker.com/api/media/repos_logo/v1/library%2Fredis?type=logo"
        )


class TestDockerHubClient:
    """Test Docker Hub fetching."""

    def test_fetch_success(self):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, json={"description": "Redis is an in-memory data store."})

        info = asyncio.run(hub_client(handler).fetch("redis:7-alpine"))

        assert requested == ["https://hub.docker.com/v2/repositories/library/redis/"]
        assert info.is_empty is False
        assert info.repository == "library/redis"
        assert info.description == "Redis is an in-memory data store."
        assert info.icon_url == logo_url("library/redis")
        assert info.hub_url == "https://hub.docker.com/r/library/redis"

    def test_fetch_null_description(self):
        info = asyncio.run(hub_client(lambda r: httpx.Response(200, json={"description": None})).fetch("nginx"))

        assert info.description == ""
        assert info.is_empty is False

    @pytest.mark.parametrize("status, failure", [
        (404, RegistryFailure.NOT_FOUND),
        (429, RegistryFailure.HTTP_ERROR),
        (500, RegistryFailure.HTTP_ERROR),
    ])
    def test_fetch_error_status(self, status, failure):
        info = asyncio.run(hub_client(lambda r: httpx.Response(status)).fetch("private/app"))

        assert info.is_empty is True
        assert info.error == failure
        assert info.description == ""
        assert info.icon_url == ""

    def test_fetch_network_error(self):
        def handler(request):
            raise httpx.ConnectError("name resolution failed", request=request)

        info = asyncio.run(hub_client(handler).fetch("nginx"))

        assert info.error == RegistryFailure.NETWORK_ERROR
        assert info.icon_url == ""

    def test_fetch_invalid_json(self):
        handler = lambda r: httpx.Response(200, content=b"<html>nope</html>")

        info = asyncio.run(hub_client(handler).fetch("nginx"))

        assert info.error == RegistryFailure.INVALID_RESPONSE

    @pytest.mark.parametrize("description", [42, {"text": "x"}, ["x"]])
    def test_fetch_non_string_description(self, description):
        handler = lambda r: httpx.Response(200, json={"description": description})

        info = asyncio.run(hub_client(handler).fetch("nginx"))

        assert info.error == RegistryFailure.INVALID_RESPONSE
        assert info.description == ""
        assert info.icon_url == ""

    def test_enrich_skips_non_string_description(self):
        handler = lambda r: httpx.Response(200, json={"description": 42})
        records = [ContainerRecord(id="1", image="nginx:latest")]

        asyncio.run(hub_client(handler).enrich(records))

        assert records[0].description == ""
        assert records[0].icon_url == ""
        assert records[0].hub_url == ""

    def test_fetch_blank_image_makes_no_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        info = asyncio.run(hub_client(handler).fetch(""))

        assert info.error == RegistryFailure.INVALID_IMAGE

    def test_enrich(self):
        requested = []

        def handler(request):
            requested.append(request.url.path)
            if request.url.path.endswith("/library/nginx/"):
                return httpx.Response(200, json={"description": "Official build of Nginx."})
            return httpx.Response(404)

        records = [
            ContainerRecord(id="1", image="nginx:latest"),
            ContainerRecord(id="2", image="nginx:1.25"),
            ContainerRecord(id="3", image="corp.local/team/internal:2"),
            ContainerRecord(id="4", image=""),
        ]

        asyncio.run(hub_client(handler).enrich(records))

        assert sorted(requested) == [
            "/v2/repositories/library/nginx/",
            "/v2/repositories/library/nginx/",
            "/v2/repositories/team/internal/",
        ]
        assert records[0].description == "Official build of Nginx."
        assert records[1].hub_url == "https://hub.docker.com/r/library/nginx"
        assert records[2].description == ""
        assert records[2].icon_url == ""
        assert records[3].description == ""

    def test_aclose_keeps_shared_client_open(self):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
        client = DockerHubClient(http=http)

        asyncio.run(client.aclose())

        assert http.is_closed is False
