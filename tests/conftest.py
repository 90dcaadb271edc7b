"""Test configuration for pytest."""

import json

import pytest

from docker_netapi import APIError, DockerClient, DockerResponse


class StubTransport:
    """Transport double: records requests, replays canned responses."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def respond(self, status=200, body=b''):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        self.responses.append(DockerResponse(status, body))

    def send(self, request):
        self.requests.append(request)
        response = self.responses.pop(0)
        if response.status >= 400:
            raise APIError(
                f"Docker API error: {response.body!r}",
                response=response,
                status_code=response.status,
            )
        return response

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def client(transport):
    return DockerClient(transport=transport)


@pytest.fixture
def network_payload():
    """Inspect response as returned by a real daemon."""
    return {
        "Name": "net01",
        "Id": "7d86d31b1478e7cca9ebed7e73aa0fdeec46c5ca29497431d3007d2d9e15ed99",
        "Created": "2016-10-19T04:33:30.360899459Z",
        "Scope": "local",
        "Driver": "bridge",
        "EnableIPv6": False,
        "IPAM": {
            "Driver": "default",
            "Config": [{"Subnet": "172.19.0.0/16", "Gateway": "172.19.0.1"}],
            "Options": {"foo": "bar"},
        },
        "Internal": False,
        "Attachable": False,
        "Ingress": False,
        "Containers": {
            "19a4d5d687db25203351ed79d478946f861258f018fe384f229f2efa4b23513c": {
                "Name": "test",
                "EndpointID": "628cadb8bcb92de107b2a1e516cbffe463e321f548feb37697cce00ad694f21a",
                "MacAddress": "02:42:ac:13:00:02",
                "IPv4Address": "172.19.0.2/16",
                "IPv6Address": "",
            }
        },
        "Options": {"com.docker.network.bridge.default_bridge": "true"},
        "Labels": {"com.example.some-label": "some-value"},
        "ConfigFrom": {"Network": ""},
        "ConfigOnly": False,
    }
