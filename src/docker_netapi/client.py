"""
Docker Client - Main API entry point
"""

from typing import Any, Optional

from .decoder import decode_json, decode_unit, decode_value
from .http_client import DockerHTTPClient, DockerRequest, build_request
from .networks import NetworkCollection
from .settings import ClientSettings


class DockerClient:
    """
    Docker API Client

    Every call is a single request/response exchange; the client keeps no
    state between calls beyond its transport.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: int = 60,
                 version: Optional[str] = None, transport=None):
        """
        Initialize Docker client

        Args:
            base_url: Docker socket path or tcp:// address (default: auto-detect)
            timeout: Request timeout in seconds
            version: API version to pin requests to
            transport: Object with a ``send(DockerRequest)`` method, used
                instead of the built-in HTTP client
        """
        if transport is None:
            transport = DockerHTTPClient(base_url=base_url, timeout=timeout, version=version)
        self.http = transport
        self.networks = NetworkCollection(self)

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None) -> 'DockerClient':
        """
        Build a client from ClientSettings (file and environment)

        Logger levels are left to the application, which can apply
        ``settings.log_level`` itself.
        """
        if settings is None:
            settings = ClientSettings()
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            version=settings.api_version,
        )

    def process_into_value(self, request: DockerRequest, result_type: Any) -> Any:
        """Send request and decode the body into result_type"""
        response = self.http.send(request)
        return decode_value(response, result_type)

    def process_into_unit(self, request: DockerRequest) -> None:
        """Send request that returns no payload"""
        response = self.http.send(request)
        return decode_unit(response)

    def version(self) -> dict:
        """Get Docker version info"""
        return decode_json(self.http.send(build_request('GET', '/version')))

    def info(self) -> dict:
        """Get Docker system info"""
        return decode_json(self.http.send(build_request('GET', '/info')))

    def ping(self) -> str:
        """Ping Docker daemon"""
        response = self.http.send(build_request('GET', '/_ping'))
        return response.body.decode('utf-8', errors='replace')

    def close(self):
        """Close client (no-op for compatibility)"""
        pass
