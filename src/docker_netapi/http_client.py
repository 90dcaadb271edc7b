"""
HTTP Client for Docker Unix Socket
Pure Python transport using http.client and socket
"""

import socket
import http.client
import json
import logging
import platform
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode, urlparse

from .exceptions import APIError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_UNIX_SOCKET = '/var/run/docker.sock'


@dataclass
class DockerRequest:
    """Transport-ready request: method, path, query parameters and body"""

    method: str
    path: str
    params: Optional[List[Tuple[str, str]]] = None
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def target(self, version: Optional[str] = None) -> str:
        """
        Request target as sent on the request line

        Args:
            version: API version prefix (e.g. '1.41'), or None for unversioned

        Returns:
            Path with URL-encoded query string
        """
        path = f'/v{version}{self.path}' if version else self.path
        if self.params:
            return f'{path}?{urlencode(self.params, quote_via=quote)}'
        return path


@dataclass
class DockerResponse:
    """Raw daemon response"""

    status: int
    body: bytes = b''
    headers: Dict[str, str] = field(default_factory=dict)


def build_request(method: str, path: str, params: Optional[List[Tuple[str, str]]] = None,
                  body: Optional[bytes] = None) -> DockerRequest:
    """
    Assemble a request for the transport

    Identifiers are interpolated into ``path`` by the caller as-is; no
    escaping happens here.

    Args:
        method: HTTP method (GET, POST, DELETE, etc.)
        path: API path
        params: Encoded query parameters, None for none
        body: Serialized JSON body, None for none

    Returns:
        DockerRequest
    """
    headers = {}
    if body is not None:
        headers['Content-Type'] = 'application/json'
    return DockerRequest(method=method, path=path, params=params, body=body, headers=headers)


class UnixHTTPConnection(http.client.HTTPConnection):
    """HTTP connection over Unix socket"""

    def __init__(self, socket_path: str, timeout: int = 60):
        super().__init__('localhost', timeout=timeout)
        self.socket_path = socket_path

    def connect(self):
        """Connect to Unix socket"""
        self.sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.sock.settimeout(self.timeout)
        self.sock.connect(self.socket_path)


def default_base_url() -> str:
    """Docker daemon address from DOCKER_HOST or the platform default socket"""
    docker_host = os.environ.get('DOCKER_HOST')
    if docker_host:
        return docker_host

    if platform.system() == "Darwin":  # macOS
        socket_path = os.path.expanduser('~/.docker/run/docker.sock')
        if os.path.exists(socket_path):
            return f'unix://{socket_path}'
    return f'unix://{DEFAULT_UNIX_SOCKET}'


def _error_message(body: bytes) -> str:
    """Daemon error message from a JSON error body, else the raw text"""
    text = body.decode('utf-8', errors='replace')
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict) and 'message' in data:
        return str(data['message'])
    return text


class DockerHTTPClient:
    """HTTP client for Docker daemon"""

    def __init__(self, base_url: Optional[str] = None, timeout: int = 60,
                 version: Optional[str] = None):
        """
        Initialize Docker HTTP client

        Args:
            base_url: unix:// socket path or tcp://host:port (default: auto-detect)
            timeout: Request timeout in seconds
            version: API version to pin requests to (default: daemon's)
        """
        self.timeout = timeout
        self.version = version
        self.socket_path = None
        self.host = None
        self.port = None

        if base_url is None:
            base_url = default_base_url()

        if base_url.startswith(('tcp://', 'http://')):
            parsed = urlparse(base_url.replace('tcp://', 'http://', 1))
            self.host = parsed.hostname or 'localhost'
            self.port = parsed.port or 2375
        else:
            # Remove unix:// prefix if present
            self.socket_path = base_url.replace('unix://', '', 1)
            if not os.path.exists(self.socket_path):
                raise FileNotFoundError(f"Docker socket not found: {self.socket_path}")

    def _connection(self) -> http.client.HTTPConnection:
        if self.socket_path is not None:
            return UnixHTTPConnection(self.socket_path, timeout=self.timeout)
        return http.client.HTTPConnection(self.host, self.port, timeout=self.timeout)

    def send(self, request: DockerRequest) -> DockerResponse:
        """
        Perform one request against the Docker daemon

        Args:
            request: Assembled request

        Returns:
            DockerResponse for any 2xx/3xx status

        Raises:
            APIError: daemon answered with an error status
            TransportError: daemon could not be reached
        """
        url = request.target(self.version)

        req_headers = {'Host': 'localhost'}
        req_headers.update(request.headers)
        if request.body is not None:
            req_headers['Content-Length'] = str(len(request.body))

        logger.debug(f"{request.method} {url}")

        conn = self._connection()
        try:
            conn.request(request.method, url, body=request.body, headers=req_headers)
            response = conn.getresponse()
            status = response.status
            data = response.read()
            headers = dict(response.getheaders())
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(f"Docker daemon request failed: {request.method} {url}: {e}") from e
        finally:
            conn.close()

        if status >= 400:
            error_msg = _error_message(data)
            raise APIError(
                f"Docker API error: {error_msg}",
                response=DockerResponse(status, data, headers),
                status_code=status,
                explanation=error_msg
            )

        return DockerResponse(status, data, headers)
