"""
docker-netapi - typed client for the Docker Engine networks API
Works with Docker daemon via Unix socket or TCP
"""

from .client import DockerClient
from .exceptions import (
    DockerException,
    SerializationError,
    TransportError,
    APIError,
    NetworkNotFound,
    DeserializationError
)
from .http_client import DockerHTTPClient, DockerRequest, DockerResponse, build_request
from .models import encode_query_params
from .networks import (
    CreateNetworkOptions,
    CreateNetworkResults,
    ConnectNetworkOptions,
    DisconnectNetworkOptions,
    EndpointIPAMConfig,
    EndpointSettings,
    InspectNetworkOptions,
    InspectNetworkResults,
    InspectNetworkResultsContainers,
    IPAM,
    IPAMConfig,
    ListNetworksOptions,
    ListNetworksResults,
    NetworkCollection,
    PruneNetworksOptions,
    PruneNetworksResults
)
from .settings import ClientSettings

__all__ = [
    'DockerClient',
    'ClientSettings',
    'DockerHTTPClient',
    'DockerRequest',
    'DockerResponse',
    'build_request',
    'encode_query_params',
    'DockerException',
    'SerializationError',
    'TransportError',
    'APIError',
    'NetworkNotFound',
    'DeserializationError',
    'NetworkCollection',
    'CreateNetworkOptions',
    'CreateNetworkResults',
    'ConnectNetworkOptions',
    'DisconnectNetworkOptions',
    'EndpointIPAMConfig',
    'EndpointSettings',
    'InspectNetworkOptions',
    'InspectNetworkResults',
    'InspectNetworkResultsContainers',
    'IPAM',
    'IPAMConfig',
    'ListNetworksOptions',
    'ListNetworksResults',
    'PruneNetworksOptions',
    'PruneNetworksResults'
]

__version__ = '1.0.0'
