"""
Docker Networks API

Networks are user-defined networks that containers can be attached to.
Option models are generic over the text type, so ``CreateNetworkOptions[str]``
and ``CreateNetworkOptions[bytes]`` share one definition.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Generic, List, Optional

from pydantic import Field, field_validator

from .exceptions import APIError, NetworkNotFound
from .http_client import build_request
from .models import (
    OptionsModel,
    QueryParams,
    ResultModel,
    WireModel,
    encode_query_params,
    encode_text,
    filters_param,
)
from .text import TextT, as_str, bool_str

logger = logging.getLogger(__name__)


class IPAMConfig(WireModel, Generic[TextT]):
    """IPAM configuration for one subnet"""

    subnet: Optional[TextT] = None
    ip_range: Optional[TextT] = Field(default=None, alias='IPRange')
    gateway: Optional[TextT] = None
    aux_address: Optional[Dict[TextT, TextT]] = Field(default=None, alias='AuxiliaryAddresses')


class IPAM(WireModel, Generic[TextT]):
    """
    IP Address Management for a network

    Subnet configs keep their order; the daemon matches them by position.
    """

    driver: TextT = Field(default='default', validate_default=True)
    config: List[IPAMConfig[TextT]] = Field(default_factory=list)
    options: Optional[Dict[TextT, TextT]] = None

    @field_validator('config', mode='before')
    @classmethod
    def null_config_as_empty(cls, value):
        return [] if value is None else value


class CreateNetworkOptions(OptionsModel, Generic[TextT]):
    """
    Network configuration for the Create Network API

    Example:
        CreateNetworkOptions(name='certs', labels={'maintainer': 'ops'})

    ``driver`` is always sent; it defaults to 'bridge', the daemon's own default.
    """

    name: TextT
    # best effort only, the daemon cannot guarantee catching every collision
    check_duplicate: bool = False
    driver: TextT = Field(default='bridge', validate_default=True)
    internal: bool = False
    attachable: bool = False
    ingress: bool = False
    ipam: IPAM[TextT] = Field(default_factory=dict, alias='IPAM', validate_default=True)
    enable_ipv6: bool = Field(default=False, alias='EnableIPv6')
    options: Dict[TextT, TextT] = Field(default_factory=dict)
    labels: Dict[TextT, TextT] = Field(default_factory=dict)


class CreateNetworkResults(ResultModel):
    id: str
    warning: str = ''


class InspectNetworkOptions(OptionsModel, Generic[TextT]):
    """
    Parameters for the Inspect Network API

    Attributes:
        verbose: Detailed inspect output for troubleshooting
        scope: Filter the network by scope (swarm, global, or local)
    """

    verbose: bool = False
    scope: TextT = Field(default='', validate_default=True)

    def into_query_params(self) -> QueryParams:
        return [
            ('verbose', bool_str(self.verbose)),
            ('scope', encode_text(self.scope)),
        ]


class InspectNetworkResultsContainers(ResultModel):
    name: str = ''
    endpoint_id: Optional[str] = Field(default=None, alias='EndpointID')
    mac_address: Optional[str] = None
    ipv4_address: Optional[str] = Field(default=None, alias='IPv4Address')
    ipv6_address: Optional[str] = Field(default=None, alias='IPv6Address')


class InspectNetworkResults(ResultModel):
    name: str
    id: str
    created: str = ''
    scope: str = ''
    driver: str = ''
    enable_ipv6: bool = Field(default=False, alias='EnableIPv6')
    ipam: IPAM[str] = Field(default_factory=IPAM, alias='IPAM')
    internal: bool = False
    attachable: bool = False
    ingress: bool = False
    containers: Dict[str, InspectNetworkResultsContainers] = Field(default_factory=dict)
    options: Dict[str, str] = Field(default_factory=dict)
    labels: Dict[str, str] = Field(default_factory=dict)
    config_from: Dict[str, str] = Field(default_factory=dict)
    config_only: bool = False


class ListNetworksResults(InspectNetworkResults):
    """One entry of the List Networks API response"""


class ListNetworksOptions(OptionsModel, Generic[TextT]):
    """
    Parameters for the List Networks API

    Available filters:
        driver=<driver-name>
        id=<network-id>
        label=<key> or label=<key>=<value>
        name=<network-name>
        scope=["swarm"|"global"|"local"]
        type=["custom"|"builtin"]
    """

    filters: Dict[TextT, List[TextT]] = Field(default_factory=dict)

    def into_query_params(self) -> QueryParams:
        return filters_param(self.filters)


class EndpointIPAMConfig(WireModel, Generic[TextT]):
    ipv4_address: Optional[TextT] = Field(default=None, alias='IPv4Address')
    ipv6_address: Optional[TextT] = Field(default=None, alias='IPv6Address')
    link_local_ips: Optional[List[TextT]] = Field(default=None, alias='LinkLocalIPs')


class EndpointSettings(WireModel, Generic[TextT]):
    """Configuration for a network endpoint"""

    ipam_config: EndpointIPAMConfig[TextT] = Field(
        default_factory=dict, alias='IPAMConfig', validate_default=True
    )
    links: List[TextT] = Field(default_factory=list)
    aliases: List[TextT] = Field(default_factory=list)
    network_id: Optional[TextT] = Field(default=None, alias='NetworkID')
    endpoint_id: Optional[TextT] = Field(default=None, alias='EndpointID')
    gateway: Optional[TextT] = None
    ip_address: Optional[TextT] = Field(default=None, alias='IPAddress')
    ip_prefix_len: Optional[int] = Field(default=None, alias='IPPrefixLen')
    ipv6_gateway: Optional[TextT] = Field(default=None, alias='IPv6Gateway')
    global_ipv6_address: Optional[TextT] = Field(default=None, alias='GlobalIPv6Address')
    global_ipv6_prefix_len: Optional[int] = Field(default=None, alias='GlobalIPv6PrefixLen')
    mac_address: Optional[TextT] = None
    # passed straight to the network driver
    driver_opts: Optional[Dict[TextT, TextT]] = None


class ConnectNetworkOptions(OptionsModel, Generic[TextT]):
    """Network configuration for the Connect Network API"""

    container: TextT
    endpoint_config: EndpointSettings[TextT] = Field(default_factory=dict, validate_default=True)


class DisconnectNetworkOptions(OptionsModel, Generic[TextT]):
    """Network configuration for the Disconnect Network API"""

    container: TextT
    force: bool = False


class PruneNetworksOptions(OptionsModel, Generic[TextT]):
    """
    Parameters for the Prune Networks API

    Available filters:
        until=<timestamp>  prune networks created before this timestamp
        label=<key>, label=<key>=<value>, label!=<key>, label!=<key>=<value>
    """

    filters: Dict[TextT, List[TextT]] = Field(default_factory=dict)

    def into_query_params(self) -> QueryParams:
        return filters_param(self.filters)


class PruneNetworksResults(ResultModel):
    networks_deleted: Optional[List[str]] = None


class NetworkCollection:
    """Docker Networks Collection"""

    def __init__(self, client):
        self.client = client

    def create(self, options: CreateNetworkOptions) -> CreateNetworkResults:
        """
        Create network

        Args:
            options: Network configuration

        Returns:
            CreateNetworkResults with the new network's ID
        """
        request = build_request('POST', '/networks/create', body=options.into_body())
        result = self.client.process_into_value(request, CreateNetworkResults)
        logger.debug(f"Network {as_str(options.name)} created: {result.id[:12]}")
        return result

    def remove(self, network_name: str) -> None:
        """
        Remove network

        Args:
            network_name: Network ID or name
        """
        request = build_request('DELETE', f'/networks/{network_name}')
        with _network_lookup(network_name):
            return self.client.process_into_unit(request)

    def inspect(self, network_name: str,
                options: Optional[InspectNetworkOptions] = None) -> InspectNetworkResults:
        """
        Inspect network

        Args:
            network_name: Network ID or name
            options: Verbosity and scope, or None to send no query parameters

        Returns:
            InspectNetworkResults
        """
        request = build_request(
            'GET',
            f'/networks/{network_name}',
            params=encode_query_params(options),
        )
        with _network_lookup(network_name):
            return self.client.process_into_value(request, InspectNetworkResults)

    def list(self, options: Optional[ListNetworksOptions] = None) -> List[ListNetworksResults]:
        """
        List networks

        Args:
            options: Filters, or None to list every network

        Returns:
            List of ListNetworksResults
        """
        request = build_request('GET', '/networks', params=encode_query_params(options))
        return self.client.process_into_value(request, List[ListNetworksResults])

    def connect(self, network_name: str, options: ConnectNetworkOptions) -> None:
        """
        Connect a container to a network

        Args:
            network_name: Network ID or name
            options: Container and endpoint configuration
        """
        request = build_request(
            'POST',
            f'/networks/{network_name}/connect',
            body=options.into_body(),
        )
        with _network_lookup(network_name):
            return self.client.process_into_unit(request)

    def disconnect(self, network_name: str, options: DisconnectNetworkOptions) -> None:
        """
        Disconnect a container from a network

        Args:
            network_name: Network ID or name
            options: Container and force flag
        """
        request = build_request(
            'POST',
            f'/networks/{network_name}/disconnect',
            body=options.into_body(),
        )
        with _network_lookup(network_name):
            return self.client.process_into_unit(request)

    def prune(self, options: Optional[PruneNetworksOptions] = None) -> PruneNetworksResults:
        """
        Remove unused networks

        Args:
            options: Filters, or None to prune every unused network

        Returns:
            PruneNetworksResults with the deleted network names
        """
        request = build_request('POST', '/networks/prune', params=encode_query_params(options))
        return self.client.process_into_value(request, PruneNetworksResults)


@contextmanager
def _network_lookup(network_name: str):
    """Raise NetworkNotFound for a 404 on a network path"""
    try:
        yield
    except APIError as e:
        if e.status_code != 404:
            raise
        raise NetworkNotFound(
            f"Network not found: {network_name}",
            response=e.response,
            status_code=e.status_code,
            explanation=e.explanation,
        ) from e
