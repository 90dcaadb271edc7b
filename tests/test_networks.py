"""Tests for the per-operation network methods against a stub transport."""

import json

import pytest

from docker_netapi import (
    APIError,
    ConnectNetworkOptions,
    CreateNetworkOptions,
    DeserializationError,
    DisconnectNetworkOptions,
    EndpointIPAMConfig,
    EndpointSettings,
    InspectNetworkOptions,
    ListNetworksOptions,
    ListNetworksResults,
    NetworkNotFound,
    PruneNetworksOptions,
    SerializationError,
    TransportError,
)


class TestCreate:

    def test_create_network(self, client, transport):
        transport.respond(201, {'Id': '22be93d5babb089c5aab8dbc369042fad48ff791584ca2da2100db837a1c7c30',
                                'Warning': ''})

        result = client.networks.create(CreateNetworkOptions(name='certs'))

        assert result.id.startswith('22be93d5babb')
        request = transport.last
        assert request.method == 'POST'
        assert request.path == '/networks/create'
        assert request.params is None
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.body)['Name'] == 'certs'

    def test_create_without_warning(self, client, transport):
        transport.respond(201, {'Id': 'abc'})
        assert client.networks.create(CreateNetworkOptions(name='certs')).warning == ''

    def test_create_conflict(self, client, transport):
        transport.respond(409, {'message': 'network with name certs already exists'})
        with pytest.raises(APIError) as excinfo:
            client.networks.create(CreateNetworkOptions(name='certs'))
        assert excinfo.value.status_code == 409


class TestRemove:

    def test_remove_network(self, client, transport):
        transport.respond(204)

        assert client.networks.remove('my_network_name') is None
        assert transport.last.method == 'DELETE'
        assert transport.last.path == '/networks/my_network_name'
        assert transport.last.body is None

    def test_remove_missing_network(self, client, transport):
        transport.respond(404, {'message': 'network my_network_name not found'})

        with pytest.raises(NetworkNotFound) as excinfo:
            client.networks.remove('my_network_name')

        assert isinstance(excinfo.value, APIError)
        assert isinstance(excinfo.value.__cause__, APIError)

    def test_remove_error_is_transport_error(self, client, transport):
        transport.respond(500, b'garbage that is not json')
        with pytest.raises(TransportError) as excinfo:
            client.networks.remove('net01')
        assert not isinstance(excinfo.value, DeserializationError)


class TestInspect:

    def test_inspect_with_options(self, client, transport, network_payload):
        transport.respond(200, network_payload)

        result = client.networks.inspect(
            'net01', InspectNetworkOptions(verbose=True, scope='global'))

        assert result.name == 'net01'
        request = transport.last
        assert request.method == 'GET'
        assert request.path == '/networks/net01'
        assert request.params == [('verbose', 'true'), ('scope', 'global')]
        assert request.body is None

    def test_inspect_without_options(self, client, transport, network_payload):
        transport.respond(200, network_payload)

        client.networks.inspect('net01')

        assert transport.last.params is None
        assert transport.last.target() == '/networks/net01'

    def test_inspect_malformed_response(self, client, transport):
        transport.respond(200, b'{"Name": "net01", "Id": ')

        with pytest.raises(DeserializationError) as excinfo:
            client.networks.inspect('net01')

        assert not isinstance(excinfo.value, TransportError)

    def test_inspect_unexpected_shape(self, client, transport):
        transport.respond(200, ['net01'])
        with pytest.raises(DeserializationError):
            client.networks.inspect('net01')

    def test_inspect_missing_network(self, client, transport):
        transport.respond(404, {'message': 'network net01 not found'})
        with pytest.raises(NetworkNotFound):
            client.networks.inspect('net01')


class TestList:

    def test_list_without_options(self, client, transport, network_payload):
        transport.respond(200, [network_payload])

        results = client.networks.list()

        assert len(results) == 1
        assert isinstance(results[0], ListNetworksResults)
        assert results[0].labels == {'com.example.some-label': 'some-value'}
        assert transport.last.params is None
        assert transport.last.path == '/networks'

    def test_list_with_filters(self, client, transport):
        transport.respond(200, [])

        results = client.networks.list(
            ListNetworksOptions(filters={'label': ['maintainer=some_maintainer']}))

        assert results == []
        assert transport.last.params == [('filters', '{"label":["maintainer=some_maintainer"]}')]


class TestConnectDisconnect:

    def test_connect_network(self, client, transport):
        transport.respond(200)
        options = ConnectNetworkOptions(
            container='3613f73ba0e4',
            endpoint_config=EndpointSettings(
                ipam_config=EndpointIPAMConfig(ipv4_address='172.24.56.89'),
            ),
        )

        assert client.networks.connect('my_network_name', options) is None

        request = transport.last
        assert request.method == 'POST'
        assert request.path == '/networks/my_network_name/connect'
        assert request.params is None
        body = json.loads(request.body)
        assert body['Container'] == '3613f73ba0e4'
        assert body['EndpointConfig']['IPAMConfig'] == {'IPv4Address': '172.24.56.89'}

    def test_connect_server_error(self, client, transport):
        transport.respond(500, {'message': 'container cannot be connected'})

        with pytest.raises(APIError) as excinfo:
            client.networks.connect('net01', ConnectNetworkOptions(container='3613f73ba0e4'))

        assert not isinstance(excinfo.value, NetworkNotFound)
        assert excinfo.value.is_server_error()

    def test_disconnect_network(self, client, transport):
        transport.respond(200)

        client.networks.disconnect(
            'my_network_name', DisconnectNetworkOptions(container='3613f73ba0e4', force=True))

        request = transport.last
        assert request.path == '/networks/my_network_name/disconnect'
        assert json.loads(request.body) == {'Container': '3613f73ba0e4', 'Force': True}

    def test_disconnect_error_is_not_deserialization_error(self, client, transport):
        transport.respond(403, b'')
        with pytest.raises(APIError) as excinfo:
            client.networks.disconnect('net01', DisconnectNetworkOptions(container='c1'))
        assert not isinstance(excinfo.value, DeserializationError)


class TestPrune:

    def test_prune_without_options(self, client, transport):
        transport.respond(200, {'NetworksDeleted': ['net01']})

        result = client.networks.prune()

        assert result.networks_deleted == ['net01']
        assert transport.last.method == 'POST'
        assert transport.last.path == '/networks/prune'
        assert transport.last.params is None
        assert transport.last.body is None

    def test_prune_with_empty_filters(self, client, transport):
        transport.respond(200, {'NetworksDeleted': None})

        result = client.networks.prune(PruneNetworksOptions())

        assert result.networks_deleted is None
        assert transport.last.params == [('filters', '{}')]

    def test_serialization_error_before_request(self, client, transport):
        options = PruneNetworksOptions[bytes](filters={b'label': [b'\xff']})

        with pytest.raises(SerializationError):
            client.networks.prune(options)

        assert transport.requests == []
