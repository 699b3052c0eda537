"""Tests for cloud argument composition."""

import json
import pytest
from ybnode.domain.entities.node_task_params import ListParams
from ybnode.domain.exceptions import MissingConfigurationError, NotFoundError
from ybnode.domain.services.cloud_args import CloudArgsBuilder
from ybnode.domain.value_objects.command_types import CloudType


class TestCloudArgs:
    def test_zone_only_for_public_clouds(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog, docker_network="yb-bridge")
        for cloud in (CloudType.AWS, CloudType.GCP, CloudType.AZU):
            params = make_params(ListParams, cloud=cloud)
            assert builder.build(params) == ["--zone", "us-west-1a"]

    def test_docker_with_network(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog, docker_network="yb-bridge")
        params = make_params(ListParams, cloud=CloudType.DOCKER)
        assert builder.build(params) == ["--zone", "us-west-1a", "--network", "yb-bridge"]

    def test_docker_without_network(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog)
        params = make_params(ListParams, cloud=CloudType.DOCKER)
        with pytest.raises(MissingConfigurationError, match="docker.network"):
            builder.build(params)

    def test_docker_with_empty_network(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog, docker_network="")
        params = make_params(ListParams, cloud=CloudType.DOCKER)
        with pytest.raises(MissingConfigurationError):
            builder.build(params)

    def test_onprem_node_metadata(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog)
        params = make_params(ListParams, cloud=CloudType.ONPREM, node_name="onprem-n1")
        args = builder.build(params)
        assert args[:3] == ["--zone", "us-west-1a", "--node_metadata"]
        assert json.loads(args[3]) == {
            "ip": "192.168.1.10", "region": "dc1", "zone": "rack1",
        }

    def test_onprem_unknown_node(self, catalog, make_params):
        builder = CloudArgsBuilder(catalog)
        params = make_params(ListParams, cloud=CloudType.ONPREM, node_name="ghost")
        with pytest.raises(NotFoundError, match="ghost"):
            builder.build(params)
