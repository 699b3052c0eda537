"""Global test configuration.

Shared placement, catalog and composer fixtures for the node command tests.
"""

from uuid import UUID

import pytest

from ybnode.domain.entities.access_key import AccessKey, KeyInfo
from ybnode.domain.entities.node_instance import NodeInstance
from ybnode.domain.entities.node_task_params import ListParams
from ybnode.domain.entities.universe import Universe
from ybnode.domain.services.node_command_composer import NodeCommandComposer
from ybnode.domain.value_objects.command_types import CloudType
from ybnode.domain.value_objects.placement import Region, AvailabilityZone
from ybnode.infrastructure.repositories.in_memory_catalog import InMemoryCatalog

PROVIDER_UUID = UUID("6f1c2e0a-1d1b-4f53-9d8e-7c9a4b2f0a01")
UNIVERSE_UUID = UUID("0b5e9a44-2c1f-4b6e-8f0d-3a7c9e1d2b02")


@pytest.fixture
def provider_uuid():
    return PROVIDER_UUID


@pytest.fixture
def universe_uuid():
    return UNIVERSE_UUID


@pytest.fixture
def region():
    return Region(
        uuid=UUID("a3f0c1d2-5e6f-4a7b-8c9d-0e1f2a3b4c03"),
        code="us-west-1",
        provider_uuid=PROVIDER_UUID,
        yb_image="ami-0abc1234",
    )


@pytest.fixture
def zone():
    return AvailabilityZone(
        uuid=UUID("c4d5e6f7-0a1b-4c2d-9e3f-4a5b6c7d8e04"),
        code="us-west-1a",
    )


@pytest.fixture
def catalog():
    catalog = InMemoryCatalog()
    catalog.save_universe(Universe(
        uuid=UNIVERSE_UUID,
        name="orders",
        access_key_code="yb-orders-key",
        master_hosts=("10.0.0.1", "10.0.0.2", "10.0.0.3"),
    ))
    catalog.save_access_key(AccessKey(
        key_code="yb-orders-key",
        provider_uuid=PROVIDER_UUID,
        key_info=KeyInfo(private_key="/opt/yugabyte/keys/yb-orders-key.pem"),
    ))
    catalog.save_release("2.0.1.0", "/opt/yugabyte/releases/yugabyte-2.0.1.0.tar.gz")
    catalog.save_node_instance(NodeInstance(
        node_name="onprem-n1",
        details={"ip": "192.168.1.10", "region": "dc1", "zone": "rack1"},
    ))
    return catalog


@pytest.fixture
def composer(catalog):
    return NodeCommandComposer(
        universes=catalog,
        access_keys=catalog,
        releases=catalog,
        node_inventory=catalog,
        docker_network="yb-bridge",
    )


@pytest.fixture
def make_params(region, zone):
    """Build any params variant with AWS placement defaults for node n1."""

    def _make(params_cls=ListParams, **overrides):
        fields = {
            "node_name": "n1",
            "cloud": CloudType.AWS,
            "region": region,
            "zone": zone,
            "universe_uuid": UNIVERSE_UUID,
        }
        fields.update(overrides)
        return params_cls(**fields)

    return _make
