"""Tests for composition root DI container."""

import pytest
from ybnode.composition_root import create_container, YbNodeContainer
from ybnode.infrastructure.config import YbNodeConfig, CatalogConfig, DockerConfig


@pytest.fixture
def container(tmp_path):
    config = YbNodeConfig(
        catalog=CatalogConfig(db_path=str(tmp_path / "ybnode.db")),
        docker=DockerConfig(network="yb-bridge"),
    )
    container = create_container(config)
    yield container
    container.close()


class TestCompositionRoot:
    def test_create_container(self, container):
        assert isinstance(container, YbNodeContainer)
        assert container.catalog is not None
        assert container.composer is not None
        assert container.executor is not None
        assert container.event_bus is not None
        assert container.exporter is not None
        assert container.run_node_command is not None

    def test_composer_reads_from_catalog(self, container):
        assert container.composer.access_args.universes is container.catalog
        assert container.composer.configure_args.releases is container.catalog
        assert container.composer.cloud_args.node_inventory is container.catalog

    def test_docker_network_passed_to_composer(self, container):
        assert container.composer.cloud_args.docker_network == "yb-bridge"

    def test_run_node_command_wiring(self, container):
        use_case = container.run_node_command
        assert use_case.composer is container.composer
        assert use_case.executor is container.executor
        assert use_case.event_bus is container.event_bus
        assert use_case.exporter is container.exporter

    def test_executor_uses_devops_config(self, container):
        assert container.executor.config is container.config.devops
