"""Tests for the configure sub-command builder."""

import json
import pytest
from ybnode.domain.entities.node_task_params import ConfigureParams
from ybnode.domain.entities.universe import Universe
from ybnode.domain.exceptions import (
    EmptyInputError,
    InvalidPropertyError,
    NotFoundError,
    ReleaseNotFoundError,
)
from ybnode.domain.services.configure_args import ConfigureArgsBuilder
from ybnode.domain.value_objects.command_types import ConfigureKind

MASTERS = "10.0.0.1:7100,10.0.0.2:7100,10.0.0.3:7100"


def _configure(make_params, **overrides):
    fields = {"type": ConfigureKind.EVERYTHING, "yb_software_version": "2.0.1.0"}
    fields.update(overrides)
    return make_params(ConfigureParams, **fields)


class TestMasterAddresses:
    def test_tserver_and_master_addresses(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        args = builder.build(_configure(make_params))
        assert args[:4] == [
            "--master_addresses_for_tserver", MASTERS,
            "--master_addresses_for_master", MASTERS,
        ]

    def test_shell_mode_skips_master_addresses(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        args = builder.build(_configure(make_params, is_master_in_shell_mode=True))
        assert args[:2] == ["--master_addresses_for_tserver", MASTERS]
        assert "--master_addresses_for_master" not in args

    def test_universe_without_masters(self, catalog, make_params, universe_uuid):
        catalog.save_universe(Universe(uuid=universe_uuid, name="orders"))
        builder = ConfigureArgsBuilder(catalog, catalog)
        with pytest.raises(NotFoundError, match="no master nodes"):
            builder.build(_configure(make_params))


class TestEverything:
    def test_package(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        args = builder.build(_configure(make_params, type=ConfigureKind.EVERYTHING))
        assert args[4:] == [
            "--package", "/opt/yugabyte/releases/yugabyte-2.0.1.0.tar.gz",
        ]

    def test_unknown_version(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(make_params, yb_software_version="9.9.9.9")
        with pytest.raises(ReleaseNotFoundError, match="9.9.9.9"):
            builder.build(params)

    def test_missing_version(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        with pytest.raises(ReleaseNotFoundError):
            builder.build(_configure(make_params, yb_software_version=None))


class TestSoftware:
    @pytest.mark.parametrize(
        "sub_type,tag",
        [("Download", "download-software"), ("Install", "install-software")],
    )
    def test_tags(self, catalog, make_params, sub_type, tag):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.SOFTWARE,
            properties={"taskSubType": sub_type},
        )
        assert builder.build(params)[4:] == [
            "--package", "/opt/yugabyte/releases/yugabyte-2.0.1.0.tar.gz",
            "--tags", tag,
        ]

    def test_missing_sub_type(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(make_params, type=ConfigureKind.SOFTWARE)
        with pytest.raises(InvalidPropertyError, match="taskSubType"):
            builder.build(params)

    def test_unrecognized_sub_type(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.SOFTWARE,
            properties={"taskSubType": "Upgrade"},
        )
        with pytest.raises(InvalidPropertyError) as exc_info:
            builder.build(params)
        assert exc_info.value.value == "Upgrade"

    def test_release_checked_before_sub_type(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params, type=ConfigureKind.SOFTWARE, yb_software_version="0.0.0.1"
        )
        with pytest.raises(ReleaseNotFoundError):
            builder.build(params)


class TestGFlags:
    def test_master_gflags(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.GFLAGS,
            properties={"processType": "MASTER"},
            gflags={"max_log_size": "256", "log_min_seconds_to_retain": "3600"},
        )
        args = builder.build(params)[4:]
        assert args[:4] == ["--tags", "master-gflags", "--replace_gflags", "--gflags"]
        assert json.loads(args[4]) == {
            "max_log_size": "256", "log_min_seconds_to_retain": "3600",
        }
        assert args[4] == '{"max_log_size":"256","log_min_seconds_to_retain":"3600"}'

    def test_tserver_gflags(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.GFLAGS,
            properties={"processType": "TSERVER"},
            gflags={"ysql_enable": "true"},
        )
        assert builder.build(params)[4:6] == ["--tags", "tserver-gflags"]

    def test_gflags_skip_release_lookup(self, catalog, make_params):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.GFLAGS,
            yb_software_version="not-released",
            properties={"processType": "TSERVER"},
            gflags={"v": "1"},
        )
        assert "--package" not in builder.build(params)

    @pytest.mark.parametrize("gflags", [None, {}])
    def test_empty_gflags(self, catalog, make_params, gflags):
        builder = ConfigureArgsBuilder(catalog, catalog)
        params = _configure(
            make_params,
            type=ConfigureKind.GFLAGS,
            properties={"processType": "MASTER"},
            gflags=gflags,
        )
        with pytest.raises(EmptyInputError):
            builder.build(params)

    @pytest.mark.parametrize("process_type", [None, "master", "YQLSERVER"])
    def test_invalid_process_type(self, catalog, make_params, process_type):
        builder = ConfigureArgsBuilder(catalog, catalog)
        properties = {} if process_type is None else {"processType": process_type}
        params = _configure(
            make_params,
            type=ConfigureKind.GFLAGS,
            properties=properties,
            gflags={"v": "1"},
        )
        with pytest.raises(InvalidPropertyError, match="processType"):
            builder.build(params)
