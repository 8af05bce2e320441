"""Tests for director record models."""

import pytest
from pydantic import ValidationError

from bosh_topology.director.models import (
    DiskVitals,
    ProcessInfo,
    ReleaseRecord,
    StemcellRecord,
    VMInfo,
)


class TestVMInfo:
    def test_parses_director_keys(self):
        record = VMInfo.model_validate({
            "agent_id": "agent-1",
            "job_name": "router",
            "id": "abc",
            "index": 2,
            "job_state": "running",
            "vm_cid": "vm-1",
        })

        assert record.vm_id == "vm-1"
        assert record.process_state == "running"
        assert record.index == 2

    def test_defaults_for_placeholder(self):
        record = VMInfo.model_validate({"job_name": "router", "id": "abc"})

        assert record.vm_id == ""
        assert record.index is None
        assert record.ips == []
        assert record.processes == []
        assert record.vitals.uptime.secs is None

    def test_nulls_become_empty(self):
        record = VMInfo.model_validate({
            "az": None,
            "vm_cid": None,
            "ips": None,
            "processes": None,
            "vitals": None,
        })

        assert record.az == ""
        assert record.vm_id == ""
        assert record.ips == []
        assert record.processes == []
        assert record.vitals.load == []

    def test_string_vitals_are_coerced(self):
        record = VMInfo.model_validate({
            "vitals": {
                "cpu": {"sys": "1.5", "user": "", "wait": None},
                "mem": {"kb": "1024", "percent": "10"},
                "load": ["0.5", "", "1"],
            }
        })

        assert record.vitals.cpu.sys == 1.5
        assert record.vitals.cpu.user == 0
        assert record.vitals.cpu.wait == 0
        assert record.vitals.mem.kb == 1024
        assert record.vitals.load == [0.5, 0, 1]

    def test_invalid_vitals_rejected(self):
        with pytest.raises(ValidationError):
            VMInfo.model_validate({"vitals": {"cpu": {"sys": "lots"}}})

    def test_disk_lookup(self):
        record = VMInfo.model_validate({
            "vitals": {"disk": {"persistent": {"inode_percent": "1", "percent": "2"}}}
        })

        assert record.vitals.persistent_disk() == DiskVitals(inode_percent=1, percent=2)
        assert record.vitals.system_disk() == DiskVitals()
        assert record.vitals.ephemeral_disk() == DiskVitals()

    def test_running_requires_all_processes_running(self):
        running = {"name": "a", "state": "running"}
        failing = {"name": "b", "state": "failing"}

        assert VMInfo.model_validate({"job_state": "running", "processes": [running]}).is_running()
        assert not VMInfo.model_validate(
            {"job_state": "running", "processes": [running, failing]}
        ).is_running()
        assert not VMInfo.model_validate({"job_state": "stopped"}).is_running()
        assert VMInfo.model_validate({"job_state": "running"}).is_running()


def test_process_running():
    assert ProcessInfo(name="a", state="running").is_running()
    assert not ProcessInfo(name="a", state="unknown").is_running()


def test_numeric_versions_are_stringified():
    assert ReleaseRecord(name="cf", version=280).version == "280"
    assert StemcellRecord.model_validate(
        {"name": "s", "version": 3468.21, "operating_system": "ubuntu-xenial"}
    ).version == "3468.21"


def test_stemcell_os_name_alias():
    record = StemcellRecord.model_validate(
        {"name": "s", "version": "1", "operating_system": "ubuntu-jammy"}
    )

    assert record.os_name == "ubuntu-jammy"
