"""Shared pytest configuration and fixtures."""

import pytest

from bosh_topology.director.models import (
    ErrandRecord,
    ReleaseRecord,
    StemcellRecord,
    VMInfo,
)
from bosh_topology.utils.logger import setup_logger


class FakeDeployment:
    """
    Deployment handle returning canned records.

    Args:
        name: Deployment name
        fail: Mapping of facet method name to the exception it raises
        block: Optional threading.Event every director call waits on
    """

    def __init__(self, name, errands=None, instances=None, releases=None, stemcells=None,
                 fail=None, block=None):
        self._name = name
        self._records = {
            "errands": errands or [],
            "instance_infos": instances or [],
            "releases": releases or [],
            "stemcells": stemcells or [],
        }
        self.fail = fail or {}
        self.block = block
        self.calls = []

    @property
    def name(self):
        return self._name

    def _call(self, facet):
        self.calls.append(facet)
        if self.block is not None:
            self.block.wait(timeout=10)
        if facet in self.fail:
            raise self.fail[facet]
        return list(self._records[facet])

    def errands(self):
        return self._call("errands")

    def instance_infos(self):
        return self._call("instance_infos")

    def releases(self):
        return self._call("releases")

    def stemcells(self):
        return self._call("stemcells")


def make_vm_info(**overrides) -> VMInfo:
    """Build a running instance record using director JSON keys."""
    payload = {
        "agent_id": "agent-1",
        "job_name": "router",
        "id": "instance-1",
        "index": 0,
        "job_state": "running",
        "bootstrap": True,
        "ips": ["10.0.0.10"],
        "az": "z1",
        "vm_cid": "vm-1",
        "vm_type": "small",
        "resource_pool": "",
        "resurrection_paused": False,
        "vitals": {
            "cpu": {"sys": "1.5", "user": "2.5", "wait": "0.5"},
            "mem": {"kb": "2048", "percent": "20"},
            "swap": {"kb": "512", "percent": "5"},
            "uptime": {"secs": 3600},
            "load": ["0.1", "0.2", "0.3"],
            "disk": {
                "system": {"inode_percent": "10", "percent": "30"},
                "ephemeral": {"inode_percent": "2", "percent": "4"},
                "persistent": {"inode_percent": "6", "percent": "8"},
            },
        },
        "processes": [
            {
                "name": "gorouter",
                "state": "running",
                "uptime": {"secs": 3500},
                "cpu": {"total": 1.25},
                "mem": {"kb": 1024, "percent": 1.5},
            }
        ],
    }
    payload.update(overrides)
    return VMInfo.model_validate(payload)


def make_deployment(name, **kwargs) -> FakeDeployment:
    """Build a deployment with one record of every facet unless overridden."""
    kwargs.setdefault("errands", [ErrandRecord(name="smoke-tests")])
    kwargs.setdefault("instances", [make_vm_info()])
    kwargs.setdefault("releases", [ReleaseRecord(name="routing", version="0.180.0")])
    kwargs.setdefault(
        "stemcells",
        [StemcellRecord(name="bosh-stemcell", version="3468.21", operating_system="ubuntu-xenial")]
    )
    return FakeDeployment(name, **kwargs)


@pytest.fixture
def logger():
    """Create logger for tests."""
    return setup_logger("test", level="DEBUG")


@pytest.fixture
def vm_info_factory():
    """Factory for instance records."""
    return make_vm_info


@pytest.fixture
def deployment_factory():
    """Factory for fake deployment handles."""
    return make_deployment
