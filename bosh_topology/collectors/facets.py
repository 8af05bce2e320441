"""
Per-deployment facet readers.

Each reader issues exactly one director call for its facet and maps the
returned records into snapshot structures.
"""

import logging
from typing import List

from ..director.models import DiskVitals, ProcessInfo, VMInfo
from ..director.protocols import Deployment
from ..utils.snapshot import (
    CPU,
    Disk,
    Errand,
    Instance,
    Mem,
    MemInt,
    Process,
    Release,
    Stemcell,
    Vitals,
)
from .errors import FacetFetchError

logger = logging.getLogger(__name__)


def errands(deployment: Deployment) -> List[Errand]:
    """
    Read the errands of a deployment.

    Raises:
        FacetFetchError: If the director call fails
    """
    logger.debug(f"Reading Errands for deployment `{deployment.name}`")
    try:
        records = deployment.errands()
    except Exception as e:
        raise FacetFetchError(deployment.name, "Errands", e) from e

    return [Errand(name=record.name) for record in records]


def instances(deployment: Deployment) -> List[Instance]:
    """
    Read the instances of a deployment along with their vitals and processes.

    Instances without a VM are placeholders and are left out.

    Raises:
        FacetFetchError: If the director call fails
    """
    logger.debug(f"Reading Instances for deployment `{deployment.name}`")
    try:
        records = deployment.instance_infos()
    except Exception as e:
        raise FacetFetchError(deployment.name, "Instances", e) from e

    return [_instance(record) for record in records if record.vm_id]


def releases(deployment: Deployment) -> List[Release]:
    """
    Read the releases used by a deployment.

    Raises:
        FacetFetchError: If the director call fails
    """
    logger.debug(f"Reading Releases for deployment `{deployment.name}`")
    try:
        records = deployment.releases()
    except Exception as e:
        raise FacetFetchError(deployment.name, "Releases", e) from e

    return [Release(name=record.name, version=str(record.version)) for record in records]


def stemcells(deployment: Deployment) -> List[Stemcell]:
    """
    Read the stemcells used by a deployment.

    Raises:
        FacetFetchError: If the director call fails
    """
    logger.debug(f"Reading Stemcells for deployment `{deployment.name}`")
    try:
        records = deployment.stemcells()
    except Exception as e:
        raise FacetFetchError(deployment.name, "Stemcells", e) from e

    return [
        Stemcell(name=record.name, version=str(record.version), os_name=record.os_name)
        for record in records
    ]


def _instance(record: VMInfo) -> Instance:
    vitals = record.vitals
    return Instance(
        agent_id=record.agent_id,
        name=record.job_name,
        id=record.id,
        bootstrap=record.bootstrap,
        ips=list(record.ips),
        az=record.az,
        vm_type=record.vm_type,
        resource_pool=record.resource_pool,
        resurrection_paused=record.resurrection_paused,
        healthy=record.is_running(),
        index=str(record.index) if record.index is not None else None,
        processes=[_process(process) for process in record.processes],
        vitals=Vitals(
            cpu=CPU(sys=vitals.cpu.sys, user=vitals.cpu.user, wait=vitals.cpu.wait),
            mem=Mem(kb=vitals.mem.kb, percent=vitals.mem.percent),
            swap=Mem(kb=vitals.swap.kb, percent=vitals.swap.percent),
            uptime=vitals.uptime.secs,
            load=list(vitals.load),
            system_disk=_disk(vitals.system_disk()),
            ephemeral_disk=_disk(vitals.ephemeral_disk()),
            persistent_disk=_disk(vitals.persistent_disk()),
        ),
    )


def _process(record: ProcessInfo) -> Process:
    return Process(
        name=record.name,
        uptime=record.uptime.secs,
        healthy=record.is_running(),
        cpu=CPU(total=record.cpu.total),
        mem=MemInt(kb=record.mem.kb, percent=record.mem.percent),
    )


def _disk(record: DiskVitals) -> Disk:
    return Disk(inode_percent=record.inode_percent, percent=record.percent)
