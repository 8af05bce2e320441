"""Deployment topology snapshot data structures."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Errand:
    """Errand declared by a deployment."""

    name: str


@dataclass
class Release:
    """Release used by a deployment."""

    name: str
    version: str


@dataclass
class Stemcell:
    """Stemcell used by a deployment."""

    name: str
    version: str
    os_name: str


@dataclass
class CPU:
    """CPU usage percentages.

    Instances report sys/user/wait, processes report total only.
    """

    sys: float = 0.0
    user: float = 0.0
    wait: float = 0.0
    total: float = 0.0


@dataclass
class Mem:
    """Memory (or swap) usage."""

    kb: float = 0.0
    percent: float = 0.0


@dataclass
class MemInt:
    """Process memory usage, kilobytes as an integer."""

    kb: int = 0
    percent: float = 0.0


@dataclass
class Disk:
    """Disk usage percentages."""

    inode_percent: float = 0.0
    percent: float = 0.0


@dataclass
class Vitals:
    """Point-in-time resource utilization of an instance."""

    cpu: CPU = field(default_factory=CPU)
    mem: Mem = field(default_factory=Mem)
    swap: Mem = field(default_factory=Mem)
    uptime: Optional[int] = None  # Seconds
    load: List[float] = field(default_factory=list)  # 1, 5 and 15 minute averages
    system_disk: Disk = field(default_factory=Disk)
    ephemeral_disk: Disk = field(default_factory=Disk)
    persistent_disk: Disk = field(default_factory=Disk)


@dataclass
class Process:
    """Monitored process running on an instance."""

    name: str
    uptime: Optional[int] = None  # Seconds
    healthy: bool = False
    cpu: CPU = field(default_factory=CPU)
    mem: MemInt = field(default_factory=MemInt)


@dataclass
class Instance:
    """Instance of a deployment job with a VM assigned."""

    agent_id: str
    name: str  # Job name
    id: str
    bootstrap: bool = False
    ips: List[str] = field(default_factory=list)
    az: str = ""
    vm_type: str = ""
    resource_pool: str = ""
    resurrection_paused: bool = False
    healthy: bool = False
    index: Optional[str] = None  # Absent when the director reports none
    processes: List[Process] = field(default_factory=list)
    vitals: Vitals = field(default_factory=Vitals)


@dataclass
class DeploymentInfo:
    """Snapshot of a single deployment and all of its facets."""

    name: str
    errands: List[Errand] = field(default_factory=list)
    instances: List[Instance] = field(default_factory=list)
    releases: List[Release] = field(default_factory=list)
    stemcells: List[Stemcell] = field(default_factory=list)
