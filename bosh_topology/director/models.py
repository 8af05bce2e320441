"""Pydantic models for raw records returned by the BOSH director."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional


def _blank_to_zero(v):
    # The director reports unknown vitals as empty strings or nulls
    if v is None or v == "":
        return 0
    return v


class DirectorRecord(BaseModel):
    """Base for director records, accepting both JSON keys and field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ErrandRecord(DirectorRecord):
    """Errand as listed by the director."""
    name: str


class ReleaseRecord(DirectorRecord):
    """Release referenced by a deployment."""
    name: str
    version: str

    @field_validator('version', mode='before')
    @classmethod
    def stringify_version(cls, v):
        """Accept numeric versions such as 3468.21 from YAML or JSON."""
        return v if isinstance(v, str) else str(v)


class StemcellRecord(DirectorRecord):
    """Stemcell referenced by a deployment."""
    name: str
    version: str
    os_name: str = Field(default="", alias="operating_system")

    @field_validator('version', mode='before')
    @classmethod
    def stringify_version(cls, v):
        """Accept numeric versions such as 3468.21 from YAML or JSON."""
        return v if isinstance(v, str) else str(v)


class Uptime(DirectorRecord):
    secs: Optional[int] = None


class CPUVitals(DirectorRecord):
    sys: float = 0.0
    user: float = 0.0
    wait: float = 0.0

    @field_validator('sys', 'user', 'wait', mode='before')
    @classmethod
    def blank_to_zero(cls, v):
        return _blank_to_zero(v)


class MemVitals(DirectorRecord):
    kb: float = 0.0
    percent: float = 0.0

    @field_validator('kb', 'percent', mode='before')
    @classmethod
    def blank_to_zero(cls, v):
        return _blank_to_zero(v)


class DiskVitals(DirectorRecord):
    inode_percent: float = 0.0
    percent: float = 0.0

    @field_validator('inode_percent', 'percent', mode='before')
    @classmethod
    def blank_to_zero(cls, v):
        return _blank_to_zero(v)


class VMVitals(DirectorRecord):
    """Vitals reported by the agent running on a VM."""

    cpu: CPUVitals = Field(default_factory=CPUVitals)
    mem: MemVitals = Field(default_factory=MemVitals)
    swap: MemVitals = Field(default_factory=MemVitals)
    uptime: Uptime = Field(default_factory=Uptime)
    load: List[float] = Field(default_factory=list)
    disk: Dict[str, DiskVitals] = Field(default_factory=dict)

    @field_validator('load', mode='before')
    @classmethod
    def blank_load(cls, v):
        if v is None:
            return []
        return [_blank_to_zero(item) for item in v]

    def system_disk(self) -> DiskVitals:
        return self.disk.get("system", DiskVitals())

    def ephemeral_disk(self) -> DiskVitals:
        return self.disk.get("ephemeral", DiskVitals())

    def persistent_disk(self) -> DiskVitals:
        return self.disk.get("persistent", DiskVitals())


class ProcessCPU(DirectorRecord):
    total: float = 0.0

    @field_validator('total', mode='before')
    @classmethod
    def blank_to_zero(cls, v):
        return _blank_to_zero(v)


class ProcessMem(DirectorRecord):
    kb: int = 0
    percent: float = 0.0

    @field_validator('kb', 'percent', mode='before')
    @classmethod
    def blank_to_zero(cls, v):
        return _blank_to_zero(v)


class ProcessInfo(DirectorRecord):
    """Monit-supervised process on an instance."""

    name: str
    state: str = ""
    uptime: Uptime = Field(default_factory=Uptime)
    cpu: ProcessCPU = Field(default_factory=ProcessCPU)
    mem: ProcessMem = Field(default_factory=ProcessMem)

    def is_running(self) -> bool:
        return self.state == "running"


class VMInfo(DirectorRecord):
    """
    Instance record from the director's full instance listing.

    Placeholder instances that have no VM created carry an empty ``vm_cid``.
    """

    agent_id: str = ""
    job_name: str = ""
    id: str = ""
    index: Optional[int] = None
    process_state: str = Field(default="", alias="job_state")
    bootstrap: bool = False
    ips: List[str] = Field(default_factory=list)
    az: str = ""
    vm_id: str = Field(default="", alias="vm_cid")
    vm_type: str = ""
    resource_pool: str = ""
    resurrection_paused: bool = False
    vitals: VMVitals = Field(default_factory=VMVitals)
    processes: List[ProcessInfo] = Field(default_factory=list)

    @field_validator(
        'agent_id', 'job_name', 'id', 'process_state', 'az', 'vm_id', 'vm_type', 'resource_pool',
        mode='before'
    )
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator('ips', 'processes', mode='before')
    @classmethod
    def null_to_list(cls, v):
        return [] if v is None else v

    @field_validator('vitals', mode='before')
    @classmethod
    def null_vitals(cls, v):
        return {} if v is None else v

    def is_running(self) -> bool:
        """Running when the job and every one of its processes are running."""
        if self.process_state != "running":
            return False
        return all(process.is_running() for process in self.processes)
