"""Capabilities the collectors require from a BOSH director client."""

from typing import List, Protocol, runtime_checkable

from .models import ErrandRecord, ReleaseRecord, StemcellRecord, VMInfo


@runtime_checkable
class Deployment(Protocol):
    """
    Handle on a single director deployment.

    Every listing method performs one round-trip to the director and may
    raise any exception the underlying client raises.
    """

    @property
    def name(self) -> str:
        ...

    def errands(self) -> List[ErrandRecord]:
        ...

    def instance_infos(self) -> List[VMInfo]:
        ...

    def releases(self) -> List[ReleaseRecord]:
        ...

    def stemcells(self) -> List[StemcellRecord]:
        ...


@runtime_checkable
class Director(Protocol):
    """Director capable of listing and looking up deployments."""

    def deployments(self) -> List[Deployment]:
        ...

    def find_deployment(self, name: str) -> Deployment:
        ...
