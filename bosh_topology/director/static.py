"""In-memory director backed by a YAML inventory file."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from ..config.loader import ConfigLoader
from .models import ErrandRecord, ReleaseRecord, StemcellRecord, VMInfo


class DeploymentNotFoundError(LookupError):
    """Raised when a deployment name is not known to the director."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Deployment `{name}` not found")


class DeploymentInventory(BaseModel):
    """Recorded state of one deployment."""
    name: str
    errands: List[ErrandRecord] = Field(default_factory=list)
    instances: List[VMInfo] = Field(default_factory=list)
    releases: List[ReleaseRecord] = Field(default_factory=list)
    stemcells: List[StemcellRecord] = Field(default_factory=list)


class DirectorInventory(BaseModel):
    """Root of an inventory file."""
    deployments: List[DeploymentInventory] = Field(default_factory=list)


class StaticDeployment:
    """Deployment handle serving records from an inventory entry."""

    def __init__(self, inventory: DeploymentInventory):
        self._inventory = inventory

    @property
    def name(self) -> str:
        return self._inventory.name

    def errands(self) -> List[ErrandRecord]:
        return list(self._inventory.errands)

    def instance_infos(self) -> List[VMInfo]:
        return list(self._inventory.instances)

    def releases(self) -> List[ReleaseRecord]:
        return list(self._inventory.releases)

    def stemcells(self) -> List[StemcellRecord]:
        return list(self._inventory.stemcells)

    def __repr__(self) -> str:
        return f"StaticDeployment(name={self.name!r})"


class StaticDirector:
    """
    Director whose deployments are recorded up front.

    Useful for replaying a captured director state through the collectors
    without network access.
    """

    def __init__(self, inventory: DirectorInventory):
        self._deployments: Dict[str, StaticDeployment] = {
            entry.name: StaticDeployment(entry) for entry in inventory.deployments
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StaticDirector":
        """
        Build a director from already parsed inventory data.

        Raises:
            pydantic.ValidationError: If the inventory is malformed
        """
        return cls(DirectorInventory(**(raw or {})))

    @classmethod
    def from_file(cls, inventory_path: str) -> "StaticDirector":
        """
        Load a director from a YAML inventory file.

        Args:
            inventory_path: Path to YAML inventory

        Returns:
            StaticDirector: Director serving the recorded deployments

        Raises:
            FileNotFoundError: If inventory file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            pydantic.ValidationError: If the inventory is malformed
        """
        return cls.from_dict(ConfigLoader.read_yaml(inventory_path, kind="Inventory"))

    def deployments(self) -> List[StaticDeployment]:
        return list(self._deployments.values())

    def find_deployment(self, name: str) -> StaticDeployment:
        try:
            return self._deployments[name]
        except KeyError:
            raise DeploymentNotFoundError(name) from None
