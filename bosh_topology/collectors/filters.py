"""Selection of the deployments to collect."""

import logging
from typing import List, Optional

from ..director.protocols import Deployment, Director
from .errors import DeploymentsListingError


class DeploymentsFilter:
    """Return every director deployment, or only the configured ones."""

    def __init__(self, filters: Optional[List[str]], director: Director, logger: logging.Logger = None):
        """
        Initialize deployments filter.

        Args:
            filters: Deployment names to collect; empty means all deployments
            director: Director client
            logger: Optional logger instance
        """
        self.filters = list(filters or [])
        self.director = director
        self.logger = (logger or logging.getLogger(__name__)).getChild(self.__class__.__name__)

    def get_deployments(self) -> List[Deployment]:
        """
        List the deployments eligible for this collection cycle.

        Returns:
            List[Deployment]: Deployment handles

        Raises:
            DeploymentsListingError: If the director cannot list or find a deployment
        """
        if not self.filters:
            self.logger.debug("Reading deployments...")
            try:
                return list(self.director.deployments())
            except Exception as e:
                raise DeploymentsListingError(f"Error reading deployments: {e}") from e

        self.logger.debug(f"Filtering deployments by `{', '.join(self.filters)}`...")
        deployments = []
        for name in self.filters:
            try:
                deployments.append(self.director.find_deployment(name))
            except Exception as e:
                raise DeploymentsListingError(f"Error reading deployment `{name}`: {e}") from e

        return deployments
