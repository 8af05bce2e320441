"""Concurrent collection of deployment topology snapshots."""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..director.protocols import Deployment
from ..utils.snapshot import DeploymentInfo
from . import facets
from .filters import DeploymentsFilter


class ErrorSlot:
    """Single-slot error holder; the first error offered wins."""

    def __init__(self):
        self._lock = threading.Lock()
        self._error: Optional[BaseException] = None

    def offer(self, error: BaseException) -> bool:
        """
        Store the error unless one is already held.

        Returns:
            bool: True if this error was stored
        """
        with self._lock:
            if self._error is not None:
                return False
            self._error = error
            return True

    @property
    def error(self) -> Optional[BaseException]:
        with self._lock:
            return self._error


def fetch_deployment_info(deployment: Deployment) -> DeploymentInfo:
    """
    Read all facets of a deployment, in order, stopping at the first failure.

    Raises:
        FacetFetchError: If any facet cannot be read
    """
    deployment_info = DeploymentInfo(name=deployment.name)
    deployment_info.errands = facets.errands(deployment)
    deployment_info.instances = facets.instances(deployment)
    deployment_info.releases = facets.releases(deployment)
    deployment_info.stemcells = facets.stemcells(deployment)
    return deployment_info


def _discard_outcome(future: asyncio.Future) -> None:
    # Mark the exception as retrieved for tasks still running when collection stops
    if not future.cancelled():
        future.exception()


class DeploymentsCollector:
    """
    Collects snapshots of many deployments in parallel.

    Every deployment gets its own worker thread, so a slow director call only
    delays its own deployment. Collection stops as soon as one deployment
    fails; deployments still being read are left to finish in the background
    and their snapshots are discarded.
    """

    def __init__(self, logger: logging.Logger = None):
        """
        Initialize deployments collector.

        Args:
            logger: Optional logger instance
        """
        self.logger = (logger or logging.getLogger(__name__)).getChild(self.__class__.__name__)

    async def collect(self, deployments: Iterable[Deployment]) -> List[DeploymentInfo]:
        """
        Collect a snapshot of every deployment.

        Args:
            deployments: Deployment handles to collect

        Returns:
            List[DeploymentInfo]: One snapshot per deployment, in no particular order

        Raises:
            CollectionError: The first error reported by any deployment
        """
        deployments = list(deployments)
        if not deployments:
            self.logger.debug("No deployments to collect")
            return []

        self.logger.info(f"Collecting {len(deployments)} deployment(s)")

        error_slot = ErrorSlot()
        loop = asyncio.get_running_loop()
        executor = ThreadPoolExecutor(
            max_workers=len(deployments),
            thread_name_prefix="deployment-collector"
        )
        try:
            tasks = [
                loop.run_in_executor(executor, self._collect_deployment, deployment, error_slot)
                for deployment in deployments
            ]
            for task in tasks:
                task.add_done_callback(_discard_outcome)

            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # In-flight director calls cannot be aborted; let their threads drain
            executor.shutdown(wait=False)

        # Checked after waiting so that a failure always beats completion
        error = error_slot.error
        if error is not None:
            raise error

        deployments_info = [task.result() for task in tasks]
        self.logger.info(f"Collected {len(deployments_info)} deployment(s)")
        return deployments_info

    def _collect_deployment(self, deployment: Deployment, error_slot: ErrorSlot) -> DeploymentInfo:
        """Worker thread body for one deployment."""
        try:
            return fetch_deployment_info(deployment)
        except Exception as e:
            if error_slot.offer(e):
                self.logger.debug(f"Stopping collection: {e}")
            raise


class DeploymentsFetcher:
    """Lists the filtered deployments and collects their snapshots."""

    def __init__(self, deployments_filter: DeploymentsFilter, logger: logging.Logger = None):
        """
        Initialize deployments fetcher.

        Args:
            deployments_filter: Source of the deployments to collect
            logger: Optional logger instance
        """
        self.deployments_filter = deployments_filter
        self.collector = DeploymentsCollector(logger)

    async def deployments(self) -> List[DeploymentInfo]:
        """
        Collect snapshots of all deployments selected by the filter.

        Raises:
            DeploymentsListingError: If deployments cannot be listed (nothing is collected)
            FacetFetchError: If any deployment facet cannot be read
        """
        # Run blocking director listing in thread pool
        loop = asyncio.get_running_loop()
        deployments = await loop.run_in_executor(None, self.deployments_filter.get_deployments)
        return await self.collector.collect(deployments)


def collect_deployments(
    deployments: Iterable[Deployment],
    logger: logging.Logger = None
) -> List[DeploymentInfo]:
    """Blocking entry point running one collection cycle in a fresh event loop."""
    return asyncio.run(DeploymentsCollector(logger).collect(deployments))
