"""Command line entry point collecting one deployment topology snapshot."""

import argparse
import asyncio
import dataclasses
import json
import logging
import os
import sys
import time
from typing import List

from .config.loader import ConfigLoader
from .config.models import CollectorSystemConfig
from .collectors.deployments import DeploymentsFetcher
from .collectors.errors import CollectionError
from .collectors.filters import DeploymentsFilter
from .director.static import StaticDirector
from .utils.logger import setup_logger
from .utils.snapshot import DeploymentInfo


class TopologyApp:
    """
    Topology collection application.

    Wires configuration, the director and the deployments fetcher together
    and runs collection cycles.
    """

    def __init__(self, config_path: str = "config/config.yaml", log_level: str = None):
        """
        Initialize topology application.

        Args:
            config_path: Path to configuration file
            log_level: Overrides the configured log level when set

        Raises:
            FileNotFoundError: If the config or inventory file doesn't exist
            pydantic.ValidationError: If the config or inventory is invalid
        """
        self.config_path = config_path
        self.config = self._load_config()
        self.logger = setup_logger(level=log_level or self.config.logging.level)

        self.logger.info(f"Loading director inventory from {self.config.director.inventory_path}")
        director = StaticDirector.from_file(self.config.director.inventory_path)
        deployments_filter = DeploymentsFilter(self.config.filters.deployments, director, self.logger)
        self.fetcher = DeploymentsFetcher(deployments_filter, self.logger)

    def _load_config(self) -> CollectorSystemConfig:
        return ConfigLoader.load_from_file(self.config_path)

    async def run_collection_cycle(self) -> List[DeploymentInfo]:
        """
        Execute one collection cycle.

        Raises:
            CollectionError: If listing or any deployment facet fails
        """
        self.logger.info("Starting collection cycle")
        start_time = time.time()

        deployments = await self.fetcher.deployments()

        duration = time.time() - start_time
        self.logger.info(
            f"Collection cycle complete: {len(deployments)} deployment(s) in {duration:.2f}s"
        )
        return deployments


def render_snapshot(deployments: List[DeploymentInfo]) -> str:
    """Render deployments as JSON, sorted by name for stable output."""
    ordered = sorted(deployments, key=lambda deployment: deployment.name)
    return json.dumps([dataclasses.asdict(deployment) for deployment in ordered], indent=2)


def main(argv: List[str] = None) -> int:
    """
    CLI entry point.

    Returns:
        int: Process exit code
    """
    parser = argparse.ArgumentParser(
        description='Collect a BOSH deployment topology snapshot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Collect every deployment and print the snapshot
  python -m bosh_topology.main

  # Use custom config file with verbose facet logging
  python -m bosh_topology.main --config /path/to/config.yaml --log-level DEBUG
        """
    )

    parser.add_argument(
        '--config',
        default='config/config.yaml',
        help='Path to configuration file (default: config/config.yaml)'
    )

    parser.add_argument(
        '--log-level',
        default=os.getenv('LOG_LEVEL'),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: config value or LOG_LEVEL env var)'
    )

    args = parser.parse_args(argv)

    try:
        app = TopologyApp(config_path=args.config, log_level=args.log_level)
    except Exception as e:
        logging.error(f"Application startup failed: {e}", exc_info=True)
        return 1

    try:
        deployments = asyncio.run(app.run_collection_cycle())
    except CollectionError as e:
        app.logger.error(f"Collection cycle failed: {e}")
        return 1

    print(render_snapshot(deployments))
    return 0


if __name__ == '__main__':
    sys.exit(main())
