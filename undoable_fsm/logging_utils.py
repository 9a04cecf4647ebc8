"""Logging utilities for undoable_fsm with package filtering and rich output."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.logging import RichHandler

PACKAGE_NAME = "undoable_fsm"


class PackageFilter(logging.Filter):
    """Filter to only allow logs from specified packages."""

    def __init__(self, packages: List[str]) -> None:
        super().__init__()
        self.packages = packages

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log records to only allow specified packages.

        Args:
            record: LogRecord to filter

        Returns:
            True if record should be logged, False otherwise
        """
        return any(record.name.startswith(pkg) for pkg in self.packages)


def setup_logging(verbose: bool = False, packages: Optional[List[str]] = None) -> RichHandler:
    """Configure root logging with a RichHandler.

    Args:
        verbose: Enable debug level logging
        packages: Logger name prefixes to show. Defaults to this package only.

    Returns:
        The installed RichHandler
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(level=log_level, show_path=verbose)
    handler.addFilter(PackageFilter(packages if packages is not None else [PACKAGE_NAME]))
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%H:%M:%S"))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)
    return handler
