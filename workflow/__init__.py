"""
Workflow - immutable record values with a small CLI around them.

The package exposes `SomeRecord`, an immutable holder for a single integer,
together with the configuration, logging and console reporting helpers the
`workflow` command line uses.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from workflow.config import Settings, get_settings
from workflow.domain.models import SomeRecord
from workflow.reporter import print_records
from workflow.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Domain
    "SomeRecord",
    # Configuration
    "Settings",
    "get_settings",
    # Reporting
    "print_records",
    # Logging
    "configure_logging",
    "get_logger",
]
