"""
Domain package for Workflow.

Exports the core value types. Keep this package focused on data definitions
and validation concerns.
"""

from workflow.domain.models import SomeRecord

__all__ = [
    "SomeRecord",
]
