"""
Domain models for Workflow.

`SomeRecord` is an immutable holder for a single integer. It validates its
input strictly, so only genuine integers are accepted.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictInt


class SomeRecord(BaseModel):
    """
    Immutable value holding one integer, set at construction.

    Accepts the value positionally (``SomeRecord(42)``) or by name
    (``SomeRecord(value=42)``).
    """

    value: StrictInt = Field(..., description="Integer held by the record.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)


__all__ = ["SomeRecord"]
