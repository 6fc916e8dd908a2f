"""Pydantic schemas."""

from app.schemas.school import (
    School,
    SchoolDraft,
    SchoolList,
)
from app.schemas.state import (
    ControllerState,
    Event,
    reduce,
)

__all__ = [
    # School
    "School",
    "SchoolDraft",
    "SchoolList",
    # State
    "ControllerState",
    "Event",
    "reduce",
]
