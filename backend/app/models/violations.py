"""Violation models - constraint findings attached to a generated itinerary."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# JSON-serializable value types for violation details
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class ViolationSeverity(str, Enum):
    """Severity levels for constraint violations."""

    ADVISORY = "advisory"
    BLOCKING = "blocking"


class ViolationKind(str, Enum):
    """Categories of checked constraints."""

    BUDGET = "budget"
    CAPACITY = "capacity"


class Violation(BaseModel):
    """A constraint the itinerary does not satisfy.

    Violations never change the selected hotel or vehicle; they are reported
    next to the result so the caller can decide what to do.
    """

    kind: ViolationKind
    code: str  # Machine-usable short code, e.g., "OVER_BUDGET"
    message: str  # Human-readable description (1-2 sentences)
    severity: ViolationSeverity
    details: dict[str, JsonValue] = Field(default_factory=dict)
