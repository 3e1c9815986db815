"""
Breach Check Result Value Object

Outcome of a k-anonymity range lookup.
"""

from dataclasses import dataclass
from typing import Any

from ..enums import BreachStatus


@dataclass(frozen=True)
class BreachCheckResult:
    """
    Value object for a breach lookup outcome.

    A failed lookup carries an error description and no count; it is never
    reported as NOT_FOUND.
    """

    status: BreachStatus
    count: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Breach count cannot be negative")

        if self.status is BreachStatus.BREACHED and self.count < 1:
            raise ValueError("A breached result needs a positive count")

        if self.status is not BreachStatus.BREACHED and self.count:
            raise ValueError("Only breached results carry a count")

        if self.status is BreachStatus.FAILED and not self.error:
            raise ValueError("A failed result needs an error description")

    @classmethod
    def breached(cls, count: int) -> "BreachCheckResult":
        return cls(status=BreachStatus.BREACHED, count=count)

    @classmethod
    def not_found(cls) -> "BreachCheckResult":
        return cls(status=BreachStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str) -> "BreachCheckResult":
        return cls(status=BreachStatus.FAILED, error=error)

    @property
    def is_breached(self) -> bool:
        return self.status is BreachStatus.BREACHED

    @property
    def is_failed(self) -> bool:
        return self.status is BreachStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "count": self.count, "error": self.error}
