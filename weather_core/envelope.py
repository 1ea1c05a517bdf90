"""Uniform success/failure envelope for fetch operations.

Every fetch returns a ResultEnvelope instead of raising across the backend
boundary. Exactly one of data or error is populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """Outcome of a single fetch operation.

    Build instances with ok() or fail(); direct construction is validated
    against the same invariant.

    Attributes:
        success: True when data is present and error is absent.
        data: Payload of a successful operation.
        error: Message of a failed operation.
    """

    success: bool
    data: T | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success:
            if self.data is None or self.error is not None:
                raise ValueError("Successful envelope requires data and no error")
        elif self.error is None or self.data is not None:
            raise ValueError("Failed envelope requires an error and no data")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format.

        Payloads exposing to_dict() are converted as well.
        """
        result: dict[str, Any] = {"success": self.success}
        if self.success:
            to_dict = getattr(self.data, "to_dict", None)
            result["data"] = to_dict() if callable(to_dict) else self.data
        else:
            result["error"] = self.error
        return result


def ok(payload: T) -> ResultEnvelope[T]:
    """Return a success envelope wrapping payload."""
    return ResultEnvelope(success=True, data=payload)


def fail(message: str) -> ResultEnvelope[Any]:
    """Return a failure envelope carrying message."""
    return ResultEnvelope(success=False, error=message)
