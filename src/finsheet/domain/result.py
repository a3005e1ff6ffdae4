"""Tagged success/failure results returned by every public entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A computed value."""

    value: T
    ok: ClassVar[bool] = True

    def to_cell(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A human-readable failure message."""

    message: str
    ok: ClassVar[bool] = False

    def to_cell(self) -> Any:
        """Collapse to the message, for hosts that only accept cell values."""
        return self.message


Result = Union[Success[T], Failure]
