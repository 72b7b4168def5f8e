"""Data models for the Flickr client."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class ErrorKind(str, Enum):
    """Where a failed request went wrong."""

    REMOTE = "remote"
    TRANSPORT = "transport"
    DECODE = "decode"


class SafeSearch(IntEnum):
    """Content filtering levels accepted by photo listing calls."""

    SAFE = 1
    MODERATE = 2
    RESTRICTED = 3


@dataclass(frozen=True)
class ApiError:
    """Details of a failed API call."""

    kind: ErrorKind
    message: str
    code: int | None = None

    def __str__(self) -> str:
        if self.code is None:
            return f"{self.kind.value} error: {self.message}"
        return f"{self.kind.value} error {self.code}: {self.message}"


@dataclass(frozen=True)
class ApiResult:
    """Result of a single API call."""

    success: bool
    data: dict[str, Any] | None = None
    error: ApiError | None = None

    def __post_init__(self) -> None:
        """Validate api result."""
        if self.success and self.data is None:
            raise ValueError("Successful result must have data")
        if not self.success and self.error is None:
            raise ValueError("Failed result must have an error")

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class PersonInfo:
    """Profile fields fetched together by flickr.people.getInfo."""

    real_name: str | None
    location: str | None
    photos_url: str | None
    profile_url: str | None
