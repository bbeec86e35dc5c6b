"""Health status codes."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Status:
    """Status of a component. Well-known codes are class constants, any other code is allowed."""

    code: str
    description: str = field(default="", compare=False)

    UP: ClassVar["Status"]
    DOWN: ClassVar["Status"]
    OUT_OF_SERVICE: ClassVar["Status"]
    UNKNOWN: ClassVar["Status"]

    def __post_init__(self) -> None:
        if self.code is None:
            raise ValueError("Code must not be null")
        if self.description is None:
            raise ValueError("Description must not be null")

    def __str__(self) -> str:
        return self.code


Status.UP = Status("UP")
Status.DOWN = Status("DOWN")
Status.OUT_OF_SERVICE = Status("OUT_OF_SERVICE")
Status.UNKNOWN = Status("UNKNOWN")
