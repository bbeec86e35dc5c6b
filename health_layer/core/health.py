"""Health check types."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union

from health_layer.core.errors import InvalidStatusError
from health_layer.core.status import Status

logger = logging.getLogger(__name__)

StatusLike = Union[Status, str]
DetailsLike = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]

ERROR_DETAIL = "error"

_UNSET: Any = object()


def _to_status(value: Optional[StatusLike]) -> Status:
    if value is None:
        raise InvalidStatusError()
    if isinstance(value, Status):
        return value
    return Status(value)


def _describe_exception(error: BaseException) -> str:
    error_type = type(error)
    name = f"{error_type.__module__}.{error_type.__qualname__}"
    return f"{name}: {error}"


@dataclass(frozen=True)
class Health:
    """
    Immutable outcome of a health check.

    Instances are normally produced by a HealthBuilder, obtained from one of
    the factories (up, down, out_of_service, unknown, from_status) or by
    constructing Health.Builder directly.

    Equality compares status and details; detail order only matters for
    iteration and display.
    """

    status: Status
    details: Mapping[str, Any] = field(default_factory=dict)

    Builder: ClassVar[type["HealthBuilder"]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _to_status(self.status))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def __hash__(self) -> int:
        # Detail values may be unhashable, keys are enough to stay consistent with __eq__
        return hash((self.status, frozenset(self.details)))

    def __str__(self) -> str:
        return f"{self.status} {dict(self.details)}"

    @classmethod
    def from_status(cls, status: StatusLike) -> "HealthBuilder":
        """Builder preset with the given Status or status code."""
        return HealthBuilder().status(status)

    @classmethod
    def up(cls) -> "HealthBuilder":
        return HealthBuilder().up()

    @classmethod
    def down(cls, error: Optional[BaseException] = None) -> "HealthBuilder":
        """Builder preset to DOWN, recording ``error`` as a detail when given."""
        builder = HealthBuilder().down()
        if error is not None:
            builder.with_exception(error)
        return builder

    @classmethod
    def out_of_service(cls) -> "HealthBuilder":
        return HealthBuilder().out_of_service()

    @classmethod
    def unknown(cls) -> "HealthBuilder":
        return HealthBuilder().unknown()


class HealthBuilder:
    """
    Mutable accumulator for a Health.

    A builder created without arguments starts as UNKNOWN. build() may be
    called any number of times; each call snapshots the state at that point.
    """

    def __init__(
        self,
        status: Optional[StatusLike] = _UNSET,
        details: Optional[DetailsLike] = None,
    ) -> None:
        self._status = Status.UNKNOWN if status is _UNSET else _to_status(status)
        self._details: dict[str, Any] = {}
        if details is not None:
            self.with_details(details)

    def status(self, status: StatusLike) -> "HealthBuilder":
        """
        Set the status.

        Args:
            status: A Status or a status code

        Raises:
            InvalidStatusError: If status is None
        """
        self._status = _to_status(status)
        return self

    def up(self) -> "HealthBuilder":
        return self.status(Status.UP)

    def down(self) -> "HealthBuilder":
        return self.status(Status.DOWN)

    def out_of_service(self) -> "HealthBuilder":
        return self.status(Status.OUT_OF_SERVICE)

    def unknown(self) -> "HealthBuilder":
        return self.status(Status.UNKNOWN)

    def with_detail(self, key: str, value: Any) -> "HealthBuilder":
        """Add a detail. An existing key keeps its position and takes the new value."""
        if key is None:
            raise ValueError("Key must not be null")
        if value is None:
            raise ValueError("Value must not be null")
        self._details[key] = value
        return self

    def with_details(self, details: DetailsLike) -> "HealthBuilder":
        """
        Add several details in their iteration order.

        Args:
            details: A mapping, or an iterable of (key, value) pairs which may
                repeat a key. The last value applied for a key wins.

        Raises:
            ValueError: If details is None or contains a None key or value
        """
        if details is None:
            raise ValueError("Details must not be null")
        items = details.items() if isinstance(details, Mapping) else details
        for key, value in items:
            self.with_detail(key, value)
        return self

    def with_exception(self, error: BaseException) -> "HealthBuilder":
        """Record ``error`` under the "error" detail."""
        if error is None:
            raise ValueError("Exception must not be null")
        description = _describe_exception(error)
        logger.debug("Recording health error detail: %s", description)
        return self.with_detail(ERROR_DETAIL, description)

    def build(self) -> Health:
        return Health(status=self._status, details=dict(self._details))


Health.Builder = HealthBuilder
