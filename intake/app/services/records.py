"""Plain record containers passed through the intake pipeline."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class RawReservation:
    """A reservation request as supplied by a caller."""

    date: str  # YYYY/MM/DD
    time: str  # hh:mm AM|PM
    party: int
    name: str
    email: str
    message: str | None = None
    phone: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawReservation":
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CanonicalReservation:
    """A normalized reservation, ready to be validated and persisted."""

    datetime: str  # ISO-8601 UTC, e.g. 2017-06-10T06:02:00.000Z
    party: int
    name: str
    email: str
    message: str | None = None
    phone: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
