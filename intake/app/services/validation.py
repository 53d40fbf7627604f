"""Field rules applied to raw and canonical reservations."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from intake.app.core.errors import ReservationValidationError


# local-part@label.label[.label...]; no whitespace and a single "@".
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+$")

_UTC_INSTANT = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.\d{1,6})?Z$")


def is_valid_email(value: object) -> bool:
    """Return True for a non-empty local part, one ``@`` and a dotted domain.

    The domain must contain at least two non-empty labels separated by dots.
    Whitespace anywhere in the address is rejected.
    """
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def is_utc_instant(value: object) -> bool:
    if not isinstance(value, str):
        return False
    match = _UTC_INSTANT.fullmatch(value)
    if match is None:
        return False
    try:
        datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return False
    return True


def parse_date_time(date: str, time: str) -> datetime:
    """Parse ``YYYY/MM/DD`` and ``hh:mm AM|PM`` into a naive datetime.

    Raises ValueError when the pair does not describe a real minute.
    """
    try:
        return datetime.strptime(f"{date.strip()} {time.strip().upper()}", "%Y/%m/%d %I:%M %p")
    except AttributeError as exc:
        raise ValueError("date and time must be strings") from exc


class ContactRules(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    party: int = Field(ge=1)
    name: str
    email: str
    message: str | None = None
    phone: str | None = None

    @field_validator("name")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("must be a valid email address")
        return value


class CanonicalReservationRules(ContactRules):
    datetime: str

    @field_validator("datetime")
    @classmethod
    def _utc_instant(cls, value: str) -> str:
        if not is_utc_instant(value):
            raise ValueError("must be an ISO-8601 UTC timestamp")
        return value


class RawReservationRules(ContactRules):
    date: str
    time: str

    @field_validator("time")
    @classmethod
    def _combinable(cls, value: str, info: ValidationInfo) -> str:
        date = info.data.get("date")
        if date is None:
            # date already failed its own check
            return value
        try:
            parse_date_time(date, value)
        except ValueError as exc:
            raise ValueError(f"cannot combine {date!r} and {value!r} into a timestamp") from exc
        return value


def _check(rules: type[BaseModel], data: dict) -> None:
    try:
        rules.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        raise ReservationValidationError(errors) from exc


def check_canonical(data: dict) -> None:
    """Raise ReservationValidationError listing every violated rule."""
    _check(CanonicalReservationRules, data)


def check_raw(data: dict) -> None:
    """Same as check_canonical, but ``date``/``time`` must combine into a timestamp."""
    _check(RawReservationRules, data)
