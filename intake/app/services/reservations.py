from datetime import timezone

from intake.app.core.errors import ReservationValidationError
from intake.app.core.logging import get_logger
from intake.app.db.store import ReservationStore
from intake.app.services.records import CanonicalReservation, RawReservation
from intake.app.services.validation import check_canonical, check_raw, parse_date_time


logger = get_logger(__name__)

INSERT_RESERVATION = """
    INSERT INTO reservation (datetime, party, name, email, message, phone)
    VALUES (:datetime, :party, :name, :email, :message, :phone)
    RETURNING id
"""


def combine_to_utc(date: str, time: str) -> str:
    """Combine ``YYYY/MM/DD`` and ``hh:mm AM`` into ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    try:
        moment = parse_date_time(date, time)
    except ValueError as exc:
        raise ReservationValidationError(
            [f"date/time: cannot combine {date!r} and {time!r} into a timestamp"]
        ) from exc

    moment = moment.replace(tzinfo=timezone.utc)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def _rejected(exc: ReservationValidationError) -> None:
    logger.warning("Reservation rejected", extra={"extra_fields": {"errors": exc.errors}})


class ReservationService:
    """Turn raw reservation requests into persisted rows."""

    def __init__(self, store: ReservationStore):
        self.store = store

    def transform(self, raw: RawReservation) -> CanonicalReservation:
        return CanonicalReservation(
            datetime=combine_to_utc(raw.date, raw.time),
            party=raw.party,
            name=raw.name,
            email=raw.email,
            message=raw.message,
            phone=raw.phone,
        )

    async def validate(
        self, record: CanonicalReservation | RawReservation
    ) -> CanonicalReservation | RawReservation:
        """Return ``record`` unchanged or raise ReservationValidationError.

        Canonical records are checked as they will be stored. Raw records get
        the same contact rules, and their ``date``/``time`` must combine into
        a timestamp.
        """
        if isinstance(record, CanonicalReservation):
            check = check_canonical
        elif isinstance(record, RawReservation):
            check = check_raw
        else:
            raise ReservationValidationError(
                [f"expected a reservation record, got {type(record).__name__}"]
            )

        try:
            check(record.as_dict())
        except ReservationValidationError as exc:
            _rejected(exc)
            raise

        logger.debug(
            "Reservation passed validation",
            extra={"extra_fields": {"shape": type(record).__name__, "party": record.party}},
        )
        return record

    async def save(self, record: CanonicalReservation) -> int:
        """Insert ``record`` as one row and return the store-assigned id."""
        result = await self.store.execute(INSERT_RESERVATION, record.as_dict())
        logger.info(
            "Created reservation",
            extra={"extra_fields": {"reservation_id": result.inserted_id, "datetime": record.datetime}},
        )
        return result.inserted_id

    async def create(self, raw: RawReservation) -> int:
        try:
            canonical = self.transform(raw)
        except ReservationValidationError as exc:
            _rejected(exc)
            raise

        logger.debug(
            "Transformed reservation",
            extra={"extra_fields": {"datetime": canonical.datetime, "party": canonical.party}},
        )

        validated = await self.validate(canonical)
        return await self.save(validated)
