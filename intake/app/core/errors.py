"""Errors surfaced by the reservation intake pipeline."""


class IntakeError(Exception):
    """Base class for reservation intake failures."""


class ReservationValidationError(IntakeError):
    """A reservation failed one or more field constraints."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid reservation")


class StorageError(IntakeError):
    """The row store failed to persist a reservation."""
