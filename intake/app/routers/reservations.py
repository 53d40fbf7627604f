from fastapi import APIRouter, Depends, HTTPException, status

from intake.app.core.errors import ReservationValidationError, StorageError
from intake.app.db.session import SessionLocal
from intake.app.db.store import SqlReservationStore
from intake.app.routers.schemas import ReservationIn, ReservationOut, ValidationErrorOut
from intake.app.services.records import RawReservation
from intake.app.services.reservations import ReservationService


router = APIRouter()


def get_reservation_service() -> ReservationService:
    """Build a ReservationService backed by the application database."""
    return ReservationService(SqlReservationStore(SessionLocal))


@router.post(
    "/reservations",
    response_model=ReservationOut,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ValidationErrorOut}},
)
async def create_endpoint(
    payload: ReservationIn,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationOut:
    try:
        reservation_id = await service.create(RawReservation.from_mapping(payload.model_dump()))
    except ReservationValidationError as exc:
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors) from exc
    except StorageError as exc:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error") from exc

    return ReservationOut(id=reservation_id)
