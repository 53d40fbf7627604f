from contextlib import asynccontextmanager

from fastapi import FastAPI

from intake.app.core.config import settings
from intake.app.db.session import close_db, init_db
import intake.app.routers.health as health
import intake.app.routers.reservations as reservations


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    try:
        yield
    finally:
        await close_db()


app = FastAPI(
    title="Reservation Intake API",
    lifespan=lifespan,
)

app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(reservations.router, prefix=settings.API_PREFIX)
