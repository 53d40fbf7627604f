from pydantic import BaseModel, Field


class ReservationIn(BaseModel):
    # Field rules live in the reservation service; only shapes are checked here.
    date: str = Field(examples=["2017/06/10"])
    time: str = Field(examples=["06:02 AM"])
    party: int
    name: str
    email: str
    message: str | None = None
    phone: str | None = None


class ReservationOut(BaseModel):
    id: int


class ValidationErrorOut(BaseModel):
    detail: list[str]
