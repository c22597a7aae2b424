import datetime
from enum import Enum
from typing import List, Optional

from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import UniqueConstraint
from pydantic import field_validator


class BookingResultFlag(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class Room(SQLModel, table=True):
    __tablename__ = "rooms"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str

    bookings: List["RoomBooking"] = Relationship(back_populates="room")


class RoomBookingBase(SQLModel):
    full_name: str
    email: str
    date: datetime.date


class RoomBooking(RoomBookingBase, table=True):
    __tablename__ = "room_bookings"
    __table_args__ = (
        # One booking per room per day, enforced by the database
        UniqueConstraint("room_id", "date", name="unique_room_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    room_id: int = Field(foreign_key="rooms.id", index=True)

    room: Optional[Room] = Relationship(back_populates="bookings")


# Validated at the HTTP boundary; bookings and results copy its values unchecked
class RoomBookingRequest(RoomBookingBase):
    full_name: str = Field(min_length=1, max_length=80)
    email: str = Field(min_length=3, max_length=80)

    @field_validator("email")
    @classmethod
    def email_has_at_sign(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value


class RoomBookingResult(RoomBookingBase):
    flag: BookingResultFlag
    room_booking_id: Optional[int] = None


class RoomRead(SQLModel):
    id: int
    name: str
