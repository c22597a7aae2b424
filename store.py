import datetime
import logging
from abc import ABC, abstractmethod
from typing import List

from sqlmodel import Session, select

from models import Room, RoomBooking

logger = logging.getLogger(__name__)


class RoomBookingService(ABC):
    """Where rooms and their bookings live."""

    @abstractmethod
    def get_available_rooms(self, date: datetime.date) -> List[Room]:
        """Rooms with no booking on ``date``. Read-only."""
        raise NotImplementedError

    @abstractmethod
    def save(self, room_booking: RoomBooking) -> None:
        """Persist ``room_booking`` and set its ``id``."""
        raise NotImplementedError


class SQLRoomBookingService(RoomBookingService):
    def __init__(self, session: Session):
        self.session = session

    def get_available_rooms(self, date: datetime.date) -> List[Room]:
        statement = (
            select(Room)
            .where(~Room.bookings.any(RoomBooking.date == date))
            .order_by(Room.id)
        )
        return list(self.session.exec(statement).all())

    def save(self, room_booking: RoomBooking) -> None:
        try:
            self.session.add(room_booking)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.warning(
                "Rolled back booking of room %s on %s",
                room_booking.room_id,
                room_booking.date,
            )
            raise
        self.session.refresh(room_booking)
        logger.debug("Saved room booking %s", room_booking.id)
