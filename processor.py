from typing import Optional

from models import BookingResultFlag, RoomBooking, RoomBookingRequest, RoomBookingResult
from store import RoomBookingService


class MissingArgumentError(ValueError):
    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"Value cannot be null. (Parameter '{param_name}')")


class RoomBookingRequestProcessor:
    """Books the first free room for the requested date."""

    def __init__(self, room_booking_service: RoomBookingService):
        self.room_booking_service = room_booking_service

    def book_room(self, booking_request: Optional[RoomBookingRequest]) -> RoomBookingResult:
        if booking_request is None:
            raise MissingArgumentError("bookingRequest")

        available_rooms = self.room_booking_service.get_available_rooms(booking_request.date)

        if not available_rooms:
            return self._create_result(booking_request, BookingResultFlag.FAILURE)

        room = available_rooms[0]
        room_booking = RoomBooking(
            full_name=booking_request.full_name,
            email=booking_request.email,
            date=booking_request.date,
            room_id=room.id,
        )
        self.room_booking_service.save(room_booking)

        # save() assigns the id
        return self._create_result(
            booking_request, BookingResultFlag.SUCCESS, room_booking.id
        )

    @staticmethod
    def _create_result(
        booking_request: RoomBookingRequest,
        flag: BookingResultFlag,
        room_booking_id: Optional[int] = None,
    ) -> RoomBookingResult:
        return RoomBookingResult(
            full_name=booking_request.full_name,
            email=booking_request.email,
            date=booking_request.date,
            flag=flag,
            room_booking_id=room_booking_id,
        )
