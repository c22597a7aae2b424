import logging
from datetime import date
from typing import List

from fastapi import FastAPI, Depends, HTTPException, status
from sqlmodel import Session
from sqlalchemy.exc import IntegrityError
from fastapi.middleware.cors import CORSMiddleware

from database import LOG_LEVEL, init_db, get_session
from models import BookingResultFlag, RoomBookingRequest, RoomBookingResult, RoomRead
from processor import RoomBookingRequestProcessor
from store import RoomBookingService, SQLRoomBookingService

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Meeting Room Booking System")


def get_room_booking_service(
    session: Session = Depends(get_session),
) -> RoomBookingService:
    return SQLRoomBookingService(session)


def get_processor(
    service: RoomBookingService = Depends(get_room_booking_service),
) -> RoomBookingRequestProcessor:
    return RoomBookingRequestProcessor(service)


@app.on_event("startup")
def on_startup():
    init_db()


# --- GET /available-rooms ---
@app.get("/available-rooms", response_model=List[RoomRead])
def get_available_rooms(
    target_date: date,
    service: RoomBookingService = Depends(get_room_booking_service),
):
    return service.get_available_rooms(target_date)


# --- POST /room-booking ---
@app.post("/room-booking", response_model=RoomBookingResult)
def book_room(
    booking_request: RoomBookingRequest,
    processor: RoomBookingRequestProcessor = Depends(get_processor),
):
    try:
        result = processor.book_room(booking_request)
    except IntegrityError:
        # Another request took the last free room for this date
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Room already booked for this date.",
        )

    if result.flag == BookingResultFlag.FAILURE:
        logger.info("No rooms available on %s", booking_request.date)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No rooms available for given date",
        )

    return result


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
