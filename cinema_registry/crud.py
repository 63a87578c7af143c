from typing import List

from fastapi import HTTPException

from .registry import CinemaRegistry
from .results import Failure, FailureReason, Ok
from .schemas import (
    Booking, BookingRequest, Movie, MovieCreate, Screen, ScreenCreate,
    SeatMap, Show, ShowCreate, Theater, TheaterCreate,
)

STATUS_BY_REASON = {
    FailureReason.invalid_input: 400,
    FailureReason.not_found: 404,
    FailureReason.seat_unavailable: 409,
}


def _http_error(failure: Failure) -> HTTPException:
    detail = failure.detail or failure.reason.value
    if failure.reason is FailureReason.seat_unavailable:
        detail = f"Seat(s) already booked or invalid: {failure.detail}"
    return HTTPException(STATUS_BY_REASON[failure.reason], detail)


# =========================
#        CATALOG
# =========================
def create_movie(registry: CinemaRegistry, data: MovieCreate) -> Movie:
    store = registry.store
    return store.save_movie(Movie(id=store.new_id(), **data.model_dump()))

def delete_movie(registry: CinemaRegistry, movie_id: str) -> None:
    """Delete a movie and cascade to its shows and their bookings."""
    if not registry.delete_movie(movie_id):
        raise HTTPException(404, "Movie not found")

def create_theater(registry: CinemaRegistry, data: TheaterCreate) -> Theater:
    store = registry.store
    return store.save_theater(Theater(id=store.new_id(), **data.model_dump()))

def create_screen(registry: CinemaRegistry, theater_id: str, data: ScreenCreate) -> Screen:
    store = registry.store
    if not store.get_theater(theater_id):
        raise HTTPException(404, "Theater not found")
    cfg = registry.settings
    return store.save_screen(Screen(
        id=store.new_id(),
        theater_id=theater_id,
        rows=data.rows or cfg.DEFAULT_ROWS,
        seats_per_row=data.seats_per_row or cfg.DEFAULT_SEATS_PER_ROW,
    ))

def create_show(registry: CinemaRegistry, data: ShowCreate) -> Show:
    store = registry.store
    if not store.get_movie(data.movie_id):
        raise HTTPException(404, "Movie not found")
    if not store.get_screen(data.screen_id):
        raise HTTPException(404, "Screen not found")
    show = store.save_show(Show(id=store.new_id(), **data.model_dump()))
    return registry.engine.copy_show(show)

def delete_show(registry: CinemaRegistry, show_id: str) -> None:
    """Delete a show together with its bookings."""
    if not registry.delete_show(show_id):
        raise HTTPException(404, "Show not found")


# =========================
#        BOOKINGS
# =========================
def get_seat_map(registry: CinemaRegistry, show_id: str) -> SeatMap:
    match registry.seat_status(show_id):
        case Ok(value=seat_map):
            return seat_map
        case Failure() as failure:
            raise _http_error(failure)

def book_seats(registry: CinemaRegistry, req: BookingRequest) -> Booking:
    match registry.book_seats(req.show_id, req.seats, req.user_name):
        case Ok(value=booking_id):
            return get_booking(registry, booking_id)
        case Failure() as failure:
            raise _http_error(failure)

def cancel_booking(registry: CinemaRegistry, booking_id: str) -> Booking:
    match registry.cancel_booking(booking_id):
        case Ok(value=booking):
            return booking
        case Failure() as failure:
            raise _http_error(failure)

def get_booking(registry: CinemaRegistry, booking_id: str) -> Booking:
    b = registry.get_booking(booking_id)
    if not b:
        raise HTTPException(404, "Booking not found")
    return b

def list_user_bookings(registry: CinemaRegistry, user_name: str) -> List[Booking]:
    return registry.list_bookings(user_name)
