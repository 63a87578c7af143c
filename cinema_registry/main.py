# cinema_registry/main.py
from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request

from .config import Settings, settings as default_settings
from .logging_config import get_logger, setup_logging
from .registry import CinemaRegistry
from .schemas import (
    # Catalog
    MovieCreate, Movie, TheaterCreate, Theater, ScreenCreate, Screen,
    ShowCreate, Show,
    # Bookings
    BookingRequest, Booking, SeatMap,
)
from .seed import seed_demo
from . import crud

logger = get_logger(__name__)

router = APIRouter()


def get_registry(request: Request) -> CinemaRegistry:
    return request.app.state.registry

# =========================
#         ADMIN
# =========================

@router.post("/admin/movies", response_model=Movie, status_code=201, tags=["Admin"])
def create_movie(movie: MovieCreate, registry: CinemaRegistry = Depends(get_registry)):
    return crud.create_movie(registry, movie)

@router.get("/admin/movies", response_model=List[Movie], tags=["Admin"])
def list_movies_admin(registry: CinemaRegistry = Depends(get_registry)):
    return registry.store.list_movies()

@router.delete("/admin/movies/{movie_id}", tags=["Admin"])
def delete_movie_admin(movie_id: str, registry: CinemaRegistry = Depends(get_registry)):
    crud.delete_movie(registry, movie_id)
    return {"message": "Movie deleted"}

@router.post("/admin/theaters", response_model=Theater, status_code=201, tags=["Admin"])
def create_theater(theater: TheaterCreate, registry: CinemaRegistry = Depends(get_registry)):
    return crud.create_theater(registry, theater)

@router.get("/admin/theaters", response_model=List[Theater], tags=["Admin"])
def list_theaters_admin(registry: CinemaRegistry = Depends(get_registry)):
    return registry.store.list_theaters()

@router.post("/admin/theaters/{theater_id}/screens", response_model=Screen, status_code=201, tags=["Admin"])
def create_screen(theater_id: str, data: ScreenCreate, registry: CinemaRegistry = Depends(get_registry)):
    return crud.create_screen(registry, theater_id, data)

@router.post("/admin/shows", response_model=Show, status_code=201, tags=["Admin"])
def create_show(data: ShowCreate, registry: CinemaRegistry = Depends(get_registry)):
    return crud.create_show(registry, data)

@router.delete("/admin/shows/{show_id}", tags=["Admin"])
def delete_show_admin(show_id: str, registry: CinemaRegistry = Depends(get_registry)):
    crud.delete_show(registry, show_id)
    return {"message": "Show deleted"}


# =========================
#          USER
# =========================

@router.get("/movies", response_model=List[Movie], tags=["User"])
def search_movies(q: str = "", registry: CinemaRegistry = Depends(get_registry)):
    return registry.search_movies(q)

@router.get("/showtimes", response_model=List[Show], tags=["User"])
def list_showtimes(title: str = "", registry: CinemaRegistry = Depends(get_registry)):
    return registry.list_showtimes(title)

@router.get("/shows/{show_id}/seats", response_model=List[str], tags=["User"])
def available_seats(show_id: str, registry: CinemaRegistry = Depends(get_registry)):
    return registry.available_seats(show_id)

# Geometry + booked seats for drawing a seat map
@router.get("/shows/{show_id}/seat-map", response_model=SeatMap, tags=["User"])
def seat_map(show_id: str, registry: CinemaRegistry = Depends(get_registry)):
    return crud.get_seat_map(registry, show_id)


# =========================
#        BOOKINGS
# =========================

@router.post("/bookings", response_model=Booking, status_code=201, tags=["Bookings"])
def book_seats(req: BookingRequest, registry: CinemaRegistry = Depends(get_registry)):
    return crud.book_seats(registry, req)

@router.get("/bookings/{booking_id}", response_model=Booking, tags=["Bookings"])
def get_booking(booking_id: str, registry: CinemaRegistry = Depends(get_registry)):
    return crud.get_booking(registry, booking_id)

@router.get("/users/{user_name}/bookings", response_model=List[Booking], tags=["Bookings"])
def list_bookings(user_name: str, registry: CinemaRegistry = Depends(get_registry)):
    return crud.list_user_bookings(registry, user_name)

@router.delete("/bookings/{booking_id}", tags=["Bookings"])
def cancel_booking(booking_id: str, registry: CinemaRegistry = Depends(get_registry)):
    booking = crud.cancel_booking(registry, booking_id)
    return {"message": "Booking cancelled", "freed_seats": list(booking.seat_ids)}


def create_app(settings: Settings | None = None, registry: CinemaRegistry | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    if registry is None:
        registry = CinemaRegistry(settings)
        if settings.SEED_DEMO_DATA:
            seed_demo(registry)
            logger.info("Seeded demo catalog")

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "In-memory movie, showtime and seat booking registry. "
            "Seat bookings are all-or-nothing and serialized per show."
        ),
        version=settings.APP_VERSION,
    )
    app.state.registry = registry
    app.include_router(router)
    return app


app = create_app()
