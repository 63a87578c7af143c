from typing import Iterable, List

from .booking import BookingEngine
from .config import Settings, settings as default_settings
from .ledger import BookingLedger
from .results import Result
from .schemas import Booking, Movie, SeatMap, Show
from .storage import CatalogStore


class CinemaRegistry:
    """Catalog, ledger and booking engine wired together once at startup."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.store = CatalogStore()
        self.ledger = BookingLedger(prefix=self.settings.BOOKING_ID_PREFIX,
                                    width=self.settings.BOOKING_ID_WIDTH)
        self.engine = BookingEngine(self.store, self.ledger,
                                    default_user=self.settings.DEFAULT_USER_NAME)

    # ---------- catalog ----------
    def search_movies(self, query: str | None = "") -> List[Movie]:
        return self.store.search_movies(query)

    def list_showtimes(self, movie_title: str | None) -> List[Show]:
        return [self.engine.copy_show(s) for s in self.store.list_showtimes(movie_title)]

    def get_show(self, show_id: str) -> Show | None:
        show = self.store.get_show(show_id)
        return self.engine.copy_show(show) if show else None

    def delete_show(self, show_id: str) -> bool:
        """Remove a show and the bookings made on it."""
        if not self.store.delete_show(show_id):
            return False
        self.engine.discard_show_bookings(show_id)
        return True

    def delete_movie(self, movie_id: str) -> bool:
        """Remove a movie, its shows and their bookings."""
        show_ids = [s.id for s in self.store.list_shows(movie_id)]
        if not self.store.delete_movie(movie_id):
            return False
        for show_id in show_ids:
            self.engine.discard_show_bookings(show_id)
        return True

    # ---------- booking ----------
    def book_seats(self, show_id: str, seats: Iterable[str],
                   user_name: str | None = None) -> Result[str]:
        return self.engine.book_seats(show_id, seats, user_name)

    def cancel_booking(self, booking_id: str) -> Result[Booking]:
        return self.engine.cancel_booking(booking_id)

    def available_seats(self, show_id: str) -> List[str]:
        return self.engine.available_seats(show_id)

    def seat_status(self, show_id: str) -> Result[SeatMap]:
        return self.engine.seat_status(show_id)

    def get_booking(self, booking_id: str) -> Booking | None:
        return self.ledger.get(booking_id)

    def list_bookings(self, user_name: str | None = None) -> List[Booking]:
        return self.ledger.list_bookings(user_name)
