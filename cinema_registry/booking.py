"""
Booking engine: atomic, all-or-nothing seat reservation and cancellation.

Every mutation of a show's booked set happens while holding that show's lock,
so bookings on different shows never wait on each other while bookings on
the same show are strictly serialized.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Iterable, List

from .ledger import BookingLedger
from .results import Failure, FailureReason, Ok, Result
from .schemas import Booking, SeatMap, Show
from .seats import normalize_seats, seat_codes, seat_exists
from .storage import CatalogStore

logger = logging.getLogger(__name__)


class ShowLocks:
    """One lock per show id, created on first use."""

    def __init__(self) -> None:
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def for_show(self, show_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(show_id)
            if lock is None:
                lock = self._locks[show_id] = threading.Lock()
            return lock


class BookingEngine:

    def __init__(self, store: CatalogStore, ledger: BookingLedger,
                 default_user: str = "Guest", locks: ShowLocks | None = None):
        self._store = store
        self._ledger = ledger
        self._default_user = default_user
        self._locks = locks or ShowLocks()

    # ---------- booking ----------

    def book_seats(self, show_id: str, seats: Iterable[str],
                   user_name: str | None = None) -> Result[str]:
        """Book every requested seat or none of them. Returns the new booking id."""
        if not show_id or not show_id.strip():
            return Failure(FailureReason.invalid_input, "show id is required")
        show_id = show_id.strip()

        requested = normalize_seats(seats or [])
        if not requested:
            return Failure(FailureReason.invalid_input, "no seats requested")

        if self._store.get_show(show_id) is None:
            return Failure(FailureReason.not_found, f"show {show_id} not found")

        user_name = (user_name or "").strip() or self._default_user

        with self._locks.for_show(show_id):
            show = self._store.get_show(show_id)
            if show is None:
                return Failure(FailureReason.not_found, f"show {show_id} not found")
            screen = self._store.get_screen(show.screen_id)
            if screen is None:
                return Failure(FailureReason.not_found, f"screen {show.screen_id} not found")

            # validate everything before we mutate
            for seat in requested:
                if not seat_exists(screen, seat) or seat in show.booked_seats:
                    logger.info("Booking rejected on show %s: seat %s unavailable", show_id, seat)
                    return Failure(FailureReason.seat_unavailable, seat)

            show.booked_seats.update(requested)
            booking = Booking(
                id=self._ledger.next_booking_id(),
                user_name=user_name,
                show_id=show.id,
                seat_ids=tuple(requested),
                created_at=datetime.now(timezone.utc),
            )
            self._ledger.record(booking)

        logger.info("Booking %s created for %s on show %s: %s",
                    booking.id, user_name, show_id, ",".join(requested))
        return Ok(booking.id)

    def cancel_booking(self, booking_id: str) -> Result[Booking]:
        """Free a booking's seats and delete the record. Returns the removed booking."""
        if not booking_id or not booking_id.strip():
            return Failure(FailureReason.invalid_input, "booking id is required")
        booking_id = booking_id.strip()

        booking = self._ledger.get(booking_id)
        if booking is None:
            return Failure(FailureReason.not_found, f"booking {booking_id} not found")
        show = self._store.get_show(booking.show_id)
        if show is None:
            return Failure(FailureReason.not_found, f"show {booking.show_id} not found")

        with self._locks.for_show(show.id):
            # a concurrent cancel may have won the race
            if self._ledger.pop(booking_id) is None:
                return Failure(FailureReason.not_found, f"booking {booking_id} not found")
            for seat in booking.seat_ids:
                show.booked_seats.discard(seat)

        logger.info("Booking %s cancelled, freed %s on show %s",
                    booking_id, ",".join(booking.seat_ids), show.id)
        return Ok(booking)

    def discard_show_bookings(self, show_id: str) -> List[Booking]:
        """Drop the ledger records of a show that left the catalog."""
        with self._locks.for_show(show_id):
            removed = self._ledger.remove_for_show(show_id)
        if removed:
            logger.info("Discarded %d booking(s) of deleted show %s", len(removed), show_id)
        return removed

    # ---------- queries ----------

    def copy_show(self, show: Show) -> Show:
        """Detached copy of a show whose booked set is read under the show lock."""
        with self._locks.for_show(show.id):
            booked = set(show.booked_seats)
        return show.model_copy(update={"booked_seats": booked})

    def available_seats(self, show_id: str) -> List[str]:
        """Free seats in row-major order; empty when the show or screen is unknown."""
        show = self._store.get_show(show_id) if show_id else None
        if show is None:
            return []
        screen = self._store.get_screen(show.screen_id)
        if screen is None:
            return []
        with self._locks.for_show(show.id):
            booked = set(show.booked_seats)
        return [s for s in seat_codes(screen.rows, screen.seats_per_row) if s not in booked]

    def seat_status(self, show_id: str) -> Result[SeatMap]:
        """Snapshot of a show's geometry and booked seats for drawing a seat map."""
        show = self._store.get_show(show_id) if show_id else None
        if show is None:
            return Failure(FailureReason.not_found, f"show {show_id} not found")
        screen = self._store.get_screen(show.screen_id)
        if screen is None:
            return Failure(FailureReason.not_found, f"screen {show.screen_id} not found")
        with self._locks.for_show(show.id):
            booked = set(show.booked_seats)
        return Ok(SeatMap(show_id=show.id, rows=screen.rows,
                          cols=screen.seats_per_row, booked=booked))
