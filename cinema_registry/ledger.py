import itertools
import threading
from typing import Dict, List, Optional

from .schemas import Booking


class BookingLedger:
    """Booking records keyed by short sequential ids ("B001", "B002", ...).

    Numbering is process-wide and never reuses an id, even after a cancellation.
    """

    def __init__(self, prefix: str = "B", width: int = 3) -> None:
        self._prefix = prefix
        self._width = width
        self._counter = itertools.count(1)
        self._bookings: Dict[str, Booking] = {}
        self._lock = threading.Lock()

    def next_booking_id(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self._prefix}{n:0{self._width}d}"

    def record(self, booking: Booking) -> Booking:
        with self._lock:
            self._bookings[booking.id] = booking
        return booking

    def get(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            return self._bookings.get(booking_id)

    def remove(self, booking_id: str) -> bool:
        return self.pop(booking_id) is not None

    def pop(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            return self._bookings.pop(booking_id, None)

    def remove_for_show(self, show_id: str) -> List[Booking]:
        """Drop every booking on a show; returns the removed records."""
        with self._lock:
            doomed = [b for b in self._bookings.values() if b.show_id == show_id]
            for b in doomed:
                del self._bookings[b.id]
        return doomed

    def list_bookings(self, user_name: str | None = None) -> List[Booking]:
        with self._lock:
            bookings = list(self._bookings.values())
        if user_name is not None:
            bookings = [b for b in bookings if b.user_name == user_name]
        return sorted(bookings, key=lambda b: (len(b.id), b.id))

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookings)
