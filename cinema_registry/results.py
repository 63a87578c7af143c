"""Outcome of booking operations: either ``Ok(value)`` or ``Failure(reason)``.

Expected failures (bad input, unknown ids, taken seats) are returned, not raised::

    match engine.book_seats(show_id, ["A1"]):
        case Ok(value=booking_id):
            ...
        case Failure(reason=FailureReason.seat_unavailable):
            ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class FailureReason(str, Enum):
    invalid_input = "invalid_input"          # blank ids, empty seat list
    not_found = "not_found"                  # unknown show/screen/booking
    seat_unavailable = "seat_unavailable"    # out of bounds or already booked


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    detail: str = ""
    ok: ClassVar[bool] = False


Result = Union[Ok[T], Failure]
