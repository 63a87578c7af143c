from datetime import datetime, timezone
from typing import List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------- MOVIE ----------
class MovieBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Inception"])
    genre: str = Field("", examples=["SciFi"])
    duration_minutes: int = Field(..., ge=1, examples=[148])
    rating: str = Field("PG-13", examples=["PG-13"])

    @field_validator("title")
    @classmethod
    def _title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

class MovieCreate(MovieBase):
    pass

class Movie(MovieBase):
    id: str

# ---------- THEATER ----------
class TheaterBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["UCLA Bruin Theater"])
    location: str = Field("", examples=["Westwood, CA"])

class TheaterCreate(TheaterBase):
    pass

class Theater(TheaterBase):
    id: str

# ---------- SCREEN ----------
class ScreenCreate(BaseModel):
    # omitted geometry falls back to Settings.DEFAULT_ROWS / DEFAULT_SEATS_PER_ROW
    rows: Optional[int] = Field(None, ge=1, le=26, examples=[10])
    seats_per_row: Optional[int] = Field(None, ge=1, examples=[10])

class Screen(BaseModel):
    id: str
    theater_id: str
    # one letter per row: A..Z
    rows: int = Field(10, ge=1, le=26)
    seats_per_row: int = Field(10, ge=1)

# ---------- SHOW ----------
class ShowBase(BaseModel):
    movie_id: str
    screen_id: str
    start_time: datetime = Field(..., examples=["2025-10-15T19:00:00"])

    @field_validator("start_time")
    @classmethod
    def _start_time(cls, v: datetime) -> datetime:
        # stored as UTC-aware; naive input is taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

class ShowCreate(ShowBase):
    pass

class Show(ShowBase):
    id: str
    # canonical seat ids ("A1"); mutated only by the booking engine
    booked_seats: Set[str] = Field(default_factory=set)

# ---------- BOOKING ----------
class BookingRequest(BaseModel):
    show_id: str
    seats: List[str] = Field(..., examples=[["A1", "A2"]])
    user_name: Optional[str] = Field(None, examples=["alice"])

class Booking(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_name: str
    show_id: str
    seat_ids: Tuple[str, ...]
    created_at: datetime

# ---------- SEAT MAP ----------
class SeatMap(BaseModel):
    show_id: str
    rows: int
    cols: int
    booked: Set[str]
