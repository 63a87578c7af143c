"""
Console UI: browse/search movies -> pick a showtime -> book seats.

Presentation only; every booking decision is made by the registry.
"""

from datetime import datetime
from typing import List, Optional

from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .registry import CinemaRegistry
from .results import Failure, Ok
from .schemas import Movie, Show
from .seats import ROW_LETTERS, normalize_seats
from .seed import seed_demo

# ---------- input ----------

def prompt(message: str) -> str:
    try:
        return input(message)
    except EOFError:
        return ""


def prompt_int(message: str, low: int, high: int, retries: int = 3) -> Optional[int]:
    """Number within [low, high], or None after ``retries`` bad answers."""
    for _ in range(retries):
        answer = prompt(message).strip()
        if answer.isdigit() and low <= int(answer) <= high:
            return int(answer)
        print(f"Please enter a number between {low} and {high}.")
    return None


def parse_seat_list(raw: str) -> List[str]:
    return normalize_seats(raw.split(","))


def pause(message: str) -> None:
    print(f"\n{message}\nPress ENTER to continue...")
    prompt("")

# ---------- printing ----------

def format_start(when: datetime) -> str:
    # e.g. Sat, Aug 24 · 3:41 PM, in local time
    when = when.astimezone()
    return f"{when:%a, %b} {when.day} · {when.hour % 12 or 12}:{when:%M %p}"


def print_movie_list(heading: str, movies: List[Movie]) -> None:
    print(f"\n{heading}:")
    for i, m in enumerate(movies, start=1):
        print(f"{i}) {m.title}  ({m.genre}, {m.rating})")


def print_show_list(title: str, shows: List[Show]) -> None:
    print(f"\nShowtimes for {title.title()}:")
    for i, show in enumerate(shows, start=1):
        print(f"{i}) {format_start(show.start_time)}")

# ---------- seat map ----------

def render_seat_map(registry: CinemaRegistry, show_id: str) -> str:
    """Text seat map for a show. Raises LookupError when the show cannot be drawn."""
    match registry.seat_status(show_id):
        case Ok(value=seat_map):
            pass
        case Failure() as failure:
            raise LookupError(failure.detail)

    rows, cols, booked = seat_map.rows, seat_map.cols, seat_map.booked
    label_width, cell_width = 3, 3
    aisle_after = cols // 2 if cols >= 8 else -1
    grid_width = label_width + cols * cell_width + (2 if aisle_after > 0 else 0)

    lines = ["", "═" * grid_width, "SCREEN".center(grid_width).rstrip(), "═" * grid_width,
             "Legend: [ ] available   [X] booked", ""]

    header = " " * label_width
    for c in range(1, cols + 1):
        header += f"{c:>2} "
        if c == aisle_after:
            header += "  "
    lines.append(header.rstrip())

    for r in range(rows):
        letter = ROW_LETTERS[r]
        line = f" {letter} "
        for c in range(1, cols + 1):
            line += "[X]" if f"{letter}{c}" in booked else "[ ]"
            if c == aisle_after:
                line += "  "
        lines.append(line.rstrip())

    available = registry.available_seats(show_id)
    lines.append(f"\nAvailable seats: {len(available)}")
    if available:
        more = ", ..." if len(available) > 10 else ""
        lines.append(f"Examples: {', '.join(available[:10])}{more}")
    return "\n".join(lines)

# ---------- interactive flows ----------

def cancel_booking_interactive(registry: CinemaRegistry) -> bool:
    print("\n— Cancel a Booking —")
    booking_id = prompt("Enter Booking ID (blank to go back): ").strip()
    if not booking_id:
        return False
    result = registry.cancel_booking(booking_id)
    pause(" Booking canceled and seats freed." if result.ok
          else " Could not cancel — booking id not found.")
    return result.ok


def book_seats_interactive(registry: CinemaRegistry, show: Show,
                           user_name: str | None = None) -> Optional[str]:
    """Draw the map and ask for seats until a booking succeeds.

    Blank input twice in a row gives up and returns None.
    """
    while True:
        print(render_seat_map(registry, show.id))

        seats = parse_seat_list(prompt("\nEnter seats to book (comma, e.g., A1,A2 or blank to cancel): "))
        if not seats:
            print("  No seats entered. Please try again (or press Enter again to cancel).")
            seats = parse_seat_list(prompt("Press Enter with no input again to cancel, or type seats: "))
            if not seats:
                return None

        match registry.book_seats(show.id, seats, user_name):
            case Ok(value=booking_id):
                pause(f" Booking successful!\nBooking ID: {booking_id}")
                return booking_id
            case Failure():
                print(" Seat(s) already booked or invalid. Try another seat.\n")


class ConsoleUI:

    def __init__(self, registry: CinemaRegistry):
        if registry is None:
            raise ValueError("registry is required")
        self._registry = registry

    def run(self) -> None:
        while True:
            print("\n Movie Ticket Booking\n")
            print("1) Book tickets")
            print("2) Cancel a booking")
            print("   (blank to exit)")

            choice = prompt("\nChoose an option: ").strip()
            if not choice:
                return

            if choice == "2":
                cancel_booking_interactive(self._registry)
                continue

            # default to the booking flow
            movie = self.select_movie()
            if movie is None:
                continue
            show = self.select_show(movie)
            if show is None:
                continue
            book_seats_interactive(self._registry, show)

    def select_movie(self) -> Optional[Movie]:
        all_movies = self._registry.search_movies("")
        if not all_movies:
            pause(" No movies are currently available.")
            return None

        print_movie_list("Available movies", all_movies)

        while True:
            answer = prompt("\nPick movie # or type to search (blank to exit): ").strip()
            if not answer:
                return None

            if answer.isdigit() and 1 <= int(answer) <= len(all_movies):
                return all_movies[int(answer) - 1]

            matches = self._registry.search_movies(answer)
            if not matches:
                print(f" No movies matched '{answer}'. Try again.")
                continue

            print_movie_list(f"Matches for '{answer.title()}'", matches)
            pick = prompt_int("\nPick movie #: ", 1, len(matches))
            if pick is not None:
                return matches[pick - 1]
            print(" No valid selection. Try again.")

    def select_show(self, movie: Movie) -> Optional[Show]:
        shows = self._registry.list_showtimes(movie.title)
        if not shows:
            pause(f" No showtimes for {movie.title}.")
            return None

        print_show_list(movie.title, shows)
        pick = prompt_int("\nPick show # (blank to go back): ", 1, len(shows))
        if pick is None:
            return None
        return shows[pick - 1]


def main(settings: Settings | None = None) -> None:
    settings = settings or default_settings
    setup_logging(settings)
    registry = CinemaRegistry(settings)
    seed_demo(registry)
    ConsoleUI(registry).run()


if __name__ == "__main__":
    main()
