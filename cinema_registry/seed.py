from datetime import datetime, timedelta, timezone

from .registry import CinemaRegistry
from .schemas import Movie, Screen, Show, Theater


def seed_demo(registry: CinemaRegistry) -> CinemaRegistry:
    """Two movies, one theater with a single screen, three showtimes."""
    store = registry.store
    cfg = registry.settings

    inception = store.save_movie(Movie(id=store.new_id(), title="Inception", genre="SciFi",
                                       duration_minutes=148, rating="PG-13"))
    up = store.save_movie(Movie(id=store.new_id(), title="Up", genre="Animation",
                                duration_minutes=96, rating="PG"))

    theater = store.save_theater(Theater(id=store.new_id(), name="UCLA Bruin Theater",
                                         location="Westwood, CA"))
    screen = store.save_screen(Screen(id=store.new_id(), theater_id=theater.id,
                                      rows=cfg.DEFAULT_ROWS, seats_per_row=cfg.DEFAULT_SEATS_PER_ROW))

    now = datetime.now(timezone.utc)
    for movie, hours in ((inception, 2), (inception, 5), (up, 3)):
        store.save_show(Show(id=store.new_id(), movie_id=movie.id, screen_id=screen.id,
                             start_time=now + timedelta(hours=hours)))
    return registry
