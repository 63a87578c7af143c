from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from cinema_registry.config import Settings
from cinema_registry.main import create_app
from cinema_registry.registry import CinemaRegistry
from cinema_registry.schemas import Movie, Screen, Show, Theater


@pytest.fixture
def settings():
    return Settings(SEED_DEMO_DATA=False)


@pytest.fixture
def registry(settings):
    return CinemaRegistry(settings)


def add_show(registry, rows=10, seats_per_row=10, title="Inception", hours=2):
    """Movie + theater + screen + one show; returns the show."""
    store = registry.store
    movie = next((m for m in store.list_movies() if m.title == title), None)
    if movie is None:
        movie = store.save_movie(Movie(id=store.new_id(), title=title, genre="SciFi",
                                       duration_minutes=148))
    theater = store.save_theater(Theater(id=store.new_id(), name="Bruin", location="Westwood"))
    screen = store.save_screen(Screen(id=store.new_id(), theater_id=theater.id,
                                      rows=rows, seats_per_row=seats_per_row))
    return store.save_show(Show(id=store.new_id(), movie_id=movie.id, screen_id=screen.id,
                                start_time=datetime(2025, 10, 15, 19, 0) + timedelta(hours=hours)))


@pytest.fixture
def make_show(registry):
    return lambda **kwargs: add_show(registry, **kwargs)


@pytest.fixture
def show(registry):
    return add_show(registry)


@pytest.fixture
def small_show(registry):
    return add_show(registry, rows=2, seats_per_row=2, title="Up")


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
