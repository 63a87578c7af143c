from datetime import datetime, timedelta, timezone

from cinema_registry.schemas import Movie, Show
from cinema_registry.seed import seed_demo


def add_movie(store, title):
    return store.save_movie(Movie(id=store.new_id(), title=title, genre="Drama", duration_minutes=100))


def test_search_is_case_insensitive_and_sorted(registry):
    store = registry.store
    for title in ["Up", "Inception", "Interstellar", "Dune"]:
        add_movie(store, title)

    assert [m.title for m in registry.search_movies("")] == ["Dune", "Inception", "Interstellar", "Up"]
    assert [m.title for m in registry.search_movies(None)] == ["Dune", "Inception", "Interstellar", "Up"]
    assert [m.title for m in registry.search_movies("  INTER ")] == ["Interstellar"]
    assert [m.title for m in registry.search_movies("N")] == ["Dune", "Inception", "Interstellar"]
    assert registry.search_movies("zzz") == []


def test_list_showtimes_prefers_exact_title(registry, make_show):
    late = make_show(title="Up", hours=5)
    early = make_show(title="Up", hours=1)
    make_show(title="Upgrade", hours=3)

    shows = registry.list_showtimes("up")
    assert [s.id for s in shows] == [early.id, late.id]


def test_list_showtimes_falls_back_to_substring(registry, make_show):
    show = make_show(title="Inception")
    assert [s.id for s in registry.list_showtimes("cept")] == [show.id]
    assert registry.list_showtimes("nothing") == []
    assert registry.list_showtimes("   ") == []
    assert registry.list_showtimes(None) == []


def test_delete_movie_cascades_to_shows(registry, make_show):
    show = make_show(title="Inception")
    other = make_show(title="Up")
    store = registry.store

    assert store.delete_movie(show.movie_id) is True
    assert store.get_show(show.id) is None
    assert store.get_show(other.id) is not None
    assert store.delete_movie(show.movie_id) is False


def test_list_shows_by_movie(registry):
    store = registry.store
    movie = add_movie(store, "Heat")
    store.save_show(Show(id="s1", movie_id=movie.id, screen_id="x", start_time=datetime(2025, 1, 1)))
    store.save_show(Show(id="s2", movie_id="other", screen_id="x", start_time=datetime(2025, 1, 1)))
    assert [s.id for s in store.list_shows(movie.id)] == ["s1"]
    assert len(store.list_shows()) == 2


def test_seed_demo_catalog(registry):
    seed_demo(registry)
    assert [m.title for m in registry.search_movies("")] == ["Inception", "Up"]

    inception = registry.list_showtimes("Inception")
    assert len(inception) == 2
    assert inception[0].start_time < inception[1].start_time
    assert len(registry.list_showtimes("Up")) == 1

    assert len(registry.available_seats(inception[0].id)) == 100


def test_start_times_are_stored_in_utc(registry):
    store = registry.store
    naive = Show(id="n", movie_id="m", screen_id="x", start_time=datetime(2025, 1, 1, 19, 0))
    plus_two = timezone(timedelta(hours=2))
    aware = Show(id="a", movie_id="m", screen_id="x",
                 start_time=datetime(2025, 1, 1, 20, 0, tzinfo=plus_two))

    assert naive.start_time == datetime(2025, 1, 1, 19, 0, tzinfo=timezone.utc)
    assert aware.start_time.utcoffset() == timedelta(0)
    assert aware.start_time.hour == 18

    # mixed inputs still sort
    add_movie(store, "Heat")
    movie = store.list_movies()[0]
    for s in (naive, aware):
        store.save_show(s.model_copy(update={"movie_id": movie.id}))
    assert [s.id for s in registry.list_showtimes("Heat")] == ["a", "n"]
