import uuid
from typing import Dict, List

from .schemas import Movie, Screen, Show, Theater


class CatalogStore:
    """In-memory tables for movies, theaters, screens and shows.

    Shows are handed out by reference; their ``booked_seats`` set is only
    mutated by the booking engine.
    """

    def __init__(self) -> None:
        self._movies: Dict[str, Movie] = {}
        self._theaters: Dict[str, Theater] = {}
        self._screens: Dict[str, Screen] = {}
        self._shows: Dict[str, Show] = {}

    # ---------- id generator ----------
    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    # ---------- movie ops ----------
    def save_movie(self, m: Movie) -> Movie:
        self._movies[m.id] = m
        return m

    def get_movie(self, movie_id: str) -> Movie | None: return self._movies.get(movie_id)
    def list_movies(self) -> List[Movie]: return list(self._movies.values())

    def delete_movie(self, movie_id: str) -> bool:
        """Remove a movie together with its shows."""
        if movie_id not in self._movies:
            return False
        for sid, show in list(self._shows.items()):
            if show.movie_id == movie_id:
                self._shows.pop(sid, None)
        self._movies.pop(movie_id, None)
        return True

    # ---------- theater / screen ops ----------
    def save_theater(self, t: Theater) -> Theater:
        self._theaters[t.id] = t
        return t

    def get_theater(self, theater_id: str) -> Theater | None: return self._theaters.get(theater_id)
    def list_theaters(self) -> List[Theater]: return list(self._theaters.values())

    def save_screen(self, s: Screen) -> Screen:
        self._screens[s.id] = s
        return s

    def get_screen(self, screen_id: str) -> Screen | None: return self._screens.get(screen_id)

    # ---------- show ops ----------
    def save_show(self, show: Show) -> Show:
        self._shows[show.id] = show
        return show

    def get_show(self, show_id: str) -> Show | None: return self._shows.get(show_id)

    def list_shows(self, movie_id: str | None = None) -> List[Show]:
        shows = list(self._shows.values())
        return [s for s in shows if movie_id is None or s.movie_id == movie_id]

    def delete_show(self, show_id: str) -> bool:
        return self._shows.pop(show_id, None) is not None

    # ---------- lookups ----------
    def search_movies(self, query: str | None) -> List[Movie]:
        """Case-insensitive title search; blank query returns everything. Sorted by title."""
        q = (query or "").strip().lower()
        movies = self.list_movies()
        if q:
            movies = [m for m in movies if q in m.title.lower()]
        return sorted(movies, key=lambda m: m.title)

    def list_showtimes(self, movie_title: str | None) -> List[Show]:
        """Shows for the movie whose title matches exactly, else the first partial match."""
        title = (movie_title or "").strip().lower()
        if not title:
            return []
        movies = self.list_movies()
        movie = next((m for m in movies if m.title.lower() == title), None)
        if movie is None:
            movie = next((m for m in movies if title in m.title.lower()), None)
        if movie is None:
            return []
        return sorted(self.list_shows(movie.id), key=lambda s: s.start_time)
