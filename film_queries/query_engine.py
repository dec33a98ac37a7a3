"""
Query engine module.
Answers a fixed set of analytical questions over an in-memory collection of movies:
filtering by year, grouping actors/directors, detecting self-portrayals,
and ordering movies most-recent-first.
"""

from typing import Collection, Dict, Iterator, List, Set, Tuple  # type annotations for clarity

# Import project modules for the record type and the shared primitives
from .models import Movie  # immutable movie record
from .collectors import distinct_sorted, group_into_sets  # dedupe/sort and pair grouping

# Import loguru for console logging
from loguru import logger  # simple structured logger


class QueryEngine:
	"""
	Read-only queries over a snapshot of movies.
	The engine keeps a reference to the caller's collection and re-scans it on every call;
	nothing is copied, indexed, or cached. The caller must not mutate the collection
	while queries run.
	"""

	def __init__(self, movies: Collection[Movie]):
		# An absent collection is caller misuse
		if movies is None:
			raise ValueError("Movie collection is required (got None)")
		self.movies = movies  # keep dataset reference, never mutated
		logger.info(f"[Engine] Ready with {len(movies)} movies")

	def movies_by_year(self, year: int) -> List[Movie]:
		"""Return every movie released in `year`, in the collection's own order."""
		_require_year(year)
		found = [movie for movie in self.movies if movie.release_year == year]  # stable filter
		logger.debug(f"[Engine] movies_by_year year={year} -> {len(found)} movies")
		return found

	def all_actors_alphabetical(self) -> List[str]:
		"""Return every actor in the dataset once, sorted by ordinal string order."""
		actors = distinct_sorted(actor for movie in self.movies for actor in movie.actors)
		logger.debug(f"[Engine] all_actors_alphabetical -> {len(actors)} actors")
		return actors

	def movies_by_actor(self, actor_name: str) -> Dict[str, Set[str]]:
		"""
		Return {actor_name: titles of the movies the actor appears in}.
		The key is always present, even when the actor has no movies
		({actor_name: set()}); callers rely on this single-key shape.
		"""
		_require_name(actor_name, 'actor_name')
		titles = {movie.title for movie in self.movies if actor_name in movie.actors}
		logger.debug(f"[Engine] movies_by_actor actor='{actor_name}' -> {len(titles)} titles")
		return {actor_name: titles}

	def actors_that_interpret_themselves(self) -> Set[str]:
		"""
		Return the actors who played a character carrying their own name.
		A character only counts within the movie that lists it.
		"""
		actors = {
			character
			for movie in self.movies
			for character, portrayed_by in movie.actors_by_character.items()
			if character in portrayed_by  # character name equals one of its actors
		}
		logger.debug(f"[Engine] actors_that_interpret_themselves -> {len(actors)} actors")
		return actors

	def actors_in_directors_films_alphabetical(self, director_name: str) -> List[str]:
		"""Return every actor of the movies `director_name` directed, deduplicated and sorted."""
		_require_name(director_name, 'director_name')
		actors = distinct_sorted(
			actor
			for movie in self.movies
			if director_name in movie.directors
			for actor in movie.actors
		)
		logger.debug(f"[Engine] actors_in_directors_films_alphabetical director='{director_name}' -> {len(actors)} actors")
		return actors

	def movies_with_acting_directors_most_recent_first(self) -> List[Movie]:
		"""
		Return the movies where at least one director also acts, newest first.
		Movies from the same year keep their collection order.
		"""
		qualifying = [movie for movie in self.movies if not movie.directors.isdisjoint(movie.actors)]
		distinct = list(dict.fromkeys(qualifying))  # drop equal duplicates, first occurrence wins
		# sorted() is stable even with reverse=True, so equal years keep encounter order
		ordered = sorted(distinct, key=lambda movie: movie.release_year, reverse=True)
		logger.debug(f"[Engine] movies_with_acting_directors_most_recent_first -> {len(ordered)} movies")
		return ordered

	def movies_by_year_grouped_by_category(self, year: int) -> Dict[str, Set[Movie]]:
		"""
		Return the movies released in `year` grouped by category.
		A movie with several categories appears under each of them;
		categories with no movie that year are left out.
		"""
		_require_year(year)
		grouped = group_into_sets(self._category_pairs(self.movies_by_year(year)))
		logger.debug(f"[Engine] movies_by_year_grouped_by_category year={year} -> {len(grouped)} categories")
		return grouped

	def _category_pairs(self, movies: List[Movie]) -> Iterator[Tuple[str, Movie]]:
		"""Flat-map movies into one (category, movie) pair per category."""
		for movie in movies:
			for category in movie.categories:
				yield category, movie


def _require_year(year: int):
	# bool is an int subclass but never a meaningful year
	if isinstance(year, bool) or not isinstance(year, int):
		raise ValueError(f"year must be an integer (got {year!r})")


def _require_name(name: str, argument: str):
	if not isinstance(name, str):
		raise ValueError(f"{argument} must be a string (got {name!r})")
