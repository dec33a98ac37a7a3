"""
Tests for QueryEngine: the seven queries, their empty forms, and caller errors.
"""

import pytest

from film_queries.models import Movie
from film_queries.query_engine import QueryEngine


class TestMoviesByYear:
	def test_returns_matches_in_collection_order(self, engine, malkovich, matrix):
		assert engine.movies_by_year(1999) == [malkovich, matrix]

	def test_every_movie_of_the_year_appears_once(self, engine, movies):
		for year in {m.release_year for m in movies}:
			found = engine.movies_by_year(year)
			assert all(m.release_year == year for m in found)
			assert found == [m for m in movies if m.release_year == year]

	def test_no_match_is_empty_list(self, engine):
		assert engine.movies_by_year(1850) == []


class TestAllActorsAlphabetical:
	def test_sorted_union_of_casts(self, engine):
		assert engine.all_actors_alphabetical() == [
			"Bee Vang",
			"Clint Eastwood",
			"Diane Keaton",
			"Gene Hackman",
			"Hugo Weaving",
			"John Cusack",
			"John Malkovich",
			"Keanu Reeves",
			"Morgan Freeman",
			"Woody Allen",
		]

	def test_no_duplicates(self, engine):
		actors = engine.all_actors_alphabetical()
		assert len(actors) == len(set(actors))

	def test_ordinal_comparison_without_case_folding(self):
		engine = QueryEngine([Movie("T", 2000, actors={"alice", "Zed", "Bob", "Émile"})])
		# Uppercase sorts before lowercase, accented letters after ASCII
		assert engine.all_actors_alphabetical() == ["Bob", "Zed", "alice", "Émile"]


class TestMoviesByActor:
	def test_single_key_with_titles(self, engine):
		assert engine.movies_by_actor("Clint Eastwood") == {"Clint Eastwood": {"Unforgiven", "Gran Torino"}}

	def test_unknown_actor_keeps_key_with_empty_set(self, engine):
		assert engine.movies_by_actor("Nobody") == {"Nobody": set()}

	def test_match_is_exact(self, engine):
		assert engine.movies_by_actor("clint eastwood") == {"clint eastwood": set()}


class TestActorsThatInterpretThemselves:
	def test_finds_self_portrayal(self, engine):
		assert engine.actors_that_interpret_themselves() == {"John Malkovich"}

	def test_character_name_alone_is_not_enough(self):
		movie = Movie(
			"Impostor",
			2001,
			actors={"Hugo Weaving", "Keanu Reeves"},
			actors_by_character={"Hugo Weaving": {"Keanu Reeves"}},
		)
		assert QueryEngine([movie]).actors_that_interpret_themselves() == set()

	def test_characters_only_count_within_their_movie(self):
		# Character "Al" in one movie and actor "Al" in another do not combine
		first = Movie("First", 2000, actors={"Bo"}, actors_by_character={"Al": {"Bo"}})
		second = Movie("Second", 2001, actors={"Al"}, actors_by_character={"Cy": {"Al"}})
		assert QueryEngine([first, second]).actors_that_interpret_themselves() == set()

	def test_repeated_self_portrayals_collapse(self):
		cameo = {"Bill Murray": {"Bill Murray"}}
		movies = [
			Movie("Zombieland", 2009, actors={"Bill Murray"}, actors_by_character=cameo),
			Movie("Coffee and Cigarettes", 2003, actors={"Bill Murray"}, actors_by_character=cameo),
		]
		assert QueryEngine(movies).actors_that_interpret_themselves() == {"Bill Murray"}


class TestActorsInDirectorsFilms:
	def test_sorted_deduplicated_cast(self, engine):
		assert engine.actors_in_directors_films_alphabetical("Clint Eastwood") == [
			"Bee Vang",
			"Clint Eastwood",
			"Gene Hackman",
			"Morgan Freeman",
		]

	def test_co_director_counts(self, engine):
		assert engine.actors_in_directors_films_alphabetical("Lilly Wachowski") == ["Hugo Weaving", "Keanu Reeves"]

	def test_unknown_director_is_empty(self, engine):
		assert engine.actors_in_directors_films_alphabetical("Nobody") == []

	def test_films_without_actors_are_empty(self):
		engine = QueryEngine([Movie("Koyaanisqatsi", 1982, directors={"Godfrey Reggio"})])
		assert engine.actors_in_directors_films_alphabetical("Godfrey Reggio") == []


class TestMoviesWithActingDirectors:
	def test_most_recent_first(self, engine, gran_torino, unforgiven, annie_hall):
		assert engine.movies_with_acting_directors_most_recent_first() == [gran_torino, unforgiven, annie_hall]

	def test_every_result_has_an_acting_director(self, engine):
		for movie in engine.movies_with_acting_directors_most_recent_first():
			assert movie.directors & movie.actors

	def test_same_year_keeps_collection_order(self):
		a = Movie("A", 2000, actors={"X"}, directors={"X"})
		b = Movie("B", 2010, actors={"Y"}, directors={"Y"})
		c = Movie("C", 2000, actors={"Z"}, directors={"Z"})
		assert QueryEngine([a, b, c]).movies_with_acting_directors_most_recent_first() == [b, a, c]
		assert QueryEngine([c, b, a]).movies_with_acting_directors_most_recent_first() == [b, c, a]

	def test_duplicates_are_dropped(self):
		a = Movie("A", 2000, actors={"X"}, directors={"X"})
		same_as_a = Movie("A", 2000, actors={"X"}, directors={"X"})
		result = QueryEngine([a, a, same_as_a]).movies_with_acting_directors_most_recent_first()
		assert result == [a]
		assert result[0] is a


class TestMoviesByYearGroupedByCategory:
	def test_groups_by_category(self, engine, malkovich, matrix):
		assert engine.movies_by_year_grouped_by_category(1999) == {
			"Comedy": {malkovich},
			"Drama": {malkovich},
			"Action": {matrix},
			"Science Fiction": {matrix},
		}

	def test_union_equals_movies_of_the_year(self, engine):
		grouped = engine.movies_by_year_grouped_by_category(1999)
		assert all(grouped.values())
		assert set().union(*grouped.values()) == set(engine.movies_by_year(1999))

	def test_no_match_is_empty_mapping(self, engine):
		assert engine.movies_by_year_grouped_by_category(1850) == {}

	def test_movie_without_categories_is_absent(self):
		engine = QueryEngine([Movie("Untagged", 2000)])
		assert engine.movies_by_year_grouped_by_category(2000) == {}


def test_single_movie_scenario():
	x = Movie("X", 2000, actors={"Al"}, directors={"Al"}, categories={"Drama"})
	engine = QueryEngine([x])
	assert engine.movies_by_year(2000) == [x]
	assert engine.all_actors_alphabetical() == ["Al"]
	assert engine.movies_by_actor("Al") == {"Al": {"X"}}
	assert engine.movies_with_acting_directors_most_recent_first() == [x]
	assert engine.movies_by_year_grouped_by_category(2000) == {"Drama": {x}}


def test_empty_collection_scenario():
	engine = QueryEngine([])
	assert engine.movies_by_year(2000) == []
	assert engine.all_actors_alphabetical() == []
	assert engine.movies_by_actor("Al") == {"Al": set()}
	assert engine.actors_that_interpret_themselves() == set()
	assert engine.actors_in_directors_films_alphabetical("Al") == []
	assert engine.movies_with_acting_directors_most_recent_first() == []
	assert engine.movies_by_year_grouped_by_category(2000) == {}


def test_engine_reads_the_live_collection():
	movies = []
	engine = QueryEngine(movies)
	movies.append(Movie("Late", 2020, actors={"Al"}))
	assert engine.all_actors_alphabetical() == ["Al"]


def test_queries_do_not_mutate_input(movies, engine):
	before = list(movies)
	engine.movies_by_year(1999)
	engine.movies_with_acting_directors_most_recent_first()
	engine.movies_by_year_grouped_by_category(1999)
	assert movies == before


class TestPreconditions:
	def test_missing_collection(self):
		with pytest.raises(ValueError, match="collection"):
			QueryEngine(None)

	@pytest.mark.parametrize("year", [None, "1999", 1999.0, True])
	def test_bad_year(self, engine, year):
		with pytest.raises(ValueError, match="year"):
			engine.movies_by_year(year)
		with pytest.raises(ValueError, match="year"):
			engine.movies_by_year_grouped_by_category(year)

	def test_missing_actor_name(self, engine):
		with pytest.raises(ValueError, match="actor_name"):
			engine.movies_by_actor(None)

	def test_missing_director_name(self, engine):
		with pytest.raises(ValueError, match="director_name"):
			engine.actors_in_directors_films_alphabetical(None)

	def test_empty_string_is_a_valid_name(self, engine):
		assert engine.movies_by_actor("") == {"": set()}
