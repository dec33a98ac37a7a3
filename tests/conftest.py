"""Shared fixtures: a small hand-built movie collection."""

import pytest

from film_queries.models import Movie
from film_queries.query_engine import QueryEngine


@pytest.fixture
def unforgiven():
	return Movie(
		title="Unforgiven",
		release_year=1992,
		actors={"Clint Eastwood", "Gene Hackman", "Morgan Freeman"},
		directors={"Clint Eastwood"},
		categories={"Drama", "Western"},
		actors_by_character={"William Munny": {"Clint Eastwood"}},
	)


@pytest.fixture
def malkovich():
	return Movie(
		title="Being John Malkovich",
		release_year=1999,
		actors={"John Cusack", "John Malkovich"},
		directors={"Spike Jonze"},
		categories={"Comedy", "Drama"},
		actors_by_character={"John Malkovich": {"John Malkovich"}, "Craig Schwartz": {"John Cusack"}},
	)


@pytest.fixture
def matrix():
	return Movie(
		title="The Matrix",
		release_year=1999,
		actors={"Keanu Reeves", "Hugo Weaving"},
		directors={"Lana Wachowski", "Lilly Wachowski"},
		categories={"Action", "Science Fiction"},
		actors_by_character={"Neo": {"Keanu Reeves"}},
	)


@pytest.fixture
def gran_torino():
	return Movie(
		title="Gran Torino",
		release_year=2008,
		actors={"Clint Eastwood", "Bee Vang"},
		directors={"Clint Eastwood"},
		categories={"Drama"},
	)


@pytest.fixture
def annie_hall():
	return Movie(
		title="Annie Hall",
		release_year=1977,
		actors={"Woody Allen", "Diane Keaton"},
		directors={"Woody Allen"},
		categories={"Comedy", "Romance"},
	)


@pytest.fixture
def movies(unforgiven, malkovich, matrix, gran_torino, annie_hall):
	return [unforgiven, malkovich, matrix, gran_torino, annie_hall]


@pytest.fixture
def engine(movies):
	return QueryEngine(movies)
