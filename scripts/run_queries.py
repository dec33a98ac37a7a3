"""
Run every movie query against a dataset and log the results.

This script:
1) Loads movies from data/movies.jsonl (or --data)
2) Builds a QueryEngine over them
3) Runs the seven queries and logs each result

Usage:
    python -m scripts.run_queries --year 1999 --actor "Clint Eastwood"

Year, actor and director default to values taken from the first movie.
"""

from pathlib import Path  # filesystem-safe paths
from typing import Optional  # optional CLI values

import typer  # command-line options
from loguru import logger  # console logging

from film_queries import config  # default data path
from film_queries.data_loader import DataLoader  # data ingestion
from film_queries.query_engine import QueryEngine  # the queries


def _banner(title: str):
	logger.info("=" * 60)
	logger.info(title)
	logger.info("=" * 60)


def main(
	data: Path = typer.Option(config.DATA_PATH, "--data", help="JSONL file with one movie per line"),
	year: Optional[int] = typer.Option(None, "--year", help="Release year for the year queries"),
	actor: Optional[str] = typer.Option(None, "--actor", help="Actor for the titles-by-actor query"),
	director: Optional[str] = typer.Option(None, "--director", help="Director for the cast query"),
):
	_banner("Film Queries Report")

	# 1) Load data
	logger.info("[1/3] Loading movies...")
	movies = DataLoader().load_movies_from_jsonl(str(data))
	if not movies:
		logger.warning("No movies loaded; every query will be empty")

	# Fill in defaults from the first record so the report always has something to show
	first = movies[0] if movies else None
	if year is None:
		year = first.release_year if first else 0
	if actor is None:
		actor = min(first.actors) if first and first.actors else ''
	if director is None:
		director = min(first.directors) if first and first.directors else ''

	# 2) Build the engine
	logger.info("[2/3] Building query engine...")
	engine = QueryEngine(movies)

	# 3) Run the queries
	logger.info(f"[3/3] Running queries | year={year} actor='{actor}' director='{director}'")

	_banner(f"Movies released in {year}")
	for movie in engine.movies_by_year(year):
		logger.info(f"  {movie.title}")

	_banner("All actors (alphabetical)")
	logger.info(f"  {', '.join(engine.all_actors_alphabetical())}")

	_banner(f"Movies with {actor}")
	for name, titles in engine.movies_by_actor(actor).items():
		logger.info(f"  {name}: {sorted(titles)}")

	_banner("Actors who played themselves")
	logger.info(f"  {sorted(engine.actors_that_interpret_themselves())}")

	_banner(f"Actors in films directed by {director}")
	logger.info(f"  {engine.actors_in_directors_films_alphabetical(director)}")

	_banner("Movies with an acting director (most recent first)")
	for movie in engine.movies_with_acting_directors_most_recent_first():
		logger.info(f"  {movie.release_year}  {movie.title}")

	_banner(f"Movies released in {year} by category")
	for category, group in sorted(engine.movies_by_year_grouped_by_category(year).items()):
		logger.info(f"  {category}: {sorted(m.title for m in group)}")


if __name__ == '__main__':
	typer.run(main)
