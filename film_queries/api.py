"""
FastAPI server exposing the movie queries.
Endpoints:
- GET /health: basic health check
- GET /movies/year/{year}: movies released in a year
- GET /movies/year/{year}/categories: that year's movies grouped by category
- GET /movies/acting-directors: movies where a director also acts, newest first
- GET /actors: every actor, alphabetical
- GET /actors/self-portrayals: actors who played themselves
- GET /actors/{actor_name}/movies: titles per actor
- GET /directors/{director_name}/actors: actors who worked with a director

Startup loads the dataset from config.DATA_PATH and builds one QueryEngine.
Run: uvicorn film_queries.api:app --reload
"""

# Import standard libraries for timing
import time  # measure startup latency
from typing import Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, data loading and queries
from . import config  # paths and URLs
from .data_loader import DataLoader  # builds Movie records
from .models import Movie  # movie record
from .query_engine import QueryEngine  # the seven queries

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Film Queries API", version="1.0.0")  # web app

# Globals that hold the engine instance and measured startup time
ENGINE: Optional[QueryEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses.
# JSON has no set type, so every set is rendered as a sorted list.
class MovieOut(BaseModel):
	title: str
	release_year: int
	actors: List[str]
	directors: List[str]
	categories: List[str]
	actors_by_character: Dict[str, List[str]]


def to_movie_out(m: Movie) -> MovieOut:
	"""Convert an engine Movie into its response schema."""
	return MovieOut(
		title=m.title,
		release_year=m.release_year,
		actors=sorted(m.actors),
		directors=sorted(m.directors),
		categories=sorted(m.categories),
		actors_by_character={c: sorted(a) for c, a in sorted(m.actors_by_character.items())},
	)


def _engine() -> QueryEngine:
	"""Return the engine or answer 503 when startup has not completed."""
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Query requested but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Query engine not initialized")
	return ENGINE


# FastAPI startup hook to initialize the engine once
@app.on_event("startup")
async def startup_event():
	"""Load movies and build the query engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading movies from {config.DATA_PATH}...")  # log intent
	movies = DataLoader().load_movies_from_jsonl(str(config.DATA_PATH))  # read dataset
	ENGINE = QueryEngine(movies)  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(movies)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movie_count": len(ENGINE.movies) if ENGINE is not None else 0,  # dataset size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies/year/{year}", response_model=List[MovieOut])
async def movies_by_year(year: int):
	"""Movies released in `year`, in dataset order."""
	return [to_movie_out(m) for m in _engine().movies_by_year(year)]


@app.get("/movies/year/{year}/categories", response_model=Dict[str, List[MovieOut]])
async def movies_by_year_grouped_by_category(year: int):
	"""Movies released in `year` keyed by category; keys and titles sorted."""
	grouped = _engine().movies_by_year_grouped_by_category(year)
	return {
		category: [to_movie_out(m) for m in sorted(movies, key=lambda m: m.title)]
		for category, movies in sorted(grouped.items())
	}


@app.get("/movies/acting-directors", response_model=List[MovieOut])
async def movies_with_acting_directors():
	"""Movies where a director is also in the cast, most recent first."""
	return [to_movie_out(m) for m in _engine().movies_with_acting_directors_most_recent_first()]


@app.get("/actors", response_model=List[str])
async def all_actors():
	"""Every actor in the dataset, alphabetical."""
	return _engine().all_actors_alphabetical()


@app.get("/actors/self-portrayals", response_model=List[str])
async def actors_that_interpret_themselves():
	"""Actors who played a character with their own name, sorted."""
	return sorted(_engine().actors_that_interpret_themselves())


# :path keeps names containing "/" (sent as %2F) on this route
@app.get("/actors/{actor_name:path}/movies", response_model=Dict[str, List[str]])
async def movies_by_actor(actor_name: str):
	"""Single-key mapping from the actor to the titles they appear in."""
	by_actor = _engine().movies_by_actor(actor_name)
	return {name: sorted(titles) for name, titles in by_actor.items()}


@app.get("/directors/{director_name:path}/actors", response_model=List[str])
async def actors_in_directors_films(director_name: str):
	"""Actors who appeared in at least one film by the director, alphabetical."""
	return _engine().actors_in_directors_films_alphabetical(director_name)
