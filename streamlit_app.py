"""
Streamlit UI for Film Queries.
Calls the FastAPI server (default http://localhost:8000) to run the queries,
or runs locally by loading data/movies.jsonl like the API does.

Run API (optional):   uvicorn film_queries.api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Callable, Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from film_queries import config  # default paths and API URL
from film_queries.api import to_movie_out  # same movie shape the API returns
from film_queries.data_loader import DataLoader  # load movies from file
from film_queries.query_engine import QueryEngine  # run the queries

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Film Queries", layout="wide")  # wide layout

# Main page title
st.title("🎬 Film Queries")  # friendly header


# Cache the local engine so the dataset is only read once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[QueryEngine]:
	"""Create a local QueryEngine over the configured dataset."""
	try:
		movies = DataLoader().load_movies_from_jsonl(str(config.DATA_PATH))  # read dataset
		return QueryEngine(movies)  # success
	except FileNotFoundError as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local query engine: {e}")
		return None  # signal failure


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", config.API_URL)  # where the API lives
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[QueryEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Initializing local engine..."):
		local_engine = init_local_engine()
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")  # success note
		else:
			st.sidebar.error("Local engine failed to initialize.")  # error note


def fetch(path: str, run_local: Callable[[QueryEngine], object]):
	"""
	Run one query and return a JSON-shaped payload.
	Local mode converts engine results the way the API does; API mode calls `path`.
	"""
	if local_engine is not None:
		return run_local(local_engine)
	resp = requests.get(f"{api_url}{path}", timeout=30)
	resp.raise_for_status()  # raise error if server responded with an error code
	return resp.json()


def movie_rows(movies):
	"""Flatten movie payloads into table rows."""
	return [
		{
			"Title": m["title"],
			"Year": m["release_year"],
			"Directors": ", ".join(m["directors"]),
			"Actors": ", ".join(m["actors"]),
			"Categories": ", ".join(m["categories"]),
		}
		for m in movies
	]


def show(render: Callable[[], None]):
	"""Render a query result, turning request failures into UI errors."""
	try:
		render()
	except requests.RequestException as e:  # network/API errors
		st.error(f"API request failed: {e}")  # show human-friendly message


tabs = st.tabs([
	"By year",
	"All actors",
	"By actor",
	"Self-portrayals",
	"Director's cast",
	"Acting directors",
	"Year by category",
])

with tabs[0]:
	year = st.number_input("Release year", min_value=0, max_value=3000, value=1999, step=1, key="year_list")
	if st.button("Find movies", key="btn_year"):
		def render():
			movies = fetch(
				f"/movies/year/{int(year)}",
				lambda e: [to_movie_out(m).model_dump() for m in e.movies_by_year(int(year))],
			)
			st.success(f"{len(movies)} movies released in {int(year)}")
			st.dataframe(movie_rows(movies), width='stretch')
		show(render)

with tabs[1]:
	if st.button("List actors", key="btn_actors"):
		def render():
			actors = fetch("/actors", lambda e: e.all_actors_alphabetical())
			st.success(f"{len(actors)} actors")
			st.write(actors)
		show(render)

with tabs[2]:
	actor = st.text_input("Actor name", placeholder="e.g., Clint Eastwood", key="actor_name")
	if st.button("Find titles", key="btn_actor") and actor.strip():
		def render():
			by_actor = fetch(
				f"/actors/{requests.utils.quote(actor, safe='')}/movies",
				lambda e: {name: sorted(titles) for name, titles in e.movies_by_actor(actor).items()},
			)
			for name, titles in by_actor.items():
				st.subheader(name)
				if titles:
					st.write(titles)
				else:
					st.info("No movies found for this actor.")
		show(render)

with tabs[3]:
	if st.button("Find self-portrayals", key="btn_self"):
		def render():
			actors = fetch("/actors/self-portrayals", lambda e: sorted(e.actors_that_interpret_themselves()))
			st.success(f"{len(actors)} actors played themselves")
			st.write(actors)
		show(render)

with tabs[4]:
	director = st.text_input("Director name", placeholder="e.g., Woody Allen", key="director_name")
	if st.button("Find cast", key="btn_director") and director.strip():
		def render():
			actors = fetch(
				f"/directors/{requests.utils.quote(director, safe='')}/actors",
				lambda e: e.actors_in_directors_films_alphabetical(director),
			)
			st.success(f"{len(actors)} actors worked with {director}")
			st.write(actors)
		show(render)

with tabs[5]:
	if st.button("Find movies", key="btn_acting"):
		def render():
			movies = fetch(
				"/movies/acting-directors",
				lambda e: [to_movie_out(m).model_dump() for m in e.movies_with_acting_directors_most_recent_first()],
			)
			st.success(f"{len(movies)} movies with an acting director")
			st.dataframe(movie_rows(movies), width='stretch')
		show(render)

with tabs[6]:
	group_year = st.number_input("Release year", min_value=0, max_value=3000, value=1999, step=1, key="year_group")
	if st.button("Group by category", key="btn_group"):
		def render():
			grouped = fetch(
				f"/movies/year/{int(group_year)}/categories",
				lambda e: {
					category: [to_movie_out(m).model_dump() for m in sorted(movies, key=lambda m: m.title)]
					for category, movies in sorted(e.movies_by_year_grouped_by_category(int(group_year)).items())
				},
			)
			if not grouped:
				st.info(f"No movies released in {int(group_year)}.")
			for category, movies in grouped.items():
				st.subheader(f"{category} ({len(movies)})")
				st.dataframe(movie_rows(movies), width='stretch')
		show(render)

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn film_queries.api:app --reload is running)")  # mode label
