import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = ROOT / "data"

load_dotenv(dotenv_path=ROOT / ".env", override=False)

DATA_PATH = Path(os.getenv("FILM_QUERIES_DATA", str(DATA_DIR / "movies.jsonl")))
API_URL = os.getenv("FILM_QUERIES_API_URL", "http://localhost:8000")
