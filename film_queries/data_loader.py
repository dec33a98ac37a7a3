"""
Data loading module.
Builds immutable Movie records from JSON Lines files or in-memory dictionaries.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import Dict, Iterable, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading movie records.
	Names are only trimmed, never case-normalized: every query compares strings exactly.
	"""

	# Accepted spellings for each field, checked in order
	YEAR_KEYS = ('release_year', 'releaseYear', 'year')
	CATEGORY_KEYS = ('categories', 'genres')
	CHARACTER_KEYS = ('actors_by_character', 'actorsByCharacter')

	def load_movies_from_jsonl(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Lines that fail to parse are logged and skipped. Returns a list of Movie objects.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Read raw bytes line-by-line so a badly encoded line only costs that line
		with open(filepath, 'rb') as f:
			for line_num, raw in enumerate(f, 1):
				if not raw.strip():  # tolerate blank lines
					continue
				try:
					line = raw.decode('utf-8')  # UnicodeDecodeError is a ValueError, handled below
					data = json.loads(line)  # parse JSON object per line
					movies.append(self._parse_movie_data(data))  # convert dict -> Movie
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
				except (ValueError, TypeError, AttributeError) as e:
					logger.warning(f"[DataLoader] Error parsing movie at line {line_num}: {e}")  # unusable record

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def parse_movies(self, records: Iterable[Dict]) -> List[Movie]:
		"""Convert already-decoded dictionaries into Movie objects."""
		return [self._parse_movie_data(data) for data in records]

	def _parse_movie_data(self, data: Dict) -> Movie:
		"""
		Convert a raw dictionary into a Movie.
		Collection fields may arrive as lists or comma-separated strings.
		"""
		return Movie(
			title=str(data.get('title') or '').strip(),
			release_year=self._parse_year(self._first_present(data, self.YEAR_KEYS)),
			actors=self._parse_comma_separated(data.get('actors')),
			directors=self._parse_comma_separated(data.get('directors')),
			categories=self._parse_comma_separated(self._first_present(data, self.CATEGORY_KEYS)),
			actors_by_character=self._parse_characters(self._first_present(data, self.CHARACTER_KEYS)),
		)

	def _first_present(self, data: Dict, keys):
		"""Return the value of the first key found in `data`, or None."""
		for key in keys:
			if data.get(key) is not None:
				return data[key]
		return None

	def _parse_year(self, value) -> int:
		# Missing year becomes 0; anything that is not a whole number raises and the line is skipped
		if value is None:
			return 0
		if isinstance(value, bool):
			raise TypeError(f"release year must be a number, got {value!r}")
		if isinstance(value, float) and not value.is_integer():
			raise ValueError(f"release year must be a whole number, got {value!r}")
		return int(value) if value != '' else 0

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item and str(item).strip()]  # clean each
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		return []  # any other type becomes empty

	def _parse_characters(self, value) -> Dict[str, List[str]]:
		"""Parse the character -> actors object; a missing field yields an empty mapping."""
		if value is None:
			return {}
		if not isinstance(value, dict):
			raise TypeError(f"actors_by_character must be an object, got {type(value).__name__}")
		return {
			str(character).strip(): self._parse_comma_separated(actors)
			for character, actors in value.items()
		}
