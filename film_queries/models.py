"""
Data models for Film Queries.
Defines the immutable movie record every query operates on.
"""

# Import dataclass helpers to define a frozen "record-like" class without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __eq__, __hash__
from types import MappingProxyType  # read-only view over a dict
# Import typing helpers for precise and self-documenting types
from typing import FrozenSet, Iterable, Mapping  # immutable sets and read-only mappings


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie and all the information the queries need about it.
	Collection fields are sets: order carries no meaning and duplicates collapse.
	Any iterable passed for them is frozen on construction.
	"""
	title: str  # movie title, expected unique within a dataset (not enforced)
	release_year: int  # release year as a number (e.g., 1999)
	actors: FrozenSet[str] = frozenset()  # names of everyone in the cast
	directors: FrozenSet[str] = frozenset()  # names of everyone credited as director
	categories: FrozenSet[str] = frozenset()  # category names (e.g., "Drama")
	# character name -> actors who portrayed that character in this movie
	actors_by_character: Mapping[str, FrozenSet[str]] = field(default_factory=dict, hash=False)

	def __post_init__(self):
		# Frozen dataclasses block normal assignment, so go through object.__setattr__
		object.__setattr__(self, 'actors', _freeze_names(self.actors))
		object.__setattr__(self, 'directors', _freeze_names(self.directors))
		object.__setattr__(self, 'categories', _freeze_names(self.categories))
		object.__setattr__(self, 'actors_by_character', _freeze_characters(self.actors_by_character))


def _freeze_names(names: Iterable[str]) -> FrozenSet[str]:
	"""Freeze a collection of names; a bare string is one name, not a set of letters."""
	if isinstance(names, str):
		return frozenset((names,))
	return frozenset(names)


def _freeze_characters(actors_by_character: Mapping[str, Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
	"""Copy the character mapping into a read-only mapping of frozensets."""
	frozen = {character: _freeze_names(actors) for character, actors in actors_by_character.items()}
	return MappingProxyType(frozen)
