"""
Data models for the Movie Recommender.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Tuple  # collection types


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single catalog entry.
	The name is the catalog key and is compared case-insensitively.
	"""
	name: str  # display title, unique within the catalog
	genres: List[str] = field(default_factory=list)  # e.g., ["Drama", "War"]
	actors: List[str] = field(default_factory=list)  # credited stars in billing order
	directors: List[str] = field(default_factory=list)  # usually one, sometimes more


@dataclass(frozen=True)
class PreferenceProfile:
	"""
	One user's stated preferences for a single recommendation request.
	Every field is optional; a missing field behaves like an empty one.
	"""
	liked_movies: FrozenSet[str] = frozenset()  # titles the user already liked
	disliked_movies: FrozenSet[str] = frozenset()  # titles the user does not want
	genres: Tuple[str, ...] = ()  # preferred genres
	actors: Tuple[str, ...] = ()  # preferred actors
	directors: Tuple[str, ...] = ()  # preferred directors

	@classmethod
	def from_mapping(cls, data: Optional[Mapping[str, Optional[Iterable[str]]]]) -> 'PreferenceProfile':
		"""
		Build a profile from the external input mapping.
		Unknown keys are ignored; missing keys and None values become empty.
		"""
		if not data:  # None or {}
			return cls()
		return cls(
			liked_movies=frozenset(data.get('likedMovies') or ()),
			disliked_movies=frozenset(data.get('dislikedMovies') or ()),
			genres=tuple(data.get('genres') or ()),
			actors=tuple(data.get('actors') or ()),
			directors=tuple(data.get('directors') or ()),
		)

	def excluded_names(self) -> FrozenSet[str]:
		"""Union of liked and disliked titles; these are never recommended."""
		return self.liked_movies | self.disliked_movies

	def has_scoring_preferences(self) -> bool:
		"""True when at least one of directors, actors or genres is given."""
		return bool(self.directors or self.actors or self.genres)


class ScoredCandidate(NamedTuple):
	"""Movie name paired with its score during one ranking pass."""
	name: str
	score: int
