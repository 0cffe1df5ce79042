"""
Recommendation engine module.
Excludes already-seen titles, scores the rest of the catalog, and returns the top names.
"""

from typing import List, Mapping, Optional, Union  # type annotations for clarity

# Import project modules for data structures and scoring
from .models import Movie, PreferenceProfile, ScoredCandidate  # core data classes
from .ranking import Ranker  # fixed-weight scoring

# Import loguru for console logging
from loguru import logger  # simple structured logger

DEFAULT_LIMIT = 10  # maximum number of names returned per request

ProfileInput = Union[PreferenceProfile, Mapping, None]


class RecommendationEngine:
	"""
	High-level recommendation API over an injected, read-only catalog.
	Holds no per-request state, so one instance can serve concurrent callers.
	"""
	def __init__(self, catalog: Mapping[str, Movie], limit: int = DEFAULT_LIMIT):
		# The catalog is a precondition: nothing can be recommended without it
		if catalog is None:
			raise ValueError("catalog must not be None")
		# Never more than DEFAULT_LIMIT names per request
		if not 0 < limit <= DEFAULT_LIMIT:
			raise ValueError(f"limit must be between 1 and {DEFAULT_LIMIT}, got {limit}")
		self.catalog = catalog  # name -> Movie, never mutated here
		self.limit = limit  # truncation size
		self.ranker = Ranker()  # scorer instance
		logger.info(f"[Engine] Ready with {len(catalog)} movies (limit={limit})")

	def recommend(self, profile: ProfileInput) -> List[str]:
		"""Return up to `limit` movie names, highest score first."""
		candidates = self._rank(self._as_profile(profile))  # scored and sorted
		names = [c.name for c in candidates[:self.limit]]  # truncate and drop scores
		logger.info(f"[Engine] Returning top {len(names)} of {len(candidates)} scored movies")
		return names

	def _as_profile(self, profile: ProfileInput) -> PreferenceProfile:
		"""Accept a profile object, a raw input mapping, or nothing."""
		if isinstance(profile, PreferenceProfile):
			return profile
		return PreferenceProfile.from_mapping(profile)

	def _rank(self, profile: PreferenceProfile) -> List[ScoredCandidate]:
		"""Score every non-excluded movie and sort by score, descending."""
		if not profile.has_scoring_preferences():
			logger.debug("[Engine] No director, actor or genre preferences; nothing can score")

		# Excluded titles, lowercased
		excluded = {name.lower() for name in profile.excluded_names()}

		candidates: List[ScoredCandidate] = []  # accumulator
		for movie in self.catalog.values():  # catalog iteration order
			if movie.name.lower() in excluded:
				logger.debug(f"[Engine] Excluded already rated movie | movie={movie.name}")
				continue

			score = self.ranker.score(movie, profile)
			if score > 0:  # zero-score movies never appear
				logger.debug(f"[Engine] Candidate kept | movie={movie.name} | score={score}")
				candidates.append(ScoredCandidate(movie.name, score))

		# list.sort is stable: equal scores keep catalog order
		candidates.sort(key=lambda c: c.score, reverse=True)
		return candidates


def recommend(
	profile: ProfileInput,
	catalog: Mapping[str, Movie],
	limit: Optional[int] = None,
) -> List[str]:
	"""Convenience entry point: build an engine for `catalog` and run one request."""
	engine = RecommendationEngine(catalog, limit=limit if limit is not None else DEFAULT_LIMIT)
	return engine.recommend(profile)
