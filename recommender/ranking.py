"""
Ranking module.
Scores a movie against a preference profile using fixed integer weights.
"""

from typing import Iterable, Sequence

from .models import Movie, PreferenceProfile


class Ranker:
	"""
	Computes an additive relevance score from three preference dimensions:
	- directors: 5 points per matching director credit
	- actors: 3 points per matching actor credit
	- genres: 2 points per matching genre
	Matching is case-insensitive equality. Repeated entries on the movie side
	are counted once per occurrence.
	"""

	DIRECTOR_WEIGHT = 5
	ACTOR_WEIGHT = 3
	GENRE_WEIGHT = 2

	def score(self, movie: Movie, profile: PreferenceProfile) -> int:
		"""
		Return 5 x director matches + 3 x actor matches + 2 x genre matches.
		"""
		score = 0

		if profile.directors:
			score += self.DIRECTOR_WEIGHT * self._match_count(movie.directors, profile.directors)

		if profile.actors:
			score += self.ACTOR_WEIGHT * self._match_count(movie.actors, profile.actors)

		if profile.genres:
			score += self.GENRE_WEIGHT * self._match_count(movie.genres, profile.genres)

		return score

	@staticmethod
	def _match_count(values: Iterable[str], preferred: Sequence[str]) -> int:
		"""
		Count entries of `values` equal (ignoring case) to any preferred entry.
		Duplicates in `values` count every time; duplicates in `preferred` do not.
		"""
		preferred_lower = {p.lower() for p in preferred}
		return sum(1 for v in (values or ()) if v.lower() in preferred_lower)
