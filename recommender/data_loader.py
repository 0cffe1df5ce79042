"""
Data loading module.
Loads the movie catalog from a JSON Lines file into a name -> Movie mapping.
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
	Handles loading and light cleaning of catalog records.
	Values keep their original casing; matching is case-insensitive downstream.
	"""

	# Alternate source field names -> canonical Movie field
	FIELD_ALIASES = {
		'title': 'name',  # some exports use "title" for the movie name
		'stars': 'actors',  # IMDb-style "stars" column
		'director': 'directors',  # single director as a plain string
	}

	def load_catalog_from_jsonl(self, filepath: str) -> Dict[str, Movie]:
		"""
		Load a catalog from a JSON Lines (JSONL) file where each line is one movie.
		Returns a dict keyed by movie name, in file order.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie catalog file not found: {filepath}")

		logger.info(f"[DataLoader] Loading catalog from {filepath}...")  # log action

		# Read line-by-line to handle large catalogs efficiently
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # tolerate blank lines
					continue
				try:
					data = json.loads(line)  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue  # move on
				if not isinstance(data, dict):
					logger.warning(f"[DataLoader] Skipping non-object record at line {line_num}")
					continue
				movie = self._parse_movie_data(data)  # convert dict -> Movie
				if not movie.name:
					logger.warning(f"[DataLoader] Skipping record without a name at line {line_num}")
					continue
				movies.append(movie)  # collect

		catalog = self.build_catalog(movies)  # key by name
		logger.info(f"[DataLoader] Successfully loaded {len(catalog)} movies.")  # summary
		return catalog  # return mapping

	def build_catalog(self, movies: Iterable[Movie]) -> Dict[str, Movie]:
		"""
		Key movies by name. Names are unique ignoring case: the first record wins
		and later collisions are skipped with a warning.
		"""
		catalog: Dict[str, Movie] = {}  # insertion order = file order
		seen: Dict[str, str] = {}  # lowercase name -> stored name
		for movie in movies:
			key = movie.name.lower()
			if key in seen:
				logger.warning(f"[DataLoader] Duplicate movie name '{movie.name}' (already have '{seen[key]}'); keeping the first")
				continue
			seen[key] = movie.name
			catalog[movie.name] = movie
		return catalog

	def _parse_movie_data(self, data: Dict) -> Movie:
		"""
		Convert a raw dictionary (from file) into a Movie object.
		Accepts list or comma-separated string values for the list fields.
		"""
		# Fold alternate field names into the canonical ones (canonical wins if both exist)
		fields = dict(data)
		for alias, canonical in self.FIELD_ALIASES.items():
			if alias in fields and canonical not in fields:
				fields[canonical] = fields[alias]

		return Movie(
			name=str(fields.get('name') or '').strip(),  # trimmed title
			genres=self._parse_comma_separated(fields.get('genres')),  # list of genres
			actors=self._parse_comma_separated(fields.get('actors')),  # list of actors
			directors=self._parse_comma_separated(fields.get('directors')),  # list of directors
		)

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings. Duplicates are kept.
		"""
		if value is None:  # missing field
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item and str(item).strip()]  # clean each
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		return []  # any other type becomes empty

	def get_all_actors(self, catalog: Dict[str, Movie]) -> List[str]:
		"""Return a sorted list of all unique actor names in the catalog."""
		actors = set()  # collect unique actors
		for movie in catalog.values():  # iterate catalog
			actors.update(movie.actors)  # add movie actors
		return sorted(actors)  # sorted for stable display

	def get_all_directors(self, catalog: Dict[str, Movie]) -> List[str]:
		"""Return a sorted list of all unique director names in the catalog."""
		directors = set()  # unique directors
		for movie in catalog.values():  # iterate
			directors.update(movie.directors)
		return sorted(directors)  # sorted output

	def get_all_genres(self, catalog: Dict[str, Movie]) -> List[str]:
		"""Return a sorted list of all unique genres in the catalog."""
		genres = set()  # unique genres
		for movie in catalog.values():  # iterate
			genres.update(movie.genres)
		return sorted(genres)  # sorted output
