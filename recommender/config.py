"""
Runtime settings for the API, UI and CLI.
Values come from environment variables with local-development defaults.
"""

import os  # environment lookups
import sys  # stderr sink
from dataclasses import dataclass  # immutable settings record
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logger

from .recommendation_engine import DEFAULT_LIMIT


@dataclass(frozen=True)
class Settings:
	"""
	Configuration shared by every entry point.
	"""

	catalog_path: Path = Path('data/movies.jsonl')  # JSONL catalog loaded at startup
	top_n: int = DEFAULT_LIMIT  # recommendations per request
	log_level: str = 'INFO'  # loguru sink level


def load_settings() -> Settings:
	"""Build Settings from MOVIE_CATALOG_PATH, RECOMMENDER_TOP_N and RECOMMENDER_LOG_LEVEL."""
	defaults = Settings()
	return Settings(
		catalog_path=Path(os.getenv('MOVIE_CATALOG_PATH', str(defaults.catalog_path))),
		top_n=int(os.getenv('RECOMMENDER_TOP_N', defaults.top_n)),
		log_level=os.getenv('RECOMMENDER_LOG_LEVEL', defaults.log_level).upper(),
	)


def configure_logging(level: str) -> None:
	"""Replace loguru's default sink with a stderr sink at `level`."""
	logger.remove()
	logger.add(sys.stderr, level=level)
