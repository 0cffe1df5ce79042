"""
Print recommendations for one preference profile.

This script:
1) Loads the catalog (data/movies.jsonl or --catalog)
2) Reads a profile JSON file with likedMovies/dislikedMovies/genres/actors/directors
3) Ranks the catalog and prints the top titles

Usage:
    python -m scripts.recommend --profile profile.json

Example profile.json:
    {"likedMovies": ["Inception"], "directors": ["Christopher Nolan"], "genres": ["Sci-Fi"]}
"""

import argparse  # command-line options
import json  # profile file
import sys  # exit codes
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from recommender.config import configure_logging, load_settings  # env-driven defaults
from recommender.data_loader import DataLoader  # catalog ingestion
from recommender.models import PreferenceProfile  # profile record
from recommender.recommendation_engine import RecommendationEngine  # ranking


def parse_args(argv=None):
	settings = load_settings()
	parser = argparse.ArgumentParser(description="Recommend movies from a preference profile.")
	parser.add_argument('--catalog', type=Path, default=settings.catalog_path, help="JSONL movie catalog")
	parser.add_argument('--profile', type=Path, required=True, help="JSON file with the user's preferences")
	parser.add_argument('--top-n', type=int, default=settings.top_n, help="maximum number of titles")
	parser.add_argument('--log-level', default=settings.log_level, help="loguru level, e.g. DEBUG")
	return parser.parse_args(argv)


def load_profile(path: Path) -> PreferenceProfile:
	"""Read a profile JSON object from disk."""
	if not path.exists():
		raise FileNotFoundError(f"Profile file not found: {path}")
	with open(path, 'r', encoding='utf-8') as f:
		data = json.load(f)
	if not isinstance(data, dict):
		raise ValueError(f"Profile file must contain a JSON object: {path}")
	return PreferenceProfile.from_mapping(data)


def main(argv=None) -> int:
	args = parse_args(argv)
	configure_logging(args.log_level.upper())

	# 1) Load catalog
	catalog = DataLoader().load_catalog_from_jsonl(str(args.catalog))

	# 2) Load profile
	profile = load_profile(args.profile)
	logger.info(f"[CLI] Profile loaded from {args.profile}")

	# 3) Rank and print
	names = RecommendationEngine(catalog, limit=args.top_n).recommend(profile)
	if not names:
		print("No recommendations. Add a genre, actor or director you like.")
		return 0
	for i, name in enumerate(names, 1):
		print(f"{i:2d}. {name}")
	return 0


if __name__ == '__main__':
	sys.exit(main())
