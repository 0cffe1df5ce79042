"""
Unit tests for Ranker: weights, case-insensitive matching, duplicate counting.
Run: python tests/test_ranking.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recommender.models import Movie, PreferenceProfile
from recommender.ranking import Ranker


INCEPTION = Movie(
    name="Inception",
    genres=["Action", "Sci-Fi", "Thriller"],
    actors=["Leonardo DiCaprio", "Elliot Page"],
    directors=["Christopher Nolan"],
)


def test_weights():
    ranker = Ranker()
    assert ranker.score(INCEPTION, PreferenceProfile(directors=("Christopher Nolan",))) == 5
    assert ranker.score(INCEPTION, PreferenceProfile(actors=("Elliot Page",))) == 3
    assert ranker.score(INCEPTION, PreferenceProfile(genres=("Thriller",))) == 2


def test_dimensions_add_up():
    profile = PreferenceProfile(
        directors=("Christopher Nolan",),
        actors=("Leonardo DiCaprio", "Elliot Page"),
        genres=("Sci-Fi", "Action", "Drama"),
    )
    # 5*1 + 3*2 + 2*2
    assert Ranker().score(INCEPTION, profile) == 15


def test_case_insensitive():
    profile = PreferenceProfile(directors=("CHRISTOPHER NOLAN",), genres=("sci-fi",))
    assert Ranker().score(INCEPTION, profile) == 7


def test_duplicates_on_movie_side_count_each_time():
    movie = Movie(name="Twice", directors=["A", "a"], genres=["Drama", "Drama"])
    profile = PreferenceProfile(directors=("A",), genres=("drama",))
    assert Ranker().score(movie, profile) == 5 * 2 + 2 * 2


def test_duplicates_on_preference_side_count_once():
    profile = PreferenceProfile(directors=("Christopher Nolan", "christopher nolan"))
    assert Ranker().score(INCEPTION, profile) == 5


def test_no_partial_matching():
    profile = PreferenceProfile(directors=("Nolan",), actors=("Leonardo",), genres=("Sci",))
    assert Ranker().score(INCEPTION, profile) == 0


def test_empty_movie_lists():
    movie = Movie(name="Blank")
    profile = PreferenceProfile(directors=("A",), actors=("B",), genres=("C",))
    assert Ranker().score(movie, profile) == 0


def test_empty_profile():
    assert Ranker().score(INCEPTION, PreferenceProfile()) == 0


def main():
    print("Running Ranker tests...")
    test_weights()
    test_dimensions_add_up()
    test_case_insensitive()
    test_duplicates_on_movie_side_count_each_time()
    test_duplicates_on_preference_side_count_once()
    test_no_partial_matching()
    test_empty_movie_lists()
    test_empty_profile()
    print("All Ranker tests passed!")


if __name__ == '__main__':
    main()
