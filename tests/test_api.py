"""
Tests for the FastAPI service using an in-memory catalog.
Run: python tests/test_api.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient

import api
from recommender.models import Movie
from recommender.recommendation_engine import RecommendationEngine

# No context manager: the startup hook (which reads the catalog file) stays off
client = TestClient(api.app)

CATALOG = {
    "Inception": Movie(name="Inception", genres=["Sci-Fi"], actors=["Leonardo DiCaprio"], directors=["Christopher Nolan"]),
    "Interstellar": Movie(name="Interstellar", genres=["Drama", "Sci-Fi"], actors=["Anne Hathaway"], directors=["Christopher Nolan"]),
    "Arrival": Movie(name="Arrival", genres=["Drama", "Sci-Fi"], actors=["Amy Adams"], directors=["Denis Villeneuve"]),
}


def use_engine(engine):
    api.ENGINE = engine


def test_health():
    use_engine(RecommendationEngine(CATALOG))
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["engine_ready"] is True
    assert body["catalog_size"] == 3


def test_recommendations():
    use_engine(RecommendationEngine(CATALOG))
    resp = client.post("/recommendations", json={"directors": ["christopher nolan"], "genres": ["drama"]})
    assert resp.status_code == 200
    # Interstellar 5+2, Inception 5, Arrival 2
    assert resp.json()["recommendations"] == ["Interstellar", "Inception", "Arrival"]


def test_recommendations_excludes_rated_movies():
    use_engine(RecommendationEngine(CATALOG))
    resp = client.post(
        "/recommendations",
        json={"likedMovies": ["inception"], "dislikedMovies": ["Arrival"], "genres": ["Sci-Fi"]},
    )
    assert resp.json()["recommendations"] == ["Interstellar"]


def test_recommendations_without_preferences_is_empty():
    use_engine(RecommendationEngine(CATALOG))
    resp = client.post("/recommendations", json={"likedMovies": ["Arrival"], "somethingElse": 1})
    assert resp.status_code == 200
    assert resp.json()["recommendations"] == []


def test_recommendations_rejects_wrong_types():
    use_engine(RecommendationEngine(CATALOG))
    resp = client.post("/recommendations", json={"genres": "Drama"})
    assert resp.status_code == 422


def test_vocabulary():
    use_engine(RecommendationEngine(CATALOG))
    body = client.get("/vocabulary").json()
    assert body["genres"] == ["Drama", "Sci-Fi"]
    assert body["directors"] == ["Christopher Nolan", "Denis Villeneuve"]
    assert "Amy Adams" in body["actors"]


def test_engine_not_ready():
    use_engine(None)
    resp = client.post("/recommendations", json={"genres": ["Drama"]})
    assert resp.status_code == 200
    assert resp.json()["recommendations"] == []
    assert client.get("/health").json()["engine_ready"] is False


def main():
    print("Running API tests...")
    for name, fn in list(globals().items()):
        if name.startswith('test_') and callable(fn):
            fn()
            print(f" - {name} ok")
    print("All API tests passed!")


if __name__ == '__main__':
    main()
