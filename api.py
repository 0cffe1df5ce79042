"""
FastAPI server exposing the movie recommendation API.
Endpoints:
- GET /health: basic health check
- GET /vocabulary: known genres, actors and directors in the catalog
- POST /recommendations: ranked movie names for a preference profile

Startup loads the catalog from MOVIE_CATALOG_PATH (default data/movies.jsonl).
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
from fastapi import FastAPI  # FastAPI primitives
from pydantic import BaseModel, ConfigDict, Field  # schema definitions

# Import our internal modules for settings, data loading and recommendation
from recommender.config import configure_logging, load_settings  # env-driven settings
from recommender.data_loader import DataLoader  # loads the movie catalog
from recommender.models import PreferenceProfile  # request -> profile
from recommender.recommendation_engine import RecommendationEngine  # core ranking

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Recommender API", version="1.0.0")  # web app

# Globals that hold the engine, the loader used for it, and measured startup time
ENGINE: Optional[RecommendationEngine] = None  # will point to the initialized engine
LOADER = DataLoader()  # shared loader (also answers vocabulary queries)
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Request body: the external preference mapping, camelCase keys as sent by clients
class RecommendationRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra='ignore')  # unknown keys ignored

	liked_movies: Optional[List[str]] = Field(default=None, alias='likedMovies')  # already seen, liked
	disliked_movies: Optional[List[str]] = Field(default=None, alias='dislikedMovies')  # already seen, disliked
	genres: Optional[List[str]] = None  # preferred genres
	actors: Optional[List[str]] = None  # preferred actors
	directors: Optional[List[str]] = None  # preferred directors

	def to_profile(self) -> PreferenceProfile:
		"""Convert to the engine's profile via the same mapping contract as every caller."""
		return PreferenceProfile.from_mapping(self.model_dump(by_alias=True))


# Response payload for a recommendation request
class RecommendationResponse(BaseModel):
	recommendations: List[str]  # ranked movie names, best first
	elapsed_ms: float  # server-side ranking time in ms


# Vocabulary payload so clients can offer pick lists
class VocabularyResponse(BaseModel):
	genres: List[str]
	actors: List[str]
	directors: List[str]


# FastAPI startup hook to initialize the engine once
@app.on_event("startup")
async def startup_event():
	"""Load the catalog and build the engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = load_settings()  # read env
	configure_logging(settings.log_level)  # set sink level
	logger.info("[API] Startup: loading catalog and initializing engine...")  # log intent

	catalog = LOADER.load_catalog_from_jsonl(str(settings.catalog_path))  # read dataset
	ENGINE = RecommendationEngine(catalog, limit=settings.top_n)  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(catalog)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"catalog_size": len(ENGINE.catalog) if ENGINE is not None else 0,  # movies available
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/vocabulary", response_model=VocabularyResponse)
async def vocabulary():
	"""List every genre, actor and director present in the loaded catalog."""
	if ENGINE is None:
		logger.warning("[API] Vocabulary requested but engine not initialized")
		return VocabularyResponse(genres=[], actors=[], directors=[])
	return VocabularyResponse(
		genres=LOADER.get_all_genres(ENGINE.catalog),
		actors=LOADER.get_all_actors(ENGINE.catalog),
		directors=LOADER.get_all_directors(ENGINE.catalog),
	)


# Main recommendation endpoint (sync: pure CPU work runs in the threadpool)
@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(request: RecommendationRequest):
	"""Rank the catalog for one preference profile."""
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Recommendations requested but engine not initialized")  # guard log
		return RecommendationResponse(recommendations=[], elapsed_ms=0.0)  # return empty

	start = time.time()  # start timer
	profile = request.to_profile()  # mapping -> profile
	logger.debug(f"[API] /recommendations profile={profile}")  # debug log of input

	names = ENGINE.recommend(profile)  # run ranking
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /recommendations served {len(names)} movies in {elapsed_ms:.2f} ms")  # summary

	return RecommendationResponse(recommendations=names, elapsed_ms=round(elapsed_ms, 2))
