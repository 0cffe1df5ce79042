"""
Streamlit UI for the Movie Recommender.
Calls the local FastAPI server at http://localhost:8000 to fetch recommendations,
or runs locally by loading the catalog file like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import List, Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from recommender.config import load_settings  # catalog location
from recommender.data_loader import DataLoader  # load movies from file
from recommender.recommendation_engine import RecommendationEngine  # scoring + ranking

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Recommender", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Recommender")  # friendly header


# Cache the local engine so we only load the catalog once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[RecommendationEngine]:
	"""Create a local RecommendationEngine from the configured catalog."""
	try:
		settings = load_settings()  # env-driven paths
		catalog = DataLoader().load_catalog_from_jsonl(str(settings.catalog_path))  # read dataset
		return RecommendationEngine(catalog, limit=settings.top_n)  # success
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local recommendation engine: {e}")
		return None  # signal failure


def split_names(text: str) -> List[str]:
	"""Split a comma- or newline-separated text box into clean names."""
	parts = text.replace('\n', ',').split(',')  # one separator
	return [p.strip() for p in parts if p.strip()]  # drop blanks


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[RecommendationEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Loading catalog..."):
		local_engine = init_local_engine()  # build engine
		if local_engine is not None:
			st.sidebar.success(f"Local engine ready ({len(local_engine.catalog)} movies).")  # success note
		else:
			st.sidebar.error("Local engine failed to initialize.")  # error note

# Preference inputs: seen movies on the left, tastes on the right
col1, col2 = st.columns(2)  # two equal columns
with col1:
	liked = st.text_area("Movies you liked", placeholder="Inception, The Matrix")  # excluded from results
	disliked = st.text_area("Movies you disliked", placeholder="Cats")  # excluded from results
with col2:
	genres = st.text_input("Favourite genres", placeholder="Sci-Fi, Thriller")  # 2 points per match
	actors = st.text_input("Favourite actors", placeholder="Leonardo DiCaprio")  # 3 points per match
	directors = st.text_input("Favourite directors", placeholder="Christopher Nolan")  # 5 points per match

recommend_btn = st.button("Recommend", type="primary")  # triggers a request
st.caption("Directors weigh most, then actors, then genres. Movies you already rated are never suggested.")

if recommend_btn:
	# Same keys the API and the engine accept
	payload = {
		"likedMovies": split_names(liked),
		"dislikedMovies": split_names(disliked),
		"genres": split_names(genres),
		"actors": split_names(actors),
		"directors": split_names(directors),
	}
	if not (payload["genres"] or payload["actors"] or payload["directors"]):
		st.warning("Add at least one genre, actor or director; otherwise nothing can be recommended.")

	with st.spinner("Ranking..."):
		try:
			if local_engine is not None:
				# Local mode: run the ranking inside this process
				names = local_engine.recommend(payload)
				elapsed_ms = 0.0  # we skip timing for local UI simplicity
			else:
				# API mode: call the server and let it do the ranking
				resp = requests.post(f"{api_url}/recommendations", json=payload, timeout=30)
				resp.raise_for_status()  # raise error if server responded with an error code
				body = resp.json()  # parse JSON returned by API
				names = body.get("recommendations", [])
				elapsed_ms = body.get("elapsed_ms", 0.0)

			st.success(f"Found {len(names)} recommendations in {elapsed_ms} ms")
			st.divider()  # visual separator
			for i, name in enumerate(names, start=1):
				st.subheader(f"{i}. {name}")  # ranked title

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
