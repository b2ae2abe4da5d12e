import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = "uy-baho-api"

# "simple" or "extended"; a ?variant= query parameter overrides it per request
ANALYSIS_VARIANT = os.getenv("ANALYSIS_VARIANT", "extended").lower()

# seconds of artificial "processing" latency per analysis
ANALYSIS_DELAY_MIN = float(os.getenv("ANALYSIS_DELAY_MIN", "1.5"))
ANALYSIS_DELAY_MAX = float(os.getenv("ANALYSIS_DELAY_MAX", "2.5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def scorer_seed() -> Optional[int]:
    seed = os.getenv("SCORER_SEED")
    return int(seed) if seed else None
