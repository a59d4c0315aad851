from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# Load environment variables from .env file
load_dotenv(find_dotenv())

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# DeBERTa is usually reachable; facebook/bart-large-mnli is the other known-good choice
DEFAULT_HF_ENDPOINT = (
    "https://router.huggingface.co/hf-inference/models/"
    "MoritzLaurer/DeBERTa-v3-base-mnli-fever-anli"
)
DEFAULT_GNEWS_URL = "https://gnews.io/api/v4/search"
MAX_ARTICLES_CAP = 100


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if not val:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"Invalid integer value for {name}: '{val}'")


def _env_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if not val:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"Invalid float value for {name}: '{val}'")


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints for the upstream services.

    Built once at startup and handed to the adapters; nothing below the
    service layer reads the environment directly.
    """
    hf_token: str = ""
    hf_endpoint: str = DEFAULT_HF_ENDPOINT
    gnews_api_key: str = ""
    gnews_url: str = DEFAULT_GNEWS_URL
    news_language: str = "de"
    max_articles: int = MAX_ARTICLES_CAP
    http_timeout: float = 30.0
    frontend_dir: Path = PROJECT_ROOT / "frontend" / "build"
    port: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            hf_token=os.getenv("HF_TOKEN", ""),
            hf_endpoint=os.getenv("HF_ENDPOINT", DEFAULT_HF_ENDPOINT),
            gnews_api_key=os.getenv("GNEWS_API_KEY", ""),
            gnews_url=os.getenv("GNEWS_URL", DEFAULT_GNEWS_URL),
            news_language=os.getenv("NEWS_LANGUAGE", "de"),
            max_articles=min(_env_int("NEWS_MAX_ARTICLES", MAX_ARTICLES_CAP), MAX_ARTICLES_CAP),
            http_timeout=_env_float("HTTP_TIMEOUT", 30.0),
            frontend_dir=Path(os.getenv("FRONTEND_DIR", str(PROJECT_ROOT / "frontend" / "build"))),
            port=_env_int("PORT", 5000),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
