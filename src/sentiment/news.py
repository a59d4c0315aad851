from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as SchemaError

from src.core.config import MAX_ARTICLES_CAP, Settings
from src.core.errors import UpstreamError
from src.core.logger import get_logger
from src.sentiment.models import Article

logger = get_logger("news")

SORT_RELEVANCE = "relevance"
SORT_PUBLISHED = "publishedAt"
RELEVANCE_WINDOW_DAYS = 3 * 365


def relevance_from_date(now: datetime) -> str:
    """Lower bound for the relevance pass: three years back, day precision."""
    return (now - timedelta(days=RELEVANCE_WINDOW_DAYS)).date().isoformat()


class NewsSearchClient:
    """Thin wrapper around the GNews ``/search`` endpoint."""

    def __init__(self, settings: Settings):
        self.api_key = settings.gnews_api_key
        self.base_url = settings.gnews_url
        self.language = settings.news_language
        self.max_articles = settings.max_articles
        self.timeout = settings.http_timeout

    async def search(
        self,
        topic: str,
        sort: str = SORT_RELEVANCE,
        from_date: Optional[str] = None,
        max_count: Optional[int] = None,
    ) -> List[Article]:
        if sort not in (SORT_RELEVANCE, SORT_PUBLISHED):
            raise ValueError(f"Unsupported sort order: {sort}")

        limit = min(max_count or self.max_articles, MAX_ARTICLES_CAP)
        params: Dict[str, Any] = {
            "q": topic,
            "lang": self.language,
            "max": str(limit),
            "sort": sort,
        }
        if from_date:
            params["from"] = from_date
        params["token"] = self.api_key

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(self.base_url, params=params)
            if not r.is_success:
                logger.warning("News API returned %s for %r (sort=%s)", r.status_code, topic, sort)
                raise UpstreamError(f"News API {r.status_code}", upstream_status=r.status_code)
            try:
                data = r.json()
            except ValueError:
                raise UpstreamError("News API returned a non-JSON body", upstream_status=r.status_code)

        raw = (data.get("articles") if isinstance(data, dict) else None) or []
        try:
            articles = [Article.model_validate(a) for a in raw]
        except SchemaError as e:
            raise UpstreamError(f"News API returned a malformed article: {e}")
        logger.info("Got %d articles for %r (sort=%s)", len(articles), topic, sort)
        return articles
