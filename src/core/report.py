from __future__ import annotations
from datetime import datetime, timezone
from typing import Callable, Optional

from src.core.errors import NotFoundError, ValidationError
from src.core.logger import get_logger
from src.sentiment.aggregate import MonthlyAggregator, RecentPulseCounter
from src.sentiment.classifier import ZeroShotClassifier
from src.sentiment.models import Report
from src.sentiment.news import (
    SORT_PUBLISHED,
    SORT_RELEVANCE,
    NewsSearchClient,
    relevance_from_date,
)

logger = get_logger("report")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReportAssembler:
    """Builds the media-sentiment report for a topic.

    Two passes run back to back, each classifying one article at a time:
    relevance-sorted articles from the last three years feed the monthly
    buckets, then the newest articles feed the 30-day pulse.
    """

    def __init__(
        self,
        news: NewsSearchClient,
        classifier: ZeroShotClassifier,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.news = news
        self.classifier = classifier
        self.clock = clock or _utcnow

    async def build(self, topic: Optional[str]) -> Report:
        topic = (topic or "").strip()
        if not topic:
            raise ValidationError("Missing topic")
        now = self.clock()

        relevant = await self.news.search(
            topic, sort=SORT_RELEVANCE, from_date=relevance_from_date(now)
        )
        if not relevant:
            raise NotFoundError("No articles found")

        monthly = MonthlyAggregator()
        for art in relevant:
            content = art.text
            if not content.strip():
                continue
            monthly.record(art, await self.classifier.classify(topic, content))
        logger.info("Relevance pass for %r: %d of %d articles scored", topic, len(monthly.results), len(relevant))

        latest = await self.news.search(topic, sort=SORT_PUBLISHED)
        pulse = RecentPulseCounter(now)
        for art in latest:
            content = art.text
            if not content.strip():
                continue
            # classified before the window check; out-of-window results are discarded
            pulse.record(art, await self.classifier.classify(topic, content))
        summary = pulse.summary()
        logger.info("Recency pass for %r: %d articles in the last %d days", topic, summary.total, summary.window_days)

        return Report(
            summary_recent=summary,
            monthly_percentages=monthly.percentages(),
            results=monthly.results,
            most_recent_article=monthly.results[0] if monthly.results else None,
        )
