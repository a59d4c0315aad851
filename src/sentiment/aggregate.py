"""Request-scoped sentiment aggregation: per-month buckets and the recent pulse."""
from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional

from src.core.utils import days_before, month_key, pct, to_utc
from src.sentiment.models import (
    SENTIMENTS,
    Article,
    RecentPulse,
    ScoredArticle,
    SentimentPercentages,
    SentimentResult,
)

PULSE_WINDOW_DAYS = 30


def _empty_counts() -> Dict[str, int]:
    return {"positive": 0, "neutral": 0, "negative": 0, "total": 0}


def _percentages(counts: Dict[str, int], total: int) -> SentimentPercentages:
    return SentimentPercentages(**{s: pct(counts[s], total) for s in SENTIMENTS})


def dominant_sentiment(counts: Dict[str, int]) -> Optional[str]:
    """Root with the greatest count; earlier roots win ties. None when nothing was counted."""
    best = None
    for s in SENTIMENTS:
        if counts[s] and (best is None or counts[s] > counts[best]):
            best = s
    return best


class MonthlyAggregator:
    def __init__(self):
        self.buckets: Dict[str, Dict[str, int]] = {}
        self.results: List[ScoredArticle] = []

    def record(self, article: Article, result: SentimentResult) -> None:
        if not article.text.strip():
            return
        key = month_key(article.published_at)
        bucket = self.buckets.setdefault(key, _empty_counts())
        bucket[result.sentiment] += 1
        bucket["total"] += 1
        self.results.append(ScoredArticle(article=article, analysis=result))

    def percentages(self) -> Dict[str, SentimentPercentages]:
        return {m: _percentages(c, c["total"]) for m, c in self.buckets.items()}


class RecentPulseCounter:
    """Counts root sentiments of articles published at or after ``cutoff``."""

    def __init__(self, now: datetime, window_days: int = PULSE_WINDOW_DAYS):
        self.window_days = window_days
        self.cutoff = days_before(now, window_days)
        self.counts = {s: 0 for s in SENTIMENTS}

    def record(self, article: Article, result: SentimentResult) -> None:
        if not article.text.strip():
            return
        # undated articles cannot fall inside the window
        if article.published_at and to_utc(article.published_at) >= self.cutoff:
            self.counts[result.sentiment] += 1

    def summary(self) -> RecentPulse:
        total = sum(self.counts.values())
        return RecentPulse(
            **self.counts,
            percentages=_percentages(self.counts, total),
            total=total,
            dominant_sentiment=dominant_sentiment(self.counts),
            window_days=self.window_days,
        )
