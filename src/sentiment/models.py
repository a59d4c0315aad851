from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    model_serializer,
    model_validator,
)

# Root sentiments in the fixed order used for candidate labels and tie-breaking
SENTIMENTS = ("positive", "neutral", "negative")


class Article(BaseModel):
    """A search hit as returned by the news provider.

    The payload it was built from is kept and is what gets serialised, so
    the article reaches the report with the provider's keys in the
    provider's order. ``published_at`` may be missing; only articles that
    get bucketed need it.
    """
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    description: Optional[str] = None
    content: Optional[str] = None
    published_at: Optional[str] = Field(None, alias="publishedAt")
    source: Any = None

    _payload: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_payload(cls, data: Any, handler):
        art = handler(data)
        if isinstance(data, dict):
            art._payload = dict(data)
        return art

    @model_serializer(mode="wrap")
    def _dump_payload(self, handler):
        if self._payload is not None:
            return dict(self._payload)
        return handler(self)

    @property
    def text(self) -> str:
        return self.description or self.content or ""


class SentimentResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    labels: List[str]
    scores: List[float]
    sequence: str = ""
    top_label: str = Field(..., alias="topLabel")
    # root of top_label; resolved by the classifier, never serialised
    sentiment: str = Field(..., exclude=True)


class SentimentPercentages(BaseModel):
    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0


class RecentPulse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    positive: int = 0
    neutral: int = 0
    negative: int = 0
    percentages: SentimentPercentages = Field(default_factory=SentimentPercentages)
    total: int = 0
    dominant_sentiment: Optional[str] = Field(None, alias="dominantSentiment")
    window_days: int = Field(30, alias="windowDays")


class ScoredArticle(BaseModel):
    article: Article
    analysis: SentimentResult


class Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary_recent: RecentPulse
    monthly_percentages: Dict[str, SentimentPercentages]
    results: List[ScoredArticle]
    most_recent_article: Optional[ScoredArticle] = Field(None, alias="mostRecentArticle")

    def to_response(self) -> Dict[str, Any]:
        """JSON body for /analyze-media; ``mostRecentArticle`` is left out when there are no results."""
        exclude = {"most_recent_article"} if self.most_recent_article is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
