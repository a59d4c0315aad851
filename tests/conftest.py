import os
import sys
from datetime import datetime, timezone

import pytest

# Ensure repo root is on sys.path for imports like 'services.*' and 'src.*'
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from src.sentiment.classifier import candidate_labels  # noqa: E402
from src.sentiment.models import Article, SentimentResult  # noqa: E402

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeNews:
    """Stands in for NewsSearchClient; serves canned article lists per sort order."""

    def __init__(self, relevance=None, latest=None):
        self.by_sort = {"relevance": relevance or [], "publishedAt": latest or []}
        self.calls = []

    async def search(self, topic, sort="relevance", from_date=None, max_count=None):
        self.calls.append({"topic": topic, "sort": sort, "from_date": from_date})
        return [Article.model_validate(a) for a in self.by_sort[sort]]


class FakeClassifier:
    """Picks the root sentiment by looking for a root word inside the text."""

    def __init__(self, default="neutral"):
        self.default = default
        self.calls = []

    async def classify(self, topic, text):
        self.calls.append((topic, text))
        lookup = candidate_labels(topic)
        root = next((r for r in ("positive", "negative", "neutral") if r in text), self.default)
        top = next(label for label, r in lookup.items() if r == root)
        labels = [top] + [label for label in lookup if label != top]
        return SentimentResult(
            labels=labels,
            scores=[0.8, 0.15, 0.05],
            sequence=text,
            top_label=top,
            sentiment=root,
        )


def article(published_at, description="", content=None, **extra):
    data = {"description": description, "publishedAt": published_at, "source": {"name": "Example"}}
    if content is not None:
        data["content"] = content
    data.update(extra)
    return data


@pytest.fixture
def fixed_now():
    return FIXED_NOW
