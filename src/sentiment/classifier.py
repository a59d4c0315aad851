"""Zero-shot sentiment classification via the Hugging Face inference API."""
from __future__ import annotations
from typing import Dict

import httpx

from src.core.config import Settings
from src.core.errors import UpstreamError
from src.core.logger import get_logger
from src.sentiment.models import SENTIMENTS, SentimentResult

logger = get_logger("classifier")

LABEL_TEMPLATES = {
    "positive": "positive about {topic}",
    "neutral": "neutral toward {topic}",
    "negative": "negative about {topic}",
}


def candidate_labels(topic: str) -> Dict[str, str]:
    """Ordered mapping of candidate label -> root sentiment for ``topic``."""
    return {LABEL_TEMPLATES[root].format(topic=topic): root for root in SENTIMENTS}


class ZeroShotClassifier:
    def __init__(self, settings: Settings):
        self.endpoint = settings.hf_endpoint
        self.token = settings.hf_token
        self.timeout = settings.http_timeout

    async def classify(self, topic: str, text: str) -> SentimentResult:
        """Score ``text`` against the three sentiment labels for ``topic``.

        Raises UpstreamError on a non-2xx reply or a body that does not rank
        the candidate labels.
        """
        lookup = candidate_labels(topic)
        payload = {
            "inputs": text,
            "parameters": {
                "candidate_labels": list(lookup),
                "multi_label": False,
            },
        }
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(self.endpoint, json=payload, headers=headers)
            if not r.is_success:
                logger.warning("HF API returned %s for topic %r", r.status_code, topic)
                raise UpstreamError(f"HF API {r.status_code}", upstream_status=r.status_code)
            try:
                data = r.json()
            except ValueError:
                raise UpstreamError("HF API returned a non-JSON body", upstream_status=r.status_code)

        labels = data.get("labels") if isinstance(data, dict) else None
        if not labels:
            raise UpstreamError("HF API response has no labels", upstream_status=r.status_code)
        top_label = labels[0]
        if top_label not in lookup:
            raise UpstreamError(f"HF API returned unknown label: {top_label}", upstream_status=r.status_code)

        return SentimentResult(
            labels=labels,
            scores=data.get("scores", []),
            sequence=data.get("sequence", text),
            top_label=top_label,
            sentiment=lookup[top_label],
        )
