import asyncio

import httpx
import pytest

from src.core.config import Settings
from src.core.errors import UpstreamError
from src.sentiment.classifier import ZeroShotClassifier, candidate_labels


SETTINGS = Settings(hf_token="hf_test", hf_endpoint="https://hf.example/models/zs")


def _patch_post(monkeypatch, status=200, body=None, calls=None):
    async def fake_post(self, url, json=None, headers=None, **kwargs):
        if calls is not None:
            calls.append({"url": url, "json": json, "headers": headers})
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)
    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post, raising=True)


def test_candidate_labels_fixed_order():
    labels = candidate_labels("climate")
    assert list(labels) == [
        "positive about climate",
        "neutral toward climate",
        "negative about climate",
    ]
    assert list(labels.values()) == ["positive", "neutral", "negative"]


def test_classify_sends_zero_shot_payload(monkeypatch):
    calls = []
    body = {
        "sequence": "Solar output hits record",
        "labels": ["positive about climate", "neutral toward climate", "negative about climate"],
        "scores": [0.7, 0.2, 0.1],
    }
    _patch_post(monkeypatch, body=body, calls=calls)

    result = asyncio.run(ZeroShotClassifier(SETTINGS).classify("climate", "Solar output hits record"))

    assert calls[0]["url"] == "https://hf.example/models/zs"
    assert calls[0]["headers"]["Authorization"] == "Bearer hf_test"
    assert calls[0]["json"] == {
        "inputs": "Solar output hits record",
        "parameters": {
            "candidate_labels": list(candidate_labels("climate")),
            "multi_label": False,
        },
    }
    assert result.labels == body["labels"]
    assert result.scores == body["scores"]
    assert abs(sum(result.scores) - 1.0) < 1e-6
    assert result.top_label == "positive about climate"
    assert result.sentiment == "positive"
    dumped = result.model_dump(by_alias=True)
    assert set(dumped) == {"labels", "scores", "sequence", "topLabel"}


def test_root_comes_from_top_label_not_position(monkeypatch):
    body = {
        "sequence": "x",
        "labels": ["negative about EU", "positive about EU", "neutral toward EU"],
        "scores": [0.5, 0.3, 0.2],
    }
    _patch_post(monkeypatch, body=body)
    result = asyncio.run(ZeroShotClassifier(SETTINGS).classify("EU", "x"))
    assert result.sentiment == "negative"
    assert result.top_label == "negative about EU"


def test_non_success_status_raises(monkeypatch):
    _patch_post(monkeypatch, status=503, body={"error": "loading"})
    with pytest.raises(UpstreamError) as exc:
        asyncio.run(ZeroShotClassifier(SETTINGS).classify("climate", "text"))
    assert str(exc.value) == "HF API 503"
    assert exc.value.upstream_status == 503


@pytest.mark.parametrize("body", [
    "<html>gateway</html>",
    {"labels": []},
    {"labels": ["something else"], "scores": [1.0]},
])
def test_malformed_body_raises(monkeypatch, body):
    _patch_post(monkeypatch, body=body)
    with pytest.raises(UpstreamError):
        asyncio.run(ZeroShotClassifier(SETTINGS).classify("climate", "text"))
