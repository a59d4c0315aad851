from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel
from typing import Optional

from src.core.config import Settings
from src.core.errors import InternalError, ServiceError, ValidationError
from src.core.logger import get_logger, setup_logger
from src.core.report import ReportAssembler
from src.sentiment.classifier import ZeroShotClassifier
from src.sentiment.news import NewsSearchClient

settings = Settings.from_env()
setup_logger(settings.log_level)
logger = get_logger("api")

app = FastAPI(title="Media Sentiment API")

classifier = ZeroShotClassifier(settings)
news_client = NewsSearchClient(settings)
assembler = ReportAssembler(news_client, classifier)


class AnalyzeRequest(BaseModel):
    topic: Optional[str] = ""
    text: Optional[str] = ""


class MediaRequest(BaseModel):
    topic: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    """Unparseable bodies get the same {"error"} shape as every other failure."""
    if request.url.path == "/analyze-media":
        err = ValidationError("Missing topic")
        logger.warning("Media report rejected: %s", exc.errors())
    else:
        err = InternalError("Invalid request body")
    return _error(err.status_code, err.message)


@app.post("/analyze")
async def analyze(payload: Optional[AnalyzeRequest] = None):
    """Score a single text's sentiment toward a topic."""
    payload = payload or AnalyzeRequest()
    try:
        result = await classifier.classify((payload.topic or "").strip(), (payload.text or "").strip())
        return result.model_dump(by_alias=True)
    except Exception as e:
        return _error(500, str(e))


@app.post("/analyze-media")
async def analyze_media(payload: Optional[MediaRequest] = None):
    """Monthly sentiment distribution plus a 30-day pulse for news about a topic."""
    topic = payload.topic if payload else None
    try:
        report = await assembler.build(topic)
        return report.to_response()
    except ServiceError as e:
        if e.status_code >= 500:
            logger.exception("Media report for %r failed", topic)
        else:
            logger.warning("Media report for %r rejected: %s", topic, e.message)
        return _error(e.status_code, e.message)
    except Exception as e:
        logger.exception("Media report for %r failed", topic)
        err = InternalError(str(e))
        return _error(err.status_code, err.message)


@app.get("/health")
async def health():
    return PlainTextResponse("ok")


@app.get("/{full_path:path}")
async def frontend(full_path: str):
    """Serve the prebuilt frontend; unknown paths fall back to index.html."""
    root = settings.frontend_dir.resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
    index = root / "index.html"
    if index.is_file():
        return FileResponse(index)
    return _error(404, "Frontend build not found")


if __name__ == "__main__":
    import uvicorn
    logger.info("API listening on %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
