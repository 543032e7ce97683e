"""FastAPI entry point for the LPI ask service."""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import store
from .agent import run_agent
from .models import AskRequest, AskResponse
from .settings import get_settings

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Natural language questions over country logistics performance data",
    version=settings.app_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict:
    """Lightweight health check for uptime probes."""
    return {"status": "ok"}


@app.get("/api/test-data")
def test_data() -> List[Dict[str, Any]]:
    """Return a raw sample of the data source, uncleaned."""
    try:
        return store.fetch_sample()
    except store.RecordStoreError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@app.get("/api/ask", response_model=AskResponse)
def ask_query(question: str) -> AskResponse:
    """Answer a question passed as a query parameter."""
    return run_agent(question)


@app.post("/ask", response_model=AskResponse)
def ask(request: AskRequest) -> AskResponse:
    """Handle natural language questions and return cleaned LPI rows."""
    return run_agent(request.question)
