# main.py

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from discipline.catalog import list_categories
from discipline.composer import answer_from_handbook, answer_question
from discipline.config import Settings, get_settings
from discipline.llm import LLMUnavailable, ReportAssistant
from discipline.loader import DocumentUnavailable, HandbookLoader

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("discipline")

app = FastAPI(title="School Discipline Handbook Assistant")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_handbook_loader(settings: Settings = Depends(get_settings)) -> HandbookLoader:
    return HandbookLoader(settings.handbook_candidates)


def get_report_assistant(settings: Settings = Depends(get_settings)) -> ReportAssistant:
    return ReportAssistant(
        llm_model=settings.llm_model,
        host=settings.llm_host,
        temperature=settings.llm_temperature,
        max_handbook_chars=settings.llm_max_handbook_chars,
    )


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def json_payload(request: Request) -> Dict[str, Any]:
    # Missing, malformed or non-object bodies reach the handlers as {} so they
    # answer with their own 400 message.
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@app.get("/api/health")
async def health(
    settings: Settings = Depends(get_settings),
    loader: HandbookLoader = Depends(get_handbook_loader),
) -> Dict[str, Any]:
    path = loader.resolve_path()
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "llmModel": settings.llm_model,
        "pdfStatus": "FOUND" if path else "NOT FOUND",
        "pdfPath": str(path) if path else None,
        "workingDirectory": os.getcwd(),
    }


@app.post("/api/ask-handbook")
def ask_handbook(
    payload: Dict[str, Any] = Depends(json_payload),
    loader: HandbookLoader = Depends(get_handbook_loader),
):
    question = payload.get("question")
    if not isinstance(question, str) or not question.strip():
        return _error(400, "Question is required.")

    try:
        answer = answer_from_handbook(question, loader.load())
    except Exception as e:
        logger.exception("Handbook search failed")
        return _error(500, str(e))

    return {"answer": answer}


@app.get("/api/chatbot/categories")
async def chatbot_categories() -> Dict[str, Any]:
    return {"success": True, "categories": list_categories()}


@app.post("/api/chatbot/ask")
def chatbot_ask(
    payload: Dict[str, Any] = Depends(json_payload),
    loader: HandbookLoader = Depends(get_handbook_loader),
):
    question = payload.get("question")
    if not question or not isinstance(question, str):
        return _error(400, "Question is required")

    try:
        response = answer_question(question, loader.load())
    except Exception:
        logger.exception("Chatbot ask failed")
        return _error(500, "Failed to process question")

    return response.to_dict()


@app.post("/api/report-suggestion")
def report_suggestion(
    payload: Dict[str, Any] = Depends(json_payload),
    loader: HandbookLoader = Depends(get_handbook_loader),
    assistant: ReportAssistant = Depends(get_report_assistant),
):
    category = payload.get("category")
    summary = payload.get("summary")
    if not category or summary is None:
        return _error(400, "Category and summary are required.")
    if not isinstance(summary, str):
        summary = json.dumps(summary, default=str)

    try:
        handbook_text: Optional[str] = loader.load()
    except DocumentUnavailable:
        logger.warning("Handbook unavailable, using fallback excerpt for report suggestion")
        handbook_text = None

    try:
        suggestion = assistant.suggest_report(str(category), summary, handbook_text)
    except LLMUnavailable as e:
        logger.exception("Report suggestion failed")
        return _error(500, str(e), details="Check server logs for more information")

    return {"suggestion": suggestion}


@app.post("/api/analyze-personality")
def analyze_personality(
    payload: Dict[str, Any] = Depends(json_payload),
    assistant: ReportAssistant = Depends(get_report_assistant),
):
    answers = payload.get("answers")
    violations = payload.get("violations") or []
    if answers is None:
        return _error(400, "Personality test answers are required.")
    if not isinstance(violations, list):
        return _error(400, "Violations must be a list.")

    try:
        analysis = assistant.analyze_personality(answers, violations)
    except LLMUnavailable as e:
        logger.exception("Personality analysis failed")
        return _error(500, str(e), details="Check server logs for more information")

    return {"analysis": analysis}
