"""AI endpoints called by the Echoverse tools."""

from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import GenerationError
from ..generate import ContentGenerator, Generation, PromptMessage
from ..library import ContentLibrary
from ..logging_utils import get_logger
from ..memory import MemoryLayer

router = APIRouter()
logger = get_logger(__name__)

TOOLS_PATH = Path(__file__).resolve().parent.parent / "tools.yaml"
LESSON_PREFERENCES = "lesson_preferences"


# ------------------------------------------------------------
# Dependencies
# ------------------------------------------------------------
def get_generator(request: Request) -> ContentGenerator:
    return request.app.state.generator


def get_library(request: Request) -> ContentLibrary:
    return request.app.state.library


def get_memory(request: Request) -> MemoryLayer:
    return request.app.state.memory


@lru_cache(maxsize=1)
def load_tool_catalog() -> List[Dict[str, Any]]:
    with open(TOOLS_PATH, "r", encoding="utf-8") as f:
        return (yaml.safe_load(f) or {}).get("tools", [])


# ------------------------------------------------------------
# Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    history: Optional[List[ChatTurn]] = None
    temperature: Optional[float] = None
    username: Optional[str] = None


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None
    type: str = "text"
    tone: Optional[str] = "professional"
    context: str = ""
    temperature: Optional[float] = None


class TypedPromptRequest(BaseModel):
    prompt: Optional[str] = None
    type: Optional[str] = None
    subject: Optional[str] = None


class WebsiteRequest(BaseModel):
    prompt: Optional[str] = None
    type: Optional[str] = "business"


class DevRequest(BaseModel):
    prompt: Optional[str] = None
    type: Optional[str] = None
    language: Optional[str] = None


class AnalyzeRequest(BaseModel):
    text: Optional[str] = None
    analysisType: str = "general"


class LessonRequest(BaseModel):
    topic: Optional[str] = None
    gradeLevel: Any = None
    duration: Any = None
    learningStyle: Optional[str] = None
    username: Optional[str] = None


class QuizRequest(BaseModel):
    topic: Optional[str] = None
    difficulty: str = "medium"
    questionCount: int = 5


class LegacyContentRequest(BaseModel):
    prompt: Optional[str] = None
    type: Optional[str] = None
    context: Optional[str] = None
    options: Optional[Dict[str, Any]] = None


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def _message(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"message": message})


def _failed(action: str, e: Exception) -> JSONResponse:
    logger.exception("Error while trying to %s", action)
    return JSONResponse(status_code=500, content={"error": f"Failed to {action}: {e}"})


def _saved(library: ContentLibrary, out: Generation, prompt: str, key: str = "content") -> Dict[str, Any]:
    item = library.save(out.kind, prompt, out.text)
    return {key: out.text, "id": item.id}


# ------------------------------------------------------------
# Chat
# ------------------------------------------------------------
@router.post("/api/ai/chat")
def chat(req: ChatRequest, gen: ContentGenerator = Depends(get_generator)):
    if not req.message:
        return _bad_request("Message is required")
    history = [PromptMessage(role=h.role, content=h.content) for h in (req.history or [])]
    try:
        out = gen.chat(req.message, history=history, username=req.username, temperature=req.temperature)
    except GenerationError as e:
        return _failed("generate response", e)
    return {"response": out.text}


# ------------------------------------------------------------
# Generator tools
# ------------------------------------------------------------
@router.post("/api/ai/generate")
def generate(
    req: GenerateRequest,
    gen: ContentGenerator = Depends(get_generator),
    library: ContentLibrary = Depends(get_library),
):
    if not req.prompt:
        return _bad_request("Prompt is required")
    try:
        out = gen.content(req.prompt, kind=req.type, tone=req.tone, context=req.context, temperature=req.temperature)
    except GenerationError as e:
        return _failed("generate content", e)
    return _saved(library, out, req.prompt)


@router.post("/api/ai/generate-educational")
def generate_educational(
    req: TypedPromptRequest,
    gen: ContentGenerator = Depends(get_generator),
    library: ContentLibrary = Depends(get_library),
):
    if not req.prompt or not req.type:
        return _bad_request("Prompt and type are required")
    try:
        out = gen.educational(req.prompt, kind=req.type, subject=req.subject)
    except GenerationError as e:
        return _failed("generate educational content", e)
    return _saved(library, out, req.prompt)


@router.post("/api/ai/generate-marketing")
def generate_marketing(
    req: TypedPromptRequest,
    gen: ContentGenerator = Depends(get_generator),
    library: ContentLibrary = Depends(get_library),
):
    if not req.prompt or not req.type:
        return _bad_request("Prompt and type are required")
    try:
        out = gen.marketing(req.prompt, kind=req.type)
    except GenerationError as e:
        return _failed("generate marketing content", e)
    return _saved(library, out, req.prompt)


@router.post("/api/ai/generate-website")
def generate_website(
    req: WebsiteRequest,
    gen: ContentGenerator = Depends(get_generator),
    library: ContentLibrary = Depends(get_library),
):
    if not req.prompt:
        return _bad_request("Prompt is required")
    try:
        out = gen.website(req.prompt, site_type=req.type)
    except GenerationError as e:
        return _failed("generate website", e)
    return _saved(library, out, req.prompt, key="code")


@router.post("/api/dev/generate")
def dev_generate(req: DevRequest, gen: ContentGenerator = Depends(get_generator)):
    if not req.prompt or not req.type:
        return _bad_request("Prompt and type are required")
    try:
        out = gen.dev(req.prompt, kind=req.type, language=req.language)
    except GenerationError as e:
        return _failed("generate response", e)
    return {"result": out.text}


@router.post("/api/ai/analyze")
def analyze(req: AnalyzeRequest, gen: ContentGenerator = Depends(get_generator)):
    if not req.text:
        return _bad_request("Text is required")
    try:
        return gen.analyze(req.text, analysis_type=req.analysisType)
    except GenerationError as e:
        return _failed("analyze text", e)


# ------------------------------------------------------------
# Catalog & library
# ------------------------------------------------------------
@router.get("/api/ai-tools")
def list_tools():
    return load_tool_catalog()


@router.get("/api/ai-contents")
def list_contents(type: Optional[str] = None, library: ContentLibrary = Depends(get_library)):
    return [item.to_dict() for item in library.list(type)]


@router.get("/api/ai-contents/{content_id}")
def get_content(content_id: int, library: ContentLibrary = Depends(get_library)):
    item = library.get(content_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Content not found")
    return item.to_dict()


# ------------------------------------------------------------
# EchoTeacher
# ------------------------------------------------------------
@router.post("/api/teacher/generate-lesson")
def generate_lesson(
    req: LessonRequest,
    gen: ContentGenerator = Depends(get_generator),
    memory: MemoryLayer = Depends(get_memory),
):
    if not req.topic:
        return _message(400, "Topic is required")
    context = memory.personalized_context(req.username, LESSON_PREFERENCES) if req.username else ""
    try:
        out = gen.lesson(req.topic, req.gradeLevel, req.duration, learning_style=req.learningStyle, context=context)
    except GenerationError:
        logger.exception("Error generating lesson")
        return _message(500, "Failed to generate lesson")
    if req.username:
        memory.store(req.username, LESSON_PREFERENCES, {"topic": req.topic, "gradeLevel": req.gradeLevel})
    return {"content": out.text}


@router.post("/api/teacher/generate-quiz")
def generate_quiz(req: QuizRequest, gen: ContentGenerator = Depends(get_generator)):
    if not req.topic:
        return _message(400, "Topic is required")
    try:
        out = gen.quiz(req.topic, req.difficulty, req.questionCount)
    except GenerationError:
        logger.exception("Error generating quiz")
        return _message(500, "Failed to generate quiz")
    return {"content": out.text}


# ------------------------------------------------------------
# Older client routes
# ------------------------------------------------------------
@router.post("/api/chat")
def legacy_chat(payload: Dict[str, Any] = Body(...), gen: ContentGenerator = Depends(get_generator)):
    messages = payload.get("messages")
    if not isinstance(messages, list) or not messages:
        return _message(400, "Invalid messages format")
    try:
        turns = [
            PromptMessage(role="user" if m.get("sender") == "user" else "assistant", content=str(m.get("text", "")))
            for m in messages
        ]
    except AttributeError:
        return _message(400, "Invalid messages format")
    try:
        out = gen.converse(turns, username=payload.get("username"))
    except GenerationError:
        logger.exception("Error generating chat response")
        return _message(500, "Failed to generate chat response")
    now = datetime.now(timezone.utc)
    return {
        "text": out.text,
        "id": str(int(now.timestamp() * 1000)),
        "sender": "assistant",
        "timestamp": now.isoformat(),
    }


@router.post("/api/generate-content")
def legacy_generate_content(
    req: LegacyContentRequest,
    gen: ContentGenerator = Depends(get_generator),
    library: ContentLibrary = Depends(get_library),
):
    if not req.prompt:
        return _message(400, "Prompt is required")
    kind = req.type or "general"
    options = req.options or {}
    try:
        out = gen.content(
            req.prompt,
            kind=kind,
            tone=options.get("tone"),
            context=req.context or "",
            temperature=options.get("temperature"),
        )
    except GenerationError:
        logger.exception("Error generating content")
        return _message(500, "Failed to generate content")
    if not out.text:
        return _message(500, "Failed to generate content")
    item = library.save(kind, req.prompt, out.text)
    return {"content": item.to_dict(), "success": True}


@router.post("/api/analyze-text")
def legacy_analyze(req: AnalyzeRequest, gen: ContentGenerator = Depends(get_generator)):
    if not req.text:
        return _message(400, "Text is required")
    try:
        return gen.analyze(req.text, analysis_type=req.analysisType or "general")
    except GenerationError:
        logger.exception("Error analyzing text")
        return _message(500, "Failed to analyze text")
