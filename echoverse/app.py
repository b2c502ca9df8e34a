# ============================================================
# Echoverse FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - AI tool endpoints (chat, writer, teacher, marketer, builder, dev bot,
#     plus the older /api/chat-style aliases)
#   - In-memory content library and per-user memory
#   - Account routes (schema validation only)
#   - Support for Ollama, OpenAI, or Echo clients
# ============================================================

from fastapi import FastAPI

# --- Local imports ---
from echoverse.settings import settings
from echoverse.generate import ContentGenerator, select_model_client
from echoverse.library import ContentLibrary
from echoverse.logging_utils import get_logger
from echoverse.memory import MemoryLayer
from echoverse.routes import accounts, ai

logger = get_logger(__name__)


def create_app(model_client=None) -> FastAPI:
    """Build the service; `model_client` defaults to whatever the settings select."""
    client = model_client or select_model_client(settings)
    app = FastAPI(title="Echoverse API", version="1.0")
    app.state.model_client = client
    app.state.generator = ContentGenerator(model_client=client)
    app.state.library = ContentLibrary()
    app.state.memory = MemoryLayer()

    app.include_router(ai.router)
    app.include_router(accounts.router)

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "env": settings.ENV,
            "debug": settings.DEBUG,
            "app": settings.app_name,
            "engine": type(app.state.model_client).__name__,
            "model": getattr(app.state.model_client, "model", None),
        }

    @app.get("/health")
    @app.get("/api/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{settings.app_name} service running."}

    logger.info("Model client: %s (%s)", type(client).__name__, getattr(client, "model", "?"))
    return app


app = create_app()
