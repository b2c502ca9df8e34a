# Model clients. Every client exposes generate(messages, params) -> (text, meta).

from echoverse.settings import Settings
from .echo_dev_client import EchoDevClient


def select_model_client(cfg: Settings):
    """Ollama if asked for, OpenAI if a key is configured, otherwise the echo client."""
    if cfg.USE_OLLAMA:
        from .ollama_client import OllamaClient
        return OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST)
    if cfg.OPENAI_API_KEY:
        from .openai_client import OpenAIClient
        return OpenAIClient(model=cfg.OPENAI_MODEL, api_key=cfg.OPENAI_API_KEY)
    return EchoDevClient()


__all__ = ["EchoDevClient", "select_model_client"]
