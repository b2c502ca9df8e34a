# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import ContentGenerator
from .types import PromptMessage, ModelParams, Generation
from .clients import EchoDevClient, select_model_client

__all__ = [
    "ContentGenerator",
    "PromptMessage",
    "ModelParams",
    "Generation",
    "EchoDevClient",
    "select_model_client",
]
