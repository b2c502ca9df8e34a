# echoverse/generate/generator.py
# ContentGenerator: one model client, one system prompt per tool, uniform
# Generation results for the routes.

from __future__ import annotations
import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from .types import PromptMessage, ModelParams, Generation
from . import prompts
from echoverse.errors import GenerationError
from echoverse.logging_utils import get_logger

DEFAULT_CONFIG = Path(__file__).with_name("config.yaml")

logger = get_logger(__name__)


class ContentGenerator:
    def __init__(self, model_client, config_path: Optional[str] = None):
        self.model_client = model_client
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG
        self.cfg = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _params(self, section: str, temperature: Optional[float] = None, json_output: bool = False) -> ModelParams:
        s_cfg = self.cfg.get(section, {})
        return ModelParams(
            temperature=temperature if temperature is not None else s_cfg.get("temperature", 0.7),
            max_tokens=s_cfg.get("max_tokens", 1000),
            json_output=json_output,
        )

    def _run(self, kind: str, messages: List[PromptMessage], params: ModelParams, section: str) -> Generation:
        try:
            text, meta = self.model_client.generate(messages, params)
        except Exception as e:
            raise GenerationError(str(e)) from e
        if not text:
            text = self.cfg.get(section, {}).get("fallback", "")
        logger.debug("%s generation: %d chars via %s", kind, len(text), meta.get("engine"))
        return Generation(text=text, kind=kind, meta=meta)

    @staticmethod
    def _pair(system: str, user: str) -> List[PromptMessage]:
        return [PromptMessage(role="system", content=system), PromptMessage(role="user", content=user)]

    # -------------------------
    # Tools
    # -------------------------
    def chat(
        self,
        message: str,
        history: Optional[List[PromptMessage]] = None,
        username: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Generation:
        """Echo assistant reply to `message`, with prior turns as context."""
        turns = [*(history or []), PromptMessage(role="user", content=message)]
        return self.converse(turns, username=username, temperature=temperature)

    def converse(
        self,
        turns: List[PromptMessage],
        username: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Generation:
        messages = [PromptMessage(role="system", content=prompts.chat_system_prompt(username)), *turns]
        return self._run("chat", messages, self._params("chat", temperature), "chat")

    def content(
        self,
        prompt: str,
        kind: str = "text",
        tone: Optional[str] = None,
        context: str = "",
        temperature: Optional[float] = None,
    ) -> Generation:
        system = prompts.content_system_prompt(kind, tone, context)
        return self._run(kind, self._pair(system, prompt), self._params("content", temperature), "content")

    def educational(self, prompt: str, kind: str, subject: Optional[str] = None) -> Generation:
        system = prompts.educational_system_prompt(kind, subject)
        return self._run(kind, self._pair(system, prompt), self._params("content"), "content")

    def lesson(
        self,
        topic: str,
        grade_level: Any,
        duration: Any,
        learning_style: Optional[str] = None,
        context: str = "",
    ) -> Generation:
        prompt = prompts.lesson_prompt(topic, grade_level, duration, learning_style, context)
        return self.content(prompt, kind="lesson")

    def quiz(self, topic: str, difficulty: Any, question_count: Any) -> Generation:
        return self.content(prompts.quiz_prompt(topic, difficulty, question_count), kind="quiz")

    def marketing(self, prompt: str, kind: str) -> Generation:
        system = prompts.marketing_system_prompt(kind)
        return self._run(kind, self._pair(system, prompt), self._params("content"), "content")

    def website(self, prompt: str, site_type: Optional[str] = None) -> Generation:
        system = prompts.website_system_prompt(site_type)
        return self._run("website", self._pair(system, prompt), self._params("content"), "content")

    def dev(self, prompt: str, kind: str, language: Optional[str] = None) -> Generation:
        system = prompts.dev_system_prompt(kind, language)
        return self._run(kind, self._pair(system, prompt), self._params("content"), "content")

    def analyze(self, text: str, analysis_type: str = "general") -> Dict[str, Any]:
        """Analysis as a JSON object; raises GenerationError when the model answers with anything else."""
        messages = self._pair(
            prompts.analysis_system_prompt(analysis_type),
            f'Analyze the following text: "{text}"',
        )
        out = self._run("analysis", messages, self._params("analysis", json_output=True), "analysis")
        try:
            data = json.loads(out.text)
        except json.JSONDecodeError as e:
            raise GenerationError("Failed to parse analysis") from e
        if not isinstance(data, dict):
            raise GenerationError("Failed to parse analysis")
        return data
