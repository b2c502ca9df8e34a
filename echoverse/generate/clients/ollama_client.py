# echoverse/generate/clients/ollama_client.py
# Client for Ollama local inference; same generate(messages, params) shape as the others.

import requests
from typing import List, Tuple, Dict, Any
from ..types import PromptMessage, ModelParams


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434"):
        self.model = model
        self.host = host.rstrip("/")

    def generate(self, messages: List[PromptMessage], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        prompt = self._compose_prompt(messages)
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": float(params.temperature or 0.7),
                "num_predict": int(params.max_tokens or 1000),
            },
        }
        if params.json_output:
            payload["format"] = "json"
        url = f"{self.host}/api/generate"
        resp = requests.post(url, json=payload, timeout=180)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[PromptMessage]) -> str:
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
