# echoverse/generate/clients/echo_dev_client.py
# Offline model client for local dev and tests: echoes the last user turn.

import json
from typing import List, Tuple, Dict, Any
from ..types import PromptMessage, ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[PromptMessage], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        last = user_inputs[-1] if user_inputs else "(no user input)"
        if params.json_output:
            text = json.dumps({"engine": "echo", "input": last})
        else:
            text = f"[ECHO RESPONSE]\n{last}"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
