import json
import logging
import re
from functools import lru_cache
from typing import Any, Optional

from openai import OpenAI

from backend.config import DEFAULT_MODEL, MAX_TOKENS, OPENAI_TIMEOUT_SECS
from backend.exceptions import AIClientError

_FENCE_RE = re.compile(r"```(?:json)?\s*|\s*```", re.I)


def parse_json_payload(content: str) -> Any:
    """Parse model output as JSON, tolerating ```json fences around it."""
    clean = _FENCE_RE.sub("", content or "").strip()
    try:
        return json.loads(clean)
    except json.JSONDecodeError as e:
        raise AIClientError(f"Invalid AI response format: {e}") from e


class OpenAIClient:
    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL, max_tokens: int = MAX_TOKENS):
        # api_key=None lets the SDK read OPENAI_API_KEY itself
        self.client = OpenAI(api_key=api_key, timeout=OPENAI_TIMEOUT_SECS, max_retries=1)
        self.model = model
        self.max_tokens = max_tokens

    def get_completion(self, prompt: str, system_prompt: str = None, temperature: float = 0.7) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        logging.info(f"🔍 Prompt preview: {prompt[:300]}")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            logging.warning(f"❌ OpenAI client error: {e}")
            raise AIClientError(str(e) or "OpenAI request failed") from e

        response_text = response.choices[0].message.content if response.choices else None
        if not response_text:
            raise AIClientError("No response from model")

        logging.info(f"✅ Response preview: {response_text[:300]}")
        return response_text

    def get_json(self, prompt: str, system_prompt: str = None, temperature: float = 0.2) -> Any:
        return parse_json_payload(self.get_completion(prompt, system_prompt, temperature))


@lru_cache(maxsize=1)
def get_client() -> OpenAIClient:
    return OpenAIClient()
