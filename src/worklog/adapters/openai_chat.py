"""OpenAI chat completions adapter - HTTP client for text generation."""

import logging

import requests

from worklog.errors import LLMError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.openai.com/v1"


class OpenAIChatService:
    """
    OpenAI chat completions adapter.

    Implements LLMService protocol. One request per call, no retries; every
    failure surfaces as LLMError with the raw error text.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        api_base: str = DEFAULT_API_BASE,
        max_tokens: int = 4000,
        temperature: float = 0.1,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request_body(self, system_prompt: str, user_prompt: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate text from a system instruction and user content."""
        try:
            resp = self._session.post(
                f"{self.api_base}/chat/completions",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=self._request_body(system_prompt, user_prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"OpenAI request failed: {e}")
            raise LLMError(f"OpenAI API request failed: {e}") from e

        if not resp.ok:
            logger.error(f"OpenAI returned {resp.status_code}: {resp.text}")
            raise LLMError(f"OpenAI API error: {resp.text or 'Unknown error'}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMError(f"Failed to parse OpenAI response: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not isinstance(content, str):
            raise LLMError("Invalid response format from OpenAI")

        return content
