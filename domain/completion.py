import logging
from typing import Any

import httpx
from openai.types.chat import ChatCompletionUserMessageParam

from domain.errors import ConfigurationError, ParseError, UpstreamError


logger = logging.getLogger(__name__)


BASE_URL = "https://api.groq.com/openai/v1/"
DEFAULT_MODEL = "llama-3.1-8b-instant"
TEMPERATURE = 0.4
MAX_TOKENS = 150


def completion_client_factory(base_url: str = BASE_URL) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Content-Type": "application/json"},
    )


class CompletionClient:
    """One-shot chat completions against an OpenAI-compatible endpoint."""

    def __init__(
        self,
        *,
        token: str | None,
        model: str = DEFAULT_MODEL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = token
        self.model = model
        self._client = completion_client_factory() if client is None else client

    def payload(self, prompt: str) -> dict[str, Any]:
        message: ChatCompletionUserMessageParam = {"role": "user", "content": prompt}
        return {
            "model": self.model,
            "messages": [message],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }

    async def complete(self, prompt: str) -> str:
        if not self.token:
            raise ConfigurationError("Completion service API key is not configured.")

        resp = await self._client.post(
            "chat/completions",
            json=self.payload(prompt),
            headers={"Authorization": f"Bearer {self.token}"},
        )
        if not resp.is_success:
            raise UpstreamError("Completion service", resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise ParseError(f"Completion response is not JSON: {resp.text}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ParseError(f"Unexpected completion response: {data}") from e
        if content is not None and not isinstance(content, str):
            raise ParseError(f"Unexpected completion content: {content!r}")

        logger.debug("Completion of %d chars", len(content or ""))
        return content or ""

    async def close(self) -> None:
        await self._client.aclose()
