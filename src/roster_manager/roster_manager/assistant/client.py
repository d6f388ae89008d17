from __future__ import annotations

from typing import Optional, Protocol, Sequence

import requests

from ..core.exceptions import AssistantError
from .model import ChatMessage

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class AssistantClient(Protocol):
    def generate(self, *, system: Optional[str], history: Sequence[ChatMessage], message: str) -> str:
        raise NotImplementedError


class GeminiAssistantClient(AssistantClient):
    """Text-in/text-out call to the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(self, *, system: Optional[str], history: Sequence[ChatMessage], message: str) -> str:
        if not self._api_key:
            raise AssistantError("Assistant API key is not configured")

        body: dict = {
            "contents": [{"role": m.role, "parts": [{"text": m.text}]} for m in history]
            + [{"role": "user", "parts": [{"text": message}]}],
        }
        if system:
            body["systemInstruction"] = {"parts": [{"text": system}]}

        try:
            resp = self._session.post(
                GEMINI_URL.format(model=self._model),
                headers={"x-goog-api-key": self._api_key},
                json=body,
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise AssistantError(f"Assistant request failed: {e}") from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            return ""
        return "".join(p.get("text", "") for p in parts)
