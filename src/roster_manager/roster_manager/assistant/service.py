from __future__ import annotations

import json
import logging
from typing import Sequence

from ..core.constants import ASSISTANT_CONTEXT_LIMIT
from ..core.exceptions import AssistantError
from ..store.store import RecordStore
from .client import AssistantClient
from .model import ChatMessage

logger = logging.getLogger(__name__)

CHAT_FALLBACK = "I could not generate a reply."
CHAT_ERROR = "Could not reach the assistant."
ANALYSIS_FALLBACK = "No analysis available."
ANALYSIS_ERROR = "Analysis is not available right now."


class AssistantService:
    """HR assistant chat; roster state is only read, never changed."""

    def __init__(self, client: AssistantClient, store: RecordStore):
        self._client = client
        self._store = store

    def context_summary(self) -> str:
        """Capped, anonymized context: name and reliability score of active employees."""
        active = self._store.snapshot.active_employees()[:ASSISTANT_CONTEXT_LIMIT]
        return json.dumps([{"n": e.full_name, "s": e.reliability_score} for e in active], ensure_ascii=False)

    def send(self, history: Sequence[ChatMessage], message: str) -> str:
        system = (
            "You are 'Personal Manager AI', an HR expert. "
            "You are helpful, professional and concise. "
            f"You have access to this anonymized team data: {self.context_summary()}. "
            "Answer questions about people management, data analysis or attendance."
        )
        try:
            reply = self._client.generate(system=system, history=history, message=message)
        except AssistantError as e:
            logger.warning("assistant chat failed: %s", e)
            return CHAT_ERROR
        return reply or CHAT_FALLBACK

    def analyze(self) -> str:
        prompt = (
            "Analyze this HR data and give 3 strategic key points about turnover risk, "
            f"shift balance or seniority distribution. Use bullets. Data: {self.context_summary()}"
        )
        try:
            reply = self._client.generate(system=None, history=(), message=prompt)
        except AssistantError as e:
            logger.warning("assistant analysis failed: %s", e)
            return ANALYSIS_ERROR
        return reply or ANALYSIS_FALLBACK
