# =============================================================================
# core/services/chat_service.py - FinnaBot Chat
# =============================================================================
# Forwards chat widget messages to an OpenAI chat model and returns the reply.
#
# The widget keeps the conversation client-side and resends it on every
# message; only the most recent CHAT_MAX_HISTORY turns are forwarded.
# =============================================================================

import logging

from openai import APIError, AuthenticationError, OpenAI, RateLimitError

from app.config import settings
from app.exceptions import (
    ApiKeyNotConfiguredError,
    ChatServiceError,
    UpstreamRateLimitError,
)
from core.models.chat import ChatTurn

logger = logging.getLogger(__name__)

FINNABOT_SYSTEM_PROMPT = """You are FinnaBot, the assistant on FinnaCalc, a free financial calculator site.

You help people understand personal and small-business finance:
- budgeting, emergency funds and savings goals
- loans, APR and amortization
- cash flow, break-even, pricing and profit margins
- U.S. federal income tax basics, self-employment tax and withholding
- investing basics: stocks, bonds, index funds, ROI and safe investment options

Guidelines:
- Keep answers short, friendly and in plain language.
- When a FinnaCalc calculator fits the question, suggest it (cash flow, break-even,
  profit margin, pricing, startup cost, employee vs contractor, emergency fund,
  ROI, loan, tax, budget).
- You give general education, not personalized financial, tax or legal advice.
  Suggest a licensed professional for decisions with real money at stake.
"""

# Lazy-loaded OpenAI client
_client = None


def get_openai_client() -> OpenAI:
    """
    Get or create OpenAI client (lazy initialization).

    Raises:
        ApiKeyNotConfiguredError: If OPENAI_API_KEY is not set
    """
    global _client
    if _client is None:
        if not settings.OPENAI_API_KEY:
            raise ApiKeyNotConfiguredError("OPENAI_API_KEY")
        _client = OpenAI(api_key=settings.OPENAI_API_KEY)
    return _client


class ChatService:
    """
    Builds the message list and calls the chat completions API.

    Args:
        client: OpenAI client (default: lazily created from settings)
        model: Chat model ID (default: settings.OPENAI_MODEL)
        temperature: Sampling temperature (default: settings.CHAT_TEMPERATURE)
        max_history: Previous turns to forward (default: settings.CHAT_MAX_HISTORY)
    """

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_history: int | None = None,
    ) -> None:
        self._client = client
        self.model = model or settings.OPENAI_MODEL
        self.temperature = settings.CHAT_TEMPERATURE if temperature is None else temperature
        self.max_history = settings.CHAT_MAX_HISTORY if max_history is None else max_history

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    def build_messages(self, message: str, history: list[ChatTurn]) -> list[dict[str, str]]:
        """
        System prompt, the most recent history turns, then the new message.

        Empty turns are dropped.
        """
        messages = [{"role": "system", "content": FINNABOT_SYSTEM_PROMPT}]

        recent = history[-self.max_history:] if self.max_history > 0 else []
        for turn in recent:
            if turn.text.strip():
                messages.append(turn.to_openai_message())

        messages.append({"role": "user", "content": message})
        return messages

    def reply(self, message: str, history: list[ChatTurn] | None = None) -> str:
        """
        Get FinnaBot's reply to a message.

        Returns:
            The reply text, stripped

        Raises:
            ApiKeyNotConfiguredError: No OpenAI key configured (500)
            UpstreamRateLimitError: OpenAI rate limit (429)
            ChatServiceError: Invalid key, API failure or an empty reply (500)
        """
        messages = self.build_messages(message, history or [])
        logger.debug(f"Sending {len(messages)} messages to {self.model}")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
            )
        except RateLimitError as e:
            logger.warning(f"OpenAI rate limit: {e}")
            raise UpstreamRateLimitError(
                "openai",
                "Chatbot Error: API rate limit reached. Please wait and try again.",
            ) from e
        except AuthenticationError as e:
            logger.error(f"OpenAI authentication failed: {e}")
            raise ChatServiceError(
                "Chatbot Error: Invalid or missing API Key. Please check the server configuration."
            ) from e
        except APIError as e:
            logger.error(f"OpenAI API call failed: {e}")
            raise ChatServiceError(
                "The chatbot service is currently unavailable. Please try again later."
            ) from e

        text = ""
        if response.choices:
            text = (response.choices[0].message.content or "").strip()

        if not text:
            raise ChatServiceError("Received an empty response from the chatbot.")

        return text
