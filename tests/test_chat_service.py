# =============================================================================
# tests/test_chat_service.py - FinnaBot Chat Service Tests
# =============================================================================
# The OpenAI client is replaced by a MagicMock; no API calls are made.
#
# Run with: pytest tests/test_chat_service.py -v
# =============================================================================

from unittest.mock import MagicMock

import httpx
import pytest
from openai import APIConnectionError, AuthenticationError, RateLimitError

from app.exceptions import (
    ApiKeyNotConfiguredError,
    ChatServiceError,
    UpstreamRateLimitError,
)
from core.models import ChatTurn
from core.services import chat_service
from core.services.chat_service import FINNABOT_SYSTEM_PROMPT, ChatService

OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def mock_client(reply="Keep three to six months of expenses."):
    client = MagicMock()
    message = MagicMock()
    message.content = reply
    client.chat.completions.create.return_value = MagicMock(choices=[MagicMock(message=message)])
    return client


def status_error(cls, status_code):
    response = httpx.Response(status_code, request=httpx.Request("POST", OPENAI_URL))
    return cls("error", response=response, body=None)


@pytest.fixture
def history(sample_chat_history):
    return [ChatTurn.model_validate(turn) for turn in sample_chat_history]


# =============================================================================
# Message building
# =============================================================================

class TestBuildMessages:

    def test_system_prompt_history_then_message(self, history):
        service = ChatService(client=mock_client(), max_history=20)

        messages = service.build_messages("How much should I save?", history)

        assert messages[0] == {"role": "system", "content": FINNABOT_SYSTEM_PROMPT}
        assert messages[1] == {"role": "user", "content": "Hi"}
        assert messages[2]["role"] == "assistant"
        assert messages[-1] == {"role": "user", "content": "How much should I save?"}
        assert len(messages) == 6

    def test_history_is_truncated_to_most_recent(self, history):
        service = ChatService(client=mock_client(), max_history=2)

        messages = service.build_messages("Next?", history)

        assert [m["content"] for m in messages[1:-1]] == [
            "What is an emergency fund?",
            "Savings set aside for unexpected expenses.",
        ]

    def test_zero_history(self, history):
        service = ChatService(client=mock_client(), max_history=0)
        assert len(service.build_messages("Hi", history)) == 2

    def test_empty_turns_are_dropped(self):
        turns = [
            ChatTurn.model_validate({"role": "user", "parts": []}),
            ChatTurn.model_validate({"role": "model", "parts": [{"text": "  "}]}),
            ChatTurn.model_validate({"role": "user", "parts": [{"text": "Hi "}, {"text": "there"}]}),
        ]
        service = ChatService(client=mock_client())

        messages = service.build_messages("Question", turns)

        assert messages[1:-1] == [{"role": "user", "content": "Hi there"}]


# =============================================================================
# Replies
# =============================================================================

class TestReply:

    def test_returns_stripped_reply(self, history):
        client = mock_client("  Keep three to six months of expenses.\n")
        service = ChatService(client=client, model="gpt-4o-mini", temperature=0.3)

        text = service.reply("How big should my emergency fund be?", history)

        assert text == "Keep three to six months of expenses."
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.3
        assert kwargs["messages"][-1]["content"] == "How big should my emergency fund be?"

    def test_history_is_optional(self):
        client = mock_client()
        ChatService(client=client).reply("Hello")
        assert len(client.chat.completions.create.call_args.kwargs["messages"]) == 2

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_reply(self, content):
        service = ChatService(client=mock_client(content))

        with pytest.raises(ChatServiceError) as exc_info:
            service.reply("Hello")
        assert exc_info.value.message == "Received an empty response from the chatbot."

    def test_no_choices(self):
        client = MagicMock()
        client.chat.completions.create.return_value = MagicMock(choices=[])

        with pytest.raises(ChatServiceError):
            ChatService(client=client).reply("Hello")

    def test_rate_limit(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = status_error(RateLimitError, 429)

        with pytest.raises(UpstreamRateLimitError) as exc_info:
            ChatService(client=client).reply("Hello")

        assert exc_info.value.status_code == 429
        assert exc_info.value.message.startswith("Chatbot Error: API rate limit reached")

    def test_invalid_key(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = status_error(AuthenticationError, 401)

        with pytest.raises(ChatServiceError) as exc_info:
            ChatService(client=client).reply("Hello")
        assert "Invalid or missing API Key" in exc_info.value.message

    def test_connection_failure(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = APIConnectionError(
            request=httpx.Request("POST", OPENAI_URL)
        )

        with pytest.raises(ChatServiceError) as exc_info:
            ChatService(client=client).reply("Hello")
        assert exc_info.value.status_code == 500


# =============================================================================
# Client creation
# =============================================================================

def test_missing_api_key_raises(monkeypatch):
    monkeypatch.setattr(chat_service, "_client", None)
    monkeypatch.setattr(chat_service.settings, "OPENAI_API_KEY", None)

    with pytest.raises(ApiKeyNotConfiguredError) as exc_info:
        ChatService().reply("Hello")

    assert exc_info.value.to_dict()["code"] == "API_KEY_NOT_CONFIGURED"
