# =============================================================================
# core/models/chat.py - FinnaBot Chat Schemas
# =============================================================================
# These models define the API contract for the chat widget:
# - ChatRequest: the new user message plus the conversation so far
# - ChatResponse: the assistant's reply text
#
# The widget keeps history client-side in a parts-based format:
#   {"role": "user" | "model", "parts": [{"text": "..."}]}
# ChatTurn.to_openai_message() converts it to an OpenAI chat message.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    """
    Who sent the message in a conversation.

    - user: The human user
    - model: FinnaBot (mapped to "assistant" for OpenAI)
    """
    USER = "user"
    MODEL = "model"


class ChatPart(BaseModel):
    text: str = ""


class ChatTurn(BaseModel):
    """One message of the client-held conversation history."""
    role: MessageRole
    parts: list[ChatPart] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """All parts joined into a single string."""
        return "".join(part.text for part in self.parts)

    def to_openai_message(self) -> dict[str, str]:
        role = "assistant" if self.role == MessageRole.MODEL else "user"
        return {"role": role, "content": self.text}


class ChatRequest(BaseModel):
    """
    Schema for sending a chat message.

    Example:
        {
            "message": "How much should I keep in an emergency fund?",
            "history": [
                {"role": "user", "parts": [{"text": "Hi"}]},
                {"role": "model", "parts": [{"text": "Hello! How can I help?"}]}
            ]
        }
    """

    # Blank messages are rejected by the router with a 400
    message: str | None = Field(
        default=None,
        max_length=4000,
        description="The user's new message"
    )

    history: list[ChatTurn] = Field(
        default_factory=list,
        description="Previous turns, oldest first"
    )


class ChatResponse(BaseModel):
    """FinnaBot's reply."""
    text: str
