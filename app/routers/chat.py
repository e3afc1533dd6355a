# =============================================================================
# app/routers/chat.py - FinnaBot Chat Endpoint
# =============================================================================
# POST /api/chat {"message": "...", "history": [...]} -> {"text": "..."}
#
# The handler is a plain `def` because the OpenAI client is synchronous;
# FastAPI runs it in the threadpool.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import ChatDep
from app.exceptions import MissingParameterError
from core.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
def chat(service: ChatDep, request: ChatRequest | None = None):
    """
    Send a message to FinnaBot.

    The client resends the conversation in `history` each time; nothing is
    stored server-side.

    Errors:
    - 400: message missing or blank
    - 429: model provider rate limit
    - 500: API key missing/invalid, provider failure or empty reply
    """
    request = request or ChatRequest()
    message = (request.message or "").strip()
    if not message:
        raise MissingParameterError("message", "Message is required")

    logger.info(f"Chat message received ({len(request.history)} previous turns)")
    return ChatResponse(text=service.reply(message, request.history))
