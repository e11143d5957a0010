from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import List, Optional
import logging

from creative_coach.api.errors import to_http_exception
from creative_coach.services.claude_service import get_claude_service
from creative_coach.services.gemini_service import create_text_content, get_gemini_service
from creative_coach.services.openai_service import build_user_message, get_openai_service

router = APIRouter(
    tags=["Chat"],
)

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    role: str = Field(..., description="Message role: 'user', 'assistant' or 'system'")
    content: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    message: str = Field(..., description="User's message", min_length=1)
    conversation_history: Optional[List[ChatMessage]] = Field(
        default=[],
        description="Previous conversation messages for context"
    )
    system_prompt: Optional[str] = None
    model: Optional[str] = Field(default=None, description="Model or deployment override")
    image_data_url: Optional[str] = Field(default=None, description="data: URL of an attached image (OpenAI only)")
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class ChatResponse(BaseModel):
    response: str
    provider: str


@router.post("/openai", response_model=ChatResponse)
async def chat_openai(chat_request: ChatRequest):
    try:
        messages = [message.model_dump() for message in chat_request.conversation_history or []]
        if chat_request.system_prompt:
            messages.insert(0, {"role": "system", "content": chat_request.system_prompt})
        messages.append(build_user_message(chat_request.message, chat_request.image_data_url))

        reply = await get_openai_service().send_message(messages, deployment=chat_request.model)
        return ChatResponse(response=reply["content"] or "", provider="openai")
    except Exception as e:
        raise to_http_exception(e, "chat with OpenAI")


@router.post("/claude", response_model=ChatResponse)
async def chat_claude(chat_request: ChatRequest):
    try:
        options = {}
        if chat_request.system_prompt:
            options["system"] = chat_request.system_prompt
        if chat_request.model:
            options["model"] = chat_request.model
        if chat_request.temperature is not None:
            options["temperature"] = chat_request.temperature
        if chat_request.max_tokens:
            options["max_tokens"] = chat_request.max_tokens

        messages = [message.model_dump() for message in chat_request.conversation_history or []]
        messages.append({"role": "user", "content": chat_request.message})

        blocks = await get_claude_service().send_message(messages, **options)
        text = "".join(block.get("text", "") for block in blocks if block.get("type") == "text")
        return ChatResponse(response=text, provider="claude")
    except Exception as e:
        raise to_http_exception(e, "chat with Claude")


@router.post("/gemini", response_model=ChatResponse)
async def chat_gemini(chat_request: ChatRequest):
    try:
        options = {}
        if chat_request.model:
            options["model"] = chat_request.model
        if chat_request.temperature is not None:
            options["temperature"] = chat_request.temperature

        contents = []
        if chat_request.system_prompt:
            contents.append({"role": "system", "parts": [create_text_content(chat_request.system_prompt)]})
        for message in chat_request.conversation_history or []:
            contents.append({"role": message.role, "parts": [create_text_content(message.content)]})
        contents.append({"role": "user", "parts": [create_text_content(chat_request.message)]})

        parts = await get_gemini_service().send_message(contents, **options)
        text = "".join(part.get("text") or "" for part in parts if "text" in part)
        return ChatResponse(response=text, provider="gemini")
    except Exception as e:
        raise to_http_exception(e, "chat with Gemini")
