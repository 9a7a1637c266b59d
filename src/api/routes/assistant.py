from fastapi import APIRouter, Depends, status
from pydantic import Field

from src.api.error import unwrap
from src.api.responses import envelope
from src.app.services.chat_client import IChatClient
from src.app.use_cases.assistant import ChatUseCase
from src.app.use_cases.schema import CamelModel
from src.depends import get_chat_client

router = APIRouter(prefix="/ai", tags=["AI"])


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1)


@router.post("/chat", status_code=status.HTTP_200_OK)
async def chat(request: ChatRequest, client: IChatClient = Depends(get_chat_client)):
    """
    Ask the site assistant a question. Public.

    Raises:
        - 500 Internal Server Error: The language model provider failed
    """
    reply = unwrap(await ChatUseCase(client).execute(request.message))
    return envelope(data={"reply": reply})
