import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from utils.llm_client import chat_completion

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

CREATORS_AZ = "Bu layihə Hacktivities komandası tərəfindən yaradılmışdır."
CREATORS_EN = "This project was created by the Hacktivities team."

SYSTEM_PROMPT = f"""You are a helpful travel assistant for a tourism guide application. Detect the language of the user's question (Azerbaijani, English or Russian) and reply in that SAME language.

Application structure and features:
- The home page lets users select a country.
- After selecting a country, they can choose a category: "Hotels", "Restaurants", "Attractions", "Cuisine", "Visa & Essentials", "Culture & Tips" and "Useful Words".
- The application has an internal reservation system: hotels and restaurant tables can be booked directly in the app, using the "Reserve" button on a place's page.
- The application has an internal currency converter.
- Users can contact the site owners with the headset button at the top, next to the flag icons.

Your tasks:
1. If the question can be answered by information or features in the app, guide the user to where they can find it (for example: to learn about hotels in Spain, select Spain on the home page and open the "Hotels" category).
2. If the user asks who created the project or who the developer is, answer exactly "{CREATORS_AZ}" for Azerbaijani questions, or "{CREATORS_EN}" otherwise.
3. For questions unrelated to the app's content (weather, flights and so on), give a general, helpful answer.
4. Questions about currency conversion go to the internal currency converter.

Keep answers concise. Do not use markdown formatting."""


class ChatRequest(BaseModel):
    prompt: str


class ChatResponse(BaseModel):
    response: str


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(settings.chat_rate_limit)
async def chat(request: Request, req: ChatRequest):
    if not req.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt cannot be empty")
    try:
        reply = await chat_completion(
            prompt=f"User's question: {req.prompt.strip()}",
            system=SYSTEM_PROMPT,
            temperature=0.7,
            max_tokens=500,
        )
    except Exception:
        logger.exception("Chat failed")
        raise HTTPException(status_code=500, detail="The assistant could not answer right now")
    if not reply.strip():
        logger.error("Chat model returned an empty reply")
        raise HTTPException(status_code=500, detail="AI did not return a response.")
    return ChatResponse(response=reply.strip())
