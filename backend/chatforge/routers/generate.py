import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from chatforge.dependencies import get_broadcaster, get_openai_client
from chatforge.pipeline.dispatcher import generate_with_ai
from chatforge.schemas.chat import GenerateRequest, GenerateResponse
from chatforge.services.broadcaster import UpdateBroadcaster

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    data: GenerateRequest | None = None,
    client: AsyncOpenAI | None = Depends(get_openai_client),
    broadcaster: UpdateBroadcaster = Depends(get_broadcaster),
):
    if data is None or not data.message:
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        result = await generate_with_ai(client, data.message, data.context, data.project_id)
        if result.project:
            await broadcaster.broadcast(result.project)
    except Exception as e:
        logger.exception("Generation error")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate response", "details": str(e)},
        )

    return GenerateResponse(response=result.response, project=result.project)
