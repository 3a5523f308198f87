import logging
from dataclasses import dataclass

from openai import AsyncOpenAI

from chatforge.config import settings
from chatforge.errors import ProviderError
from chatforge.pipeline.prompts.generator import build_generation_prompt
from chatforge.pipeline.response_parser import parse_project_response
from chatforge.schemas.chat import ConversationTurn
from chatforge.schemas.project import Project

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = """I apologize, but I encountered an error generating your request. Please ensure:
1. Your OPENAI_API_KEY is set in the .env file
2. You have an active internet connection
3. The API key has sufficient quota

Error details: {error}

In the meantime, I can help you with the architecture and provide guidance on building your project."""


@dataclass
class GenerationResult:
    response: str
    project: Project | None = None


async def _complete(client: AsyncOpenAI | None, prompt: str) -> str:
    if client is None:
        raise ProviderError("No provider API key configured")

    response = await client.chat.completions.create(
        model=settings.openai_model,
        messages=[{"role": "user", "content": prompt}],
        temperature=settings.temperature,
        top_p=settings.top_p,
        **settings.max_tokens_param(settings.max_output_tokens),
    )
    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise ProviderError("Provider returned an empty response")
    return content


async def generate_with_ai(
    client: AsyncOpenAI | None,
    message: str,
    history: list[ConversationTurn] | None = None,
    project_id: str | None = None,
) -> GenerationResult:
    """Send one generation request and parse the reply into a project.

    Any failure while talking to the provider is not retried; it turns into
    an apologetic reply with no project so the chat always gets some text back.
    """
    prompt = build_generation_prompt(message, history or [])

    try:
        response_text = await _complete(client, prompt)
    except Exception as e:
        logger.exception("AI generation failed")
        return GenerationResult(response=FALLBACK_RESPONSE.format(error=e), project=None)

    project = parse_project_response(response_text, project_id)
    return GenerationResult(response=response_text, project=project)
