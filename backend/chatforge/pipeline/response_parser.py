"""Turn a free-text model reply into a Project record.

Each field comes from its own optional pass over the text; defaults are
applied only when the reply is assembled, so a reply that drifts from the
requested template still yields a project as long as it carries code.
"""
import logging
import re
import time
import uuid
from dataclasses import dataclass

from chatforge.schemas.project import DESCRIPTION_MAX_CHARS, Project

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Untitled Project"
DEFAULT_LANGUAGE = "JavaScript"
DEFAULT_DESCRIPTION = "AI-generated project"

_NAME_RE = re.compile(r"\*\*Building:\s*(.+?)\*\*", re.IGNORECASE)
_LANGUAGE_RE = re.compile(r"\*\*Language/Framework:\*\*\s*(.+?)(?:\n|$)", re.IGNORECASE)
_CODE_BLOCK_RE = re.compile(r"```(\w+)?\n([\s\S]*?)```")
_DESCRIPTION_RE = re.compile(r"\*\*Building:.*?\*\*\n\n([\s\S]*?)(?:\*\*|$)", re.IGNORECASE)


@dataclass(frozen=True)
class CodeBlock:
    language: str | None
    code: str


def extract_name(text: str) -> str | None:
    match = _NAME_RE.search(text)
    return match.group(1).strip() if match else None


def extract_language(text: str) -> str | None:
    match = _LANGUAGE_RE.search(text)
    return match.group(1).strip() if match else None


def extract_code_blocks(text: str) -> list[CodeBlock]:
    return [
        CodeBlock(language=match.group(1), code=match.group(2).strip())
        for match in _CODE_BLOCK_RE.finditer(text)
    ]


def select_main_block(blocks: list[CodeBlock]) -> CodeBlock | None:
    """Longest block wins; the earliest one is kept on ties."""
    main = None
    for block in blocks:
        if main is None or len(block.code) > len(main.code):
            main = block
    return main


def extract_description(text: str) -> str | None:
    match = _DESCRIPTION_RE.search(text)
    if not match:
        return None
    return match.group(1).strip()[:DESCRIPTION_MAX_CHARS]


def _now_millis() -> int:
    return int(time.time() * 1000)


def parse_project_response(raw_text: str, existing_project_id: str | None = None) -> Project | None:
    """Build a Project from a model reply, or None when it carries no code.

    ``existing_project_id`` marks the reply as an edit of that project and is
    reused as the id. ``created_at`` is stamped with the current time on every
    call, updates included.
    """
    try:
        main = select_main_block(extract_code_blocks(raw_text))
        if main is None:
            return None

        description = extract_description(raw_text)
        return Project(
            id=existing_project_id or str(uuid.uuid4()),
            name=extract_name(raw_text) or DEFAULT_NAME,
            description=DEFAULT_DESCRIPTION if description is None else description,
            code=main.code,
            language=extract_language(raw_text) or main.language or DEFAULT_LANGUAGE,
            created_at=_now_millis(),
        )
    except Exception:
        logger.warning("Failed to extract project from model response", exc_info=True)
        return None
