from typing import Literal

from pydantic import BaseModel, Field

from chatforge.schemas.project import Project


class ConversationTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: int = 0

    model_config = {"frozen": True}


class GenerateRequest(BaseModel):
    message: str | None = None
    context: list[ConversationTurn] = []
    project_id: str | None = Field(default=None, alias="projectId")

    model_config = {"populate_by_name": True}


class GenerateResponse(BaseModel):
    response: str
    project: Project | None = None
