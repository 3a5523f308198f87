from pydantic import BaseModel, Field

DESCRIPTION_MAX_CHARS = 200


class Project(BaseModel):
    id: str
    name: str
    description: str = Field(max_length=DESCRIPTION_MAX_CHARS)
    code: str
    language: str
    # Refreshed on every parse, including updates of an existing project.
    created_at: int = Field(alias="createdAt")

    model_config = {"populate_by_name": True}


class CodeUpdate(BaseModel):
    project_id: str = Field(alias="projectId")
    code: str

    model_config = {"populate_by_name": True}


class PublishRequest(BaseModel):
    project_id: str | None = Field(default=None, alias="projectId")
    code: str | None = None
    name: str | None = None

    model_config = {"populate_by_name": True}


class PublishResponse(BaseModel):
    success: bool
    url: str
    message: str = ""
