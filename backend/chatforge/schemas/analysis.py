from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    code: str | None = None


class CodeAnalysis(BaseModel):
    line_count: int = Field(alias="lineCount")
    has_comments: bool = Field(alias="hasComments")
    has_functions: bool = Field(alias="hasFunctions")
    has_error_handling: bool = Field(alias="hasErrorHandling")
    score: int
    quality: str  # "excellent", "good", "needs improvement"

    model_config = {"populate_by_name": True}
