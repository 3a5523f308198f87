from fastapi import APIRouter, HTTPException

from chatforge.config import settings
from chatforge.schemas.analysis import AnalyzeRequest, CodeAnalysis
from chatforge.services.code_analysis import analyze_code

router = APIRouter(prefix="/api", tags=["meta"])

CAPABILITIES = {
    "models": [settings.openai_model],
    "languages": [
        "JavaScript", "TypeScript", "Python", "HTML", "CSS",
        "React", "Vue", "Angular", "Node.js", "Java", "C++",
        "C#", "Go", "Rust", "PHP", "Ruby", "Swift", "Kotlin",
    ],
    "features": [
        "Real-time code generation",
        "Multi-language support",
        "Interactive chat interface",
        "Code preview and editing",
        "One-click publishing",
        "Project management",
    ],
}


@router.get("/capabilities")
async def capabilities():
    return CAPABILITIES


@router.get("/config")
async def client_config():
    api_url = settings.public_api_url.rstrip("/")
    ws_url = api_url.replace("https://", "wss://", 1).replace("http://", "ws://", 1)
    return {"apiUrl": api_url, "wsUrl": f"{ws_url}/ws"}


@router.post("/analyze", response_model=CodeAnalysis)
async def analyze(data: AnalyzeRequest | None = None):
    if data is None or data.code is None:
        raise HTTPException(status_code=400, detail="Code is required")
    return analyze_code(data.code)
