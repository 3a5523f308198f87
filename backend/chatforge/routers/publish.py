from fastapi import APIRouter, HTTPException

from chatforge.schemas.project import PublishRequest, PublishResponse
from chatforge.services.publish_service import publish_project

router = APIRouter(prefix="/api", tags=["publish"])


@router.post("/publish", response_model=PublishResponse)
async def publish(data: PublishRequest | None = None):
    if data is None or not data.project_id or not data.code:
        raise HTTPException(status_code=400, detail="Project ID and code are required")
    return publish_project(data.project_id, data.name)
