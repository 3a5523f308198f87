import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatforge.config import settings
from chatforge.logging_config import configure_logging
from chatforge.routers import generate, meta, publish, realtime
from chatforge.services.connection_registry import ConnectionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.connections = ConnectionRegistry()
    logger.info("Chatforge server starting (model=%s)", settings.openai_model)
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; generation will return the fallback reply")
    yield
    logger.info("Chatforge server stopping (%d client(s) connected)", len(app.state.connections))


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Chatforge", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {problems}"})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error", "details": str(exc)})

    app.include_router(generate.router)
    app.include_router(publish.router)
    app.include_router(meta.router)
    app.include_router(realtime.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "message": "Chatforge server is running"}

    return app


app = create_app()
