import uvicorn

from chatforge.config import settings


def main() -> None:
    uvicorn.run("chatforge.main:app", host="0.0.0.0", port=settings.port, reload=settings.app_env == "development")


if __name__ == "__main__":
    main()
