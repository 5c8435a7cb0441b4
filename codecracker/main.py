import logging

from fastapi import FastAPI

from codecracker.api.v1.router import api_router
from codecracker.core.config import get_settings

settings = get_settings()


def configure_logging() -> None:
    """Set the root log level from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """Build the cracking API with its routes mounted under the v1 prefix."""
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Detect ciphers and encodings and recover their plaintext.",
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
    )
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "codecracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
