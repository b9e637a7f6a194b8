import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, status
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from rentx.api.api import api_router
from rentx.core.config import Settings, settings as default_settings
from rentx.core.exceptions import add_exception_handlers
from rentx.core.middleware import add_middleware
from rentx.db.session import create_db_engine
from rentx.db.store import Store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The schema is created before any request is served. If the store cannot
    be opened the error propagates and the server does not start.
    """
    logger.info("Starting RentX service...")
    app.state.store.initialize()
    Path(app.state.settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    yield
    logger.info("Shutting down RentX service")
    app.state.store.engine.dispose()


def _add_frontend_routes(app: FastAPI, settings: Settings) -> None:
    """Serve stored images and the single-page front end."""
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    static_dir = Path(settings.STATIC_DIR).resolve()

    async def spa_fallback(scope, receive, send):
        """Serve a built front-end file, or index.html for client-side routes."""
        candidate = (static_dir / scope["path"].lstrip("/")).resolve()
        index = static_dir / "index.html"
        if candidate.is_relative_to(static_dir) and candidate.is_file():
            response = FileResponse(candidate)
        elif index.is_file():
            response = FileResponse(index)
        else:
            response = PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
        await response(scope, receive, send)

    # Runs only when no route matched the path at all, so a wrong method on
    # an API route still answers 405.
    app.router.default = spa_fallback


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own store."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="RentX API for rental listings",
        version="0.1.0",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = Store(create_db_engine(settings.DATABASE_URL))

    add_middleware(app, settings)
    add_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)
    _add_frontend_routes(app, settings)

    return app


# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running at http://localhost:{default_settings.PORT}")
    uvicorn.run("rentx.main:app", host=default_settings.HOST, port=default_settings.PORT)
