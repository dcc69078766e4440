import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from app.core.config import get_settings
from app.core.cors import CORS_HEADERS, install_cors
from app.core.errors import ManifestError, ServerError
from app.core.logging import setup_logging
from app.routers import manifest, system

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Recherche dans les manifests de chapitres (sources JSON ou TSV distantes)",
    )

    # CORS permissif, en-têtes fixes
    install_cors(app)

    @app.exception_handler(ManifestError)
    async def manifest_error_handler(request: Request, exc: ManifestError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    # Servi hors du middleware CORS (ServerErrorMiddleware) : en-têtes ajoutés ici
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s", request.url.path)
        err = ServerError(str(exc) or None)
        return JSONResponse(status_code=err.status_code, content=err.to_body(), headers=CORS_HEADERS)

    # Routers
    app.include_router(system.router)
    app.include_router(manifest.router)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


app = create_app()
