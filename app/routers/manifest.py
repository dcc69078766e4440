import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.core.deps import get_manifest_source, get_settings_dep
from app.core.errors import ManifestError, ServerError
from app.core.security import get_api_key
from app.models.manifest import ErrorResponse
from app.services.manifest_lookup import ManifestLookup, parse_query
from app.services.manifest_source import ManifestSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["manifest"])


async def _request_params(request: Request) -> dict:
    # POST : corps JSON ; sinon query string
    if request.method == "POST":
        try:
            body = await request.json()
        except (ValueError, UnicodeDecodeError):
            return {}
        return body if isinstance(body, dict) else {}
    return dict(request.query_params)


@router.api_route(
    "/manifest-lookup",
    methods=["GET", "POST"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def manifest_lookup(
    request: Request,
    _: str = Depends(get_api_key),
    settings: Settings = Depends(get_settings_dep),
    source: ManifestSource = Depends(get_manifest_source),
):
    try:
        query = parse_query(await _request_params(request))
        return await ManifestLookup(source, settings.CHAPTER_MAP).run(query)
    except ManifestError:
        raise
    except Exception as e:
        logger.exception("manifest-lookup error")
        err = ServerError(str(e) or None)
        return JSONResponse(status_code=err.status_code, content=err.to_body())
