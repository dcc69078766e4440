from fastapi import APIRouter, Depends

from app.core.config import get_settings
from app.core.deps import get_manifest_source
from app.services.manifest_source import ManifestSource

router = APIRouter(tags=["system"])

@router.get("/health")
def health(source: ManifestSource = Depends(get_manifest_source)):
    s = get_settings()
    return {"status": "ok", "version": s.APP_VERSION, "cache": source.cache.summary()}

@router.get("/version")
def version():
    s = get_settings()
    return {"name": s.APP_NAME, "version": s.APP_VERSION, "env": s.APP_ENV}
