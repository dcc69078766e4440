from typing import Optional

from fastapi import Depends, Security
from fastapi.security.api_key import APIKeyHeader, APIKeyQuery

from app.core.config import Settings
from app.core.deps import get_settings_dep
from app.core.errors import Unauthorized

api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)
api_key_query = APIKeyQuery(name="x-api-key", auto_error=False)


def get_api_key(
    header_key: Optional[str] = Security(api_key_header),
    query_key: Optional[str] = Security(api_key_query),
    settings: Settings = Depends(get_settings_dep),
) -> Optional[str]:
    """
    Vérifie la clé API (en-tête, sinon paramètre de requête).
    Sans WEBHOOK_KEY configurée, tout le monde passe.
    """
    key = header_key or query_key
    if settings.WEBHOOK_KEY and key != settings.WEBHOOK_KEY:
        raise Unauthorized()
    return key
