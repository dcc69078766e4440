import json
import logging
from typing import Any, List, Optional

import httpx

from app.core.errors import FetchError, ParseError
from app.services.cache import TTLCache
from app.utils.tsv import parse_tsv

logger = logging.getLogger(__name__)


class ManifestSource:
    """
    Récupère un manifest distant (JSON ou TSV) et le normalise en liste de lignes.
    Seuls les résultats TSV sont mis en cache ; les réponses JSON sont
    renvoyées telles quelles à chaque appel.
    """

    def __init__(
        self,
        cache: TTLCache,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.cache = cache
        self.timeout = timeout
        self._transport = transport  # httpx.MockTransport en test

    async def fetch_rows(self, url: str) -> List[Any]:
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("cache hit: %s", url)
            return cached

        now = self.cache.now()
        logger.info("fetching manifest: %s", url)
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            resp = await client.get(url)

        if not resp.is_success:
            logger.warning("manifest fetch failed (%s): %s", resp.status_code, url)
            raise FetchError(resp.status_code)

        content_type = resp.headers.get("content-type", "")
        text = resp.text
        if "application/json" in content_type or text.strip().startswith("{"):
            return self._rows_from_json(text)

        rows = parse_tsv(text)
        self.cache.set(url, rows, fetched_at=now)
        return rows

    @staticmethod
    def _rows_from_json(text: str) -> List[Any]:
        try:
            parsed = json.loads(text)
        except ValueError as e:
            logger.warning("manifest JSON invalid: %s", e)
            raise ParseError() from e

        if isinstance(parsed, list):
            return parsed
        if isinstance(parsed, dict) and isinstance(parsed.get("items"), list):
            return parsed["items"]
        return []
