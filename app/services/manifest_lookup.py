import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

import httpx

from app.core.errors import (
    BadManifestFormat,
    InvalidChapter,
    ManifestError,
    NotFound,
    ServerError,
)
from app.models.manifest import DetailedItem, ListingResponse, ManifestQuery
from app.services.manifest_source import ManifestSource
from app.services.projector import compact_item, detailed_item, row_id

logger = logging.getLogger(__name__)

LISTING_LIMIT = 50


def _first_filled(params: Mapping, *names: str) -> Any:
    for name in names:
        value = params.get(name)
        if value:
            return value
    return None


def parse_query(params: Mapping) -> ManifestQuery:
    """
    Extrait chapter (alias ch) et manifest_id (alias id) ; trim, "" -> None.
    """
    def clean(value: Any):
        if value is None:
            return None
        return str(value).strip() or None

    return ManifestQuery(
        chapter=clean(_first_filled(params, "chapter", "ch")),
        manifest_id=clean(_first_filled(params, "manifest_id", "id")),
    )


class ManifestLookup:
    """
    Orchestration d'une requête : chapitre -> URL -> lignes -> liste ou détail.
    """

    def __init__(self, source: ManifestSource, chapter_map: Dict[str, str]):
        self.source = source
        self.chapter_map = dict(chapter_map)

    def resolve_url(self, chapter: Optional[str]) -> str:
        if not chapter or chapter not in self.chapter_map:
            raise InvalidChapter()
        return self.chapter_map[chapter]

    async def run(self, query: ManifestQuery) -> Union[ListingResponse, DetailedItem]:
        url = self.resolve_url(query.chapter)

        try:
            rows = await self.source.fetch_rows(url)
        except ManifestError as e:
            raise ServerError(e.text) from e
        except httpx.HTTPError as e:
            logger.warning("manifest fetch error for %s: %s", url, e)
            raise ServerError(str(e) or "Server error") from e

        if not isinstance(rows, list):
            raise BadManifestFormat()

        if not query.manifest_id:
            return self.listing(query.chapter, rows)
        return self.find(rows, query.manifest_id)

    @staticmethod
    def listing(chapter: str, rows: list) -> ListingResponse:
        items = [compact_item(r) for r in rows[:LISTING_LIMIT]]
        return ListingResponse(
            text=f"Manifest {chapter} — returning {len(items)} items.",
            items=items,
        )

    @staticmethod
    def find(rows: list, manifest_id: str) -> DetailedItem:
        wanted = manifest_id.lower()
        found = next((r for r in rows if row_id(r).lower() == wanted), None)
        if found is None:
            raise NotFound()
        return detailed_item(found)
