"""
Projection d'une ligne brute (clés libres, variantes de casse) vers les
deux formes de réponse : CompactItem (liste) et DetailedItem (détail).
"""

import math
from typing import Any, List, Mapping, Sequence, Union

from app.models.manifest import CompactItem, DetailedItem

# Ordre de priorité des alias par champ logique
ID_FIELDS = ("id", "ID", "Id")
TITLE_FIELDS = ("title", "name")
IMAGE_FIELDS = ("gif_url", "image_url", "url")
CAPTION_FIELDS = ("caption", "description")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def pick(row: Mapping[str, Any], fields: Sequence[str]) -> str:
    """Première valeur non vide parmi `fields`, sinon ""."""
    if not isinstance(row, Mapping):
        # ligne JSON scalaire ("a", 3, null...) : aucun champ
        return ""
    for name in fields:
        value = _text(row.get(name))
        if value:
            return value
    return ""


def row_id(row: Mapping[str, Any]) -> str:
    return pick(row, ID_FIELDS)


def numeric_or_text(value: str) -> Union[int, float, str]:
    if not value:
        return ""
    try:
        number = float(value)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    return int(number) if number.is_integer() else number


def compact_item(row: Mapping[str, Any]) -> CompactItem:
    return CompactItem(
        id=row_id(row),
        title=pick(row, TITLE_FIELDS),
        difficulty=numeric_or_text(pick(row, ("difficulty",))),
        image_url=pick(row, IMAGE_FIELDS),
    )


def split_tags(raw: str) -> List[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def detailed_item(row: Mapping[str, Any]) -> DetailedItem:
    item_id = row_id(row)
    title = pick(row, TITLE_FIELDS)
    image_url = pick(row, IMAGE_FIELDS)
    difficulty = pick(row, ("difficulty",))
    label = title or item_id

    image_markdown = f"![{label or 'image'}]({image_url})" if image_url else ""

    return DetailedItem(
        text=f"Found: {label} (Difficulty: {difficulty or 'N/A'})",
        id=item_id,
        title=title,
        caption=pick(row, CAPTION_FIELDS),
        image_url=image_url,
        image_markdown=image_markdown,
        solution=pick(row, ("solution",)),
        difficulty=difficulty,
        tags=split_tags(pick(row, ("tags",))),
    )
