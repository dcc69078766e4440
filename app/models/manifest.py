from typing import List, Optional, Union
from pydantic import BaseModel, Field


Difficulty = Union[int, float, str]


class CompactItem(BaseModel):
    id: str = ""
    title: str = ""
    difficulty: Difficulty = Field("", description="Numérique si convertible, sinon texte brut")
    image_url: str = ""


class DetailedItem(BaseModel):
    text: str = Field(..., description="Résumé lisible")
    id: str = ""
    title: str = ""
    caption: str = ""
    image_url: str = ""
    image_markdown: str = ""
    solution: str = ""
    difficulty: str = ""
    tags: List[str] = []


class ListingResponse(BaseModel):
    text: str
    items: List[CompactItem]


class ErrorResponse(BaseModel):
    error: str
    text: Optional[str] = None


class ManifestQuery(BaseModel):
    chapter: Optional[str] = None
    manifest_id: Optional[str] = None
