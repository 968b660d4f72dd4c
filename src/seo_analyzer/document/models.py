# src/seo_analyzer/document/models.py
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """A heading found in a rich-text tree, e.g. {'tag': 'h2', 'text': 'Our services'}."""
    model_config = ConfigDict(frozen=True)

    tag: str
    text: str = ""

    @property
    def level(self) -> int:
        """Numeric level for h1-h6, 0 for anything else."""
        if len(self.tag) == 2 and self.tag[0] == "h" and self.tag[1] in "123456":
            return int(self.tag[1])
        return 0


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    text: str = ""


class ImageStats(BaseModel):
    """Image counters: how many images, how many carry alt text and the alt strings themselves."""
    total: int = 0
    with_alt: int = 0
    alt_texts: List[str] = Field(default_factory=list)

    def merge(self, other: "ImageStats") -> "ImageStats":
        return ImageStats(
            total=self.total + other.total,
            with_alt=self.with_alt + other.with_alt,
            alt_texts=self.alt_texts + other.alt_texts,
        )

    def add_media(self, media: dict) -> "ImageStats":
        """Counts a non rich-text media reference (hero background, social image)."""
        alt = media.get("alt")
        has_alt = isinstance(alt, str) and bool(alt.strip())
        return ImageStats(
            total=self.total + 1,
            with_alt=self.with_alt + (1 if has_alt else 0),
            alt_texts=self.alt_texts + ([alt.strip()] if has_alt else []),
        )


class ListInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    list_type: Literal["bullet", "number"] = "bullet"
    item_count: int = 0
