from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NoteType(str, Enum):
    top = "top"
    middle = "middle"
    base = "base"


class _Category(str, Enum):
    @classmethod
    def parse(cls, label: str | None):
        """Return the member whose value matches *label* ignoring case, or ``None``."""
        if not label:
            return None
        wanted = label.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class Longevity(_Category):
    light = "Light"
    medium = "Medium"
    long = "Long"
    very_long = "Very Long"


class Sillage(_Category):
    light = "Light"
    medium = "Medium"
    heavy = "Heavy"
    very_heavy = "Very Heavy"


class AromaTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class Note(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    perfume_id: int
    type: NoteType
    note_name: str
    intensity: int = Field(default=5, ge=1, le=10)


class Perfume(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    brand: str
    type: str = ""
    category: str = ""
    target_audience: str = ""
    longevity: str = ""
    sillage: str = ""
    price: float = Field(default=0.0, ge=0.0)
    description: str = ""
    image_url: str = ""
    aroma_tags: list[AromaTag] = Field(default_factory=list)
    notes: list[Note] = Field(default_factory=list)

    @property
    def longevity_category(self) -> Longevity | None:
        return Longevity.parse(self.longevity)

    @property
    def sillage_category(self) -> Sillage | None:
        return Sillage.parse(self.sillage)

    @property
    def aroma_names(self) -> set[str]:
        return {tag.name.lower() for tag in self.aroma_tags}

    @property
    def aroma_slugs(self) -> set[str]:
        return {tag.slug for tag in self.aroma_tags}


class PerfumePage(BaseModel):
    items: list[Perfume]
    total: int
    page: int
    limit: int


class AromaRequest(BaseModel):
    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class NoteRequest(BaseModel):
    type: NoteType
    note_name: str = Field(..., min_length=1)
    intensity: int = Field(default=5, ge=1, le=10)


class PerfumeRequest(BaseModel):
    """Writable perfume fields; aroma tags are referenced by slug."""

    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    type: str = ""
    category: str = ""
    target_audience: str = ""
    longevity: str = ""
    sillage: str = ""
    price: float = Field(default=0.0, ge=0.0)
    description: str = ""
    image_url: str = ""
    aroma_slugs: list[str] = Field(default_factory=list)
    notes: list[NoteRequest] = Field(default_factory=list)
