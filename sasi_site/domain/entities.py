from datetime import UTC, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
ProgramCategory = Literal["education", "health", "nutrition", "events", "wellness", "other"]

PROGRAM_CATEGORIES: tuple[str, ...] = (
    "education",
    "health",
    "nutrition",
    "events",
    "wellness",
    "other",
)


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Programs ---

class ProgramStat(BaseModel):
    icon: str = ""
    value: str = ""
    label: str = ""

class ProgramImage(BaseModel):
    url: str
    alt: str = ""

class Program(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    title: str
    slug: str
    category: ProgramCategory
    icon: str = "fas fa-heart"
    short_description: str = Field(max_length=250)
    full_description: str
    highlights: list[str] = Field(default_factory=list)
    stats: list[ProgramStat] = Field(default_factory=list)
    image: ProgramImage
    is_active: bool = True
    order: int = 0
    page_url: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
