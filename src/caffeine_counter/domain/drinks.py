"""Domain models for the drink catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_IMAGE_URL = "/images/noImage.png"


@dataclass(frozen=True)
class SizeVariant:
    """A named serving size with its caffeine content."""

    name: str
    caffeine_mg: float


@dataclass(frozen=True)
class DrinkType:
    """A drink in the shared catalog."""

    id: UUID
    name: str
    image_url: str
    sizes: tuple[SizeVariant, ...]
    deleted: bool
    created_at: datetime
