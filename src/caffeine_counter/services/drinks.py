"""Services for the shared drink catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from caffeine_counter.domain.drinks import DEFAULT_IMAGE_URL, DrinkType, SizeVariant
from caffeine_counter.domain.errors import DuplicateName, NotFound, ValidationFailed
from caffeine_counter.services.entries import parse_caffeine_mg

logger = logging.getLogger(__name__)


class DrinkTypeRepository(Protocol):
    """Persistence interface for drink types."""

    def create_drink_type(
        self, name: str, image_url: str, sizes: list[SizeVariant]
    ) -> DrinkType:
        """Insert a drink type, raising DuplicateName on a taken name."""

    def get_drink_type(self, drink_type_id: UUID) -> DrinkType | None:
        """Return a drink type by id, including deleted ones."""

    def find_by_name(self, name: str) -> DrinkType | None:
        """Return the live drink type with exactly this name, if any."""

    def list_drink_types(self) -> list[DrinkType]:
        """Return live drink types sorted by name."""

    def mark_deleted(self, drink_type_id: UUID) -> None:
        """Flag a drink type as deleted."""


@dataclass
class DrinkTypeService:
    """Application service for drink type operations."""

    repository: DrinkTypeRepository

    def list_types(self) -> list[DrinkType]:
        """Return every live drink type."""
        return self.repository.list_drink_types()

    def create(
        self,
        name: str | None,
        image_url: str | None,
        sizes: list[dict[str, object]] | None,
    ) -> DrinkType:
        """Validate and store a new drink type."""
        cleaned_name = (name or "").strip()
        if not cleaned_name or not sizes:
            raise ValidationFailed("Name and at least one size variant are required")
        variants = parse_sizes(sizes)
        if self.repository.find_by_name(cleaned_name):
            raise DuplicateName("Drink type already exists")
        drink_type = self.repository.create_drink_type(
            name=cleaned_name,
            image_url=(image_url or "").strip() or DEFAULT_IMAGE_URL,
            sizes=variants,
        )
        logger.info(
            "Created drink type",
            extra={"drink_type_id": str(drink_type.id), "drink_name": cleaned_name},
        )
        return drink_type

    def delete(self, drink_type_id: UUID | None) -> None:
        """Soft-delete a drink type."""
        drink_type = (
            self.repository.get_drink_type(drink_type_id) if drink_type_id else None
        )
        if drink_type is None:
            raise NotFound("Drink type not found")
        if drink_type.deleted:
            raise ValidationFailed("Drink type already deleted")
        self.repository.mark_deleted(drink_type.id)
        logger.info("Deleted drink type", extra={"drink_type_id": str(drink_type.id)})


def parse_sizes(raw_sizes: list[dict[str, object]]) -> list[SizeVariant]:
    """Validate size payloads into variants with unique names."""
    variants: list[SizeVariant] = []
    seen: set[str] = set()
    for raw in raw_sizes:
        size_name = raw.get("name") if isinstance(raw, dict) else None
        cleaned = size_name.strip() if isinstance(size_name, str) else ""
        amount = parse_caffeine_mg(raw.get("caffeineMg")) if cleaned else None
        if amount is None:
            raise ValidationFailed(
                "Each size must have a name and positive caffeine amount"
            )
        if cleaned.lower() in seen:
            raise ValidationFailed("Size names must be unique")
        seen.add(cleaned.lower())
        variants.append(SizeVariant(name=cleaned, caffeine_mg=amount))
    return variants
