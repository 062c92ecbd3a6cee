"""Supabase implementation for the drink catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client, PostgrestAPIError

from caffeine_counter.domain.drinks import DEFAULT_IMAGE_URL, DrinkType, SizeVariant
from caffeine_counter.domain.errors import DuplicateName
from caffeine_counter.services.drinks import DrinkTypeRepository

_TABLE = "drink_types"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseDrinkTypeRepository(DrinkTypeRepository):
    """Supabase-backed repository for drink types."""

    client: Client

    def create_drink_type(
        self, name: str, image_url: str, sizes: list[SizeVariant]
    ) -> DrinkType:
        """Insert a drink type and return it."""
        try:
            response = (
                self.client.table(_TABLE)
                .insert(
                    {
                        "name": name,
                        "image_url": image_url,
                        "sizes": [
                            {"name": size.name, "caffeine_mg": size.caffeine_mg}
                            for size in sizes
                        ],
                        "deleted": False,
                        "created_at": datetime.now(tz=UTC).isoformat(),
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateName("Drink type already exists") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create drink type")
        return _parse_drink_type(response.data[0])

    def get_drink_type(self, drink_type_id: UUID) -> DrinkType | None:
        """Return a drink type by id, including deleted ones."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(drink_type_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_drink_type(response.data[0])

    def find_by_name(self, name: str) -> DrinkType | None:
        """Return the live drink type with this exact name, if any."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("name", name)
            .eq("deleted", False)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_drink_type(response.data[0])

    def list_drink_types(self) -> list[DrinkType]:
        """Return live drink types sorted by name."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("deleted", False)
            .order("name", desc=False)
            .execute()
        )
        return [_parse_drink_type(row) for row in response.data or []]

    def mark_deleted(self, drink_type_id: UUID) -> None:
        """Flag a drink type as deleted."""
        self.client.table(_TABLE).update({"deleted": True}).eq(
            "id", str(drink_type_id)
        ).execute()


def _parse_drink_type(row: dict[str, object]) -> DrinkType:
    """Parse a drink type row into a domain model."""
    raw_sizes = row.get("sizes") or []
    created_raw = row.get("created_at")
    return DrinkType(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        image_url=str(row.get("image_url") or DEFAULT_IMAGE_URL),
        sizes=tuple(
            SizeVariant(
                name=str(size.get("name", "")),
                caffeine_mg=float(size.get("caffeine_mg", 0.0)),
            )
            for size in raw_sizes
        ),
        deleted=bool(row.get("deleted", False)),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else datetime.min.replace(tzinfo=UTC)
        ),
    )
