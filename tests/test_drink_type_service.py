"""Tests for drink type service."""

from uuid import uuid4

import pytest

from caffeine_counter.domain.drinks import DEFAULT_IMAGE_URL
from caffeine_counter.domain.errors import DuplicateName, NotFound, ValidationFailed
from caffeine_counter.services.drinks import DrinkTypeService
from tests.conftest import InMemoryDrinkTypeRepository


def test_create_trims_and_defaults_image() -> None:
    repo = InMemoryDrinkTypeRepository()
    service = DrinkTypeService(repo)

    drink_type = service.create(
        name="  Americano ",
        image_url="   ",
        sizes=[
            {"name": " Small ", "caffeineMg": 75},
            {"name": "Large", "caffeineMg": "150.5"},
        ],
    )

    assert drink_type.name == "Americano"
    assert drink_type.image_url == DEFAULT_IMAGE_URL
    assert [size.name for size in drink_type.sizes] == ["Small", "Large"]
    assert drink_type.sizes[1].caffeine_mg == 150.5
    assert drink_type.deleted is False


def test_list_types_sorted_by_name() -> None:
    service = DrinkTypeService(InMemoryDrinkTypeRepository())
    service.create("Mocha", None, [{"name": "Tall", "caffeineMg": 95}])
    service.create("Chai", None, [{"name": "Tall", "caffeineMg": 50}])

    assert [t.name for t in service.list_types()] == ["Chai", "Mocha"]


@pytest.mark.parametrize(
    ("name", "sizes"),
    [
        ("", [{"name": "Tall", "caffeineMg": 95}]),
        ("Mocha", []),
        ("Mocha", None),
        ("Mocha", [{"name": "", "caffeineMg": 95}]),
        ("Mocha", [{"name": "Tall", "caffeineMg": 0}]),
        ("Mocha", [{"name": "Tall"}]),
        ("Mocha", ["Tall"]),
        ("Mocha", [{"name": "Tall", "caffeineMg": 95}, {"name": "tall", "caffeineMg": 5}]),
    ],
)
def test_create_rejects_invalid_input(name, sizes) -> None:  # type: ignore[no-untyped-def]
    repo = InMemoryDrinkTypeRepository()

    with pytest.raises(ValidationFailed):
        DrinkTypeService(repo).create(name, None, sizes)

    assert repo.drink_types == {}


def test_create_rejects_duplicate_trimmed_name() -> None:
    repo = InMemoryDrinkTypeRepository()
    service = DrinkTypeService(repo)
    service.create("Latte", None, [{"name": "Tall", "caffeineMg": 75}])

    with pytest.raises(DuplicateName):
        service.create(" Latte  ", None, [{"name": "Grande", "caffeineMg": 150}])

    assert len(repo.drink_types) == 1


def test_delete_is_soft_and_hides_type() -> None:
    repo = InMemoryDrinkTypeRepository()
    service = DrinkTypeService(repo)
    drink_type = service.create("Latte", None, [{"name": "Tall", "caffeineMg": 75}])

    service.delete(drink_type.id)

    assert repo.drink_types[drink_type.id].deleted is True
    assert service.list_types() == []


def test_delete_twice_is_rejected() -> None:
    service = DrinkTypeService(InMemoryDrinkTypeRepository())
    drink_type = service.create("Latte", None, [{"name": "Tall", "caffeineMg": 75}])
    service.delete(drink_type.id)

    with pytest.raises(ValidationFailed):
        service.delete(drink_type.id)


def test_delete_missing_type() -> None:
    with pytest.raises(NotFound):
        DrinkTypeService(InMemoryDrinkTypeRepository()).delete(uuid4())


def test_name_can_be_reused_after_delete() -> None:
    service = DrinkTypeService(InMemoryDrinkTypeRepository())
    first = service.create("Latte", None, [{"name": "Tall", "caffeineMg": 75}])
    service.delete(first.id)

    second = service.create("Latte", None, [{"name": "Tall", "caffeineMg": 80}])

    assert second.id != first.id
