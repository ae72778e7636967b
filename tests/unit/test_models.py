from __future__ import annotations

from datetime import datetime, timezone

from swagger_client.models import Category, Order, Pet, User


def test_pet_reads_camel_case_and_ignores_unknown_keys() -> None:
    pet = Pet.build_from_hash(
        {
            "id": 1,
            "category": {"id": 2, "name": "dogs"},
            "name": "doggie",
            "photoUrls": [],
            "unexpected": "ignored",
        }
    )

    assert pet.category == Category(id=2, name="dogs")
    assert not hasattr(pet, "unexpected")


def test_to_hash_uses_wire_names_and_drops_nulls() -> None:
    order = Order(id=3, pet_id=9, ship_date=datetime(2020, 1, 1, tzinfo=timezone.utc), status="placed")

    assert order.to_hash() == {
        "id": 3,
        "petId": 9,
        "shipDate": "2020-01-01T00:00:00Z",
        "status": "placed",
        "complete": False,
    }


def test_user_round_trips_through_hash() -> None:
    user = User(username="jdoe", first_name="J", user_status=1)
    assert User.build_from_hash(user.to_hash()) == user
