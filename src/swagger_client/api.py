"""Generated endpoint wrappers for the Petstore API."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable
from urllib.parse import quote

from .models import Order, Pet, SwaggerModel, User

RequestFn = Callable[..., Any]


def _to_body(value: SwaggerModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(value, SwaggerModel):
        return value.to_hash()
    return dict(value)


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class PetApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def add_pet(self, pet: Pet | Mapping[str, Any]) -> None:
        return self._request("pet.add", "POST", "/pet", json_body=_to_body(pet))

    def update_pet(self, pet: Pet | Mapping[str, Any]) -> None:
        return self._request("pet.update", "PUT", "/pet", json_body=_to_body(pet))

    def find_pets_by_status(self, status: list[str]) -> list[Pet]:
        return self._request(
            "pet.find_by_status",
            "GET",
            "/pet/findByStatus",
            query={"status": status},
            return_type="Array<Pet>",
        )

    def get_pet_by_id(self, pet_id: int) -> Pet | None:
        return self._request("pet.get", "GET", f"/pet/{_segment(pet_id)}", return_type="Pet")

    def update_pet_with_form(self, pet_id: int, *, name: str | None = None, status: str | None = None) -> None:
        form = {key: value for key, value in {"name": name, "status": status}.items() if value is not None}
        return self._request("pet.update_with_form", "POST", f"/pet/{_segment(pet_id)}", data=form)

    def delete_pet(self, pet_id: int, *, api_key: str | None = None) -> None:
        headers = {"api_key": api_key} if api_key else None
        return self._request("pet.delete", "DELETE", f"/pet/{_segment(pet_id)}", headers=headers)

    def upload_file(
        self,
        pet_id: int,
        file: str | Path,
        *,
        additional_metadata: str | None = None,
    ) -> Any:
        path = Path(file)
        form = {"additionalMetadata": additional_metadata} if additional_metadata else None
        with path.open("rb") as handle:
            return self._request(
                "pet.upload_file",
                "POST",
                f"/pet/{_segment(pet_id)}/uploadImage",
                files={"file": (path.name, handle)},
                data=form,
                return_type="ApiResponse",
            )


class StoreApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get_inventory(self) -> dict[str, int]:
        return self._request("store.inventory", "GET", "/store/inventory", return_type="Hash<String, Integer>")

    def place_order(self, order: Order | Mapping[str, Any]) -> Order | None:
        return self._request("store.place_order", "POST", "/store/order", json_body=_to_body(order), return_type="Order")

    def get_order_by_id(self, order_id: int) -> Order | None:
        return self._request("store.get_order", "GET", f"/store/order/{_segment(order_id)}", return_type="Order")

    def delete_order(self, order_id: int) -> None:
        return self._request("store.delete_order", "DELETE", f"/store/order/{_segment(order_id)}")


class UserApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create_user(self, user: User | Mapping[str, Any]) -> None:
        return self._request("user.create", "POST", "/user", json_body=_to_body(user))

    def get_user_by_name(self, username: str) -> User | None:
        return self._request("user.get", "GET", f"/user/{_segment(username)}", return_type="User")

    def update_user(self, username: str, user: User | Mapping[str, Any]) -> None:
        return self._request("user.update", "PUT", f"/user/{_segment(username)}", json_body=_to_body(user))

    def delete_user(self, username: str) -> None:
        return self._request("user.delete", "DELETE", f"/user/{_segment(username)}")

    def login_user(self, username: str, password: str) -> str | None:
        return self._request(
            "user.login",
            "GET",
            "/user/login",
            query={"username": username, "password": password},
            return_type="String",
        )

    def logout_user(self) -> None:
        return self._request("user.logout", "GET", "/user/logout")
