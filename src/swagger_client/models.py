"""Generated Petstore models."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .registry import ModelRegistry

PetStatus = Literal["available", "pending", "sold"]
OrderStatus = Literal["placed", "approved", "delivered"]


class SwaggerModel(BaseModel):
    """Base for generated models.

    Fields are declared in snake_case and read from the camelCase keys used on
    the wire. Unknown keys are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @classmethod
    def build_from_hash(cls, data: Mapping[str, Any]) -> Any:
        return cls.model_validate(dict(data))

    def to_hash(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Category(SwaggerModel):
    id: int | None = None
    name: str | None = None


class Tag(SwaggerModel):
    id: int | None = None
    name: str | None = None


class Pet(SwaggerModel):
    id: int | None = None
    category: Category | None = None
    name: str
    photo_urls: list[str] = Field(default_factory=list)
    tags: list[Tag] | None = None
    status: PetStatus | None = None


class Order(SwaggerModel):
    id: int | None = None
    pet_id: int | None = None
    quantity: int | None = None
    ship_date: datetime | None = None
    status: OrderStatus | None = None
    complete: bool = False


class User(SwaggerModel):
    id: int | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    user_status: int | None = None


class ApiResponse(SwaggerModel):
    code: int | None = None
    type: str | None = None
    message: str | None = None


GENERATED_MODELS: tuple[type[SwaggerModel], ...] = (ApiResponse, Category, Order, Pet, Tag, User)


def build_default_registry() -> ModelRegistry:
    return ModelRegistry(GENERATED_MODELS).freeze()
