"""Model registry consulted when a descriptor names a model."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from .errors import ModelValidationError, UnknownModelTypeError
from .protocols import HydratableModel

ModelT = TypeVar("ModelT", bound=type)

_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


def _sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = _sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [_sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


class ModelRegistry:
    """Maps model names to model types.

    The registry is filled once at startup (usually by
    :func:`swagger_client.models.build_default_registry`) and frozen before it
    is handed to responses, so lookups never race with registration.
    """

    def __init__(self, models: Iterable[type] | Mapping[str, type] | None = None) -> None:
        self._models: dict[str, type] = {}
        self._frozen = False
        if isinstance(models, Mapping):
            for name, model in models.items():
                self.register(model, name=name)
        elif models is not None:
            for model in models:
                self.register(model)

    def register(self, model: ModelT | None = None, *, name: str | None = None) -> Any:
        if model is None:
            def decorator(cls: ModelT) -> ModelT:
                self.register(cls, name=name)
                return cls

            return decorator

        if self._frozen:
            raise RuntimeError("cannot register models on a frozen registry")

        key = name or model.__name__
        if key in self._models:
            raise ValueError(f"model {key!r} is already registered")
        self._models[key] = model
        return model

    def freeze(self) -> ModelRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> type:
        model = self._models.get(name)
        if model is None:
            raise UnknownModelTypeError(name)
        return model

    def names(self) -> list[str]:
        return sorted(self._models)

    def hydrate(self, name: str, data: Mapping[str, Any]) -> Any:
        model = self.get(name)
        build: Callable[[Any], Any] | None
        if isinstance(model, HydratableModel):
            build = model.build_from_hash
        else:
            build = getattr(model, "model_validate", None)

        if build is None:
            instance = model()
            for key, value in data.items():
                setattr(instance, key, value)
            return instance

        try:
            return build(data)
        except ValidationError as error:
            raise ModelValidationError(
                model_name=name,
                errors=error.errors(),
                raw_sample=_sample_payload(data),
            ) from error

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __len__(self) -> int:
        return len(self._models)
