"""JSON text -> typed entities.

Any malformed payload becomes `MeiliSearchParseError`; nothing is defaulted.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from meilisdk.core.errors import MeiliSearchParseError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def parse_entity(raw: str, target: type[T] | Any) -> T:
    """Validate `raw` JSON against `target` (a model class or a typing form)."""

    try:
        return _adapter(target).validate_json(raw)
    except ValidationError as exc:
        name = getattr(target, "__name__", str(target))
        raise MeiliSearchParseError(f"Could not parse {name} from response: {exc}") from exc


def parse_entities(raw: str, model: type[T]) -> list[T]:
    """Validate a JSON array of `model` objects."""

    return parse_entity(raw, list[model])  # type: ignore[valid-type]
