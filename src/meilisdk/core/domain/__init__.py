"""Domain models and entities.

Why:
- Strict, typed structures for what the server returns (Pydantic v2).
- `Index` is the only entity that can act: it is bound to the shared
  dispatcher after deserialization.
"""

from meilisdk.core.domain.deserializer import parse_entities, parse_entity
from meilisdk.core.domain.models import Dump, DumpStatus, Index, UpdateStatus

__all__ = [
    "Dump",
    "DumpStatus",
    "Index",
    "UpdateStatus",
    "parse_entities",
    "parse_entity",
]
