"""Per-call container owning every resource collection."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from psapi.graph.resources import RESOURCE_TYPES, DummyResource, Resource, canonical_kind, normalize_id

logger = logging.getLogger(__name__)


class GraphStore:
    """One insertion-ordered ``id -> resource`` mapping per kind.

    Resources consult the store for every cross-reference; a miss yields a
    :class:`DummyResource` rather than an exception. Ids are keyed by their
    string form, and a later resource with the same id replaces the earlier one.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Resource]] = {kind: {} for kind in RESOURCE_TYPES}

    def new(self, kind: str) -> Resource:
        return RESOURCE_TYPES[canonical_kind(kind)](self)

    def add(self, resource: Resource) -> str:
        key = resource.id_key
        if key is None:
            logger.warning("Internalizing %s without an id", resource.singular)
            key = ""
        self._collections[resource.kind][key] = resource
        return key

    def internalize(self, kind: str, raw: Mapping[str, Any]) -> str:
        resource = self.new(kind)
        dropped = resource.load(raw)
        if dropped:
            logger.debug("Dropped non-scalar attributes %s from %s %s", dropped, resource.singular, resource.id_key)
        return self.add(resource)

    def collection(self, kind: str) -> list[Resource]:
        return list(self._collections[canonical_kind(kind)].values())

    def get(self, kind: str, resource_id: Any) -> Resource | None:
        key = normalize_id(resource_id)
        if key is None:
            return None
        return self._collections[canonical_kind(kind)].get(key)

    def by_id(self, kind: str, resource_id: Any) -> Resource | DummyResource:
        kind = canonical_kind(kind)
        resource = self.get(kind, resource_id)
        if resource is None:
            return DummyResource.missing(kind, resource_id)
        return resource

    def counts(self) -> dict[str, int]:
        return {kind: len(items) for kind, items in self._collections.items()}

    def __len__(self) -> int:
        return sum(len(items) for items in self._collections.values())
