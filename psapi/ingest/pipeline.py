"""Turn one decoded PopShops response into graph store contents."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, cast

from psapi.graph.resources import Offer, Product
from psapi.graph.store import GraphStore
from psapi.ingest.models import PRODUCTS_SECTION, SECTIONS

logger = logging.getLogger(__name__)


def ingest_document(
    document: Mapping[str, Any],
    call_kind: str,
    store: GraphStore | None = None,
    *,
    log: logging.Logger | None = None,
) -> GraphStore:
    """Internalize every known section of ``document`` into ``store``.

    Every section is optional. Nothing is validated: a raw entity without an
    ``id`` is still stored, and entities stored before a failure stay stored.
    """
    store = store if store is not None else GraphStore()
    log = log or logger
    log.info("Processing JSON from %s call...", call_kind)
    for raw in section_items(document, PRODUCTS_SECTION.path):
        log.info("Internalizing product with ID=%s", raw.get("id"))
        _internalize_product(store, raw, log)
    for section in SECTIONS:
        for raw in section_items(document, section.path):
            log.info("Internalizing %s with ID=%s", section.label, raw.get("id"))
            store.internalize(section.kind, raw)
    log.info("JSON processing completed.")
    return store


def section_items(document: Mapping[str, Any], path: Iterable[str]) -> list[Mapping[str, Any]]:
    node: Any = document
    for key in path:
        if not isinstance(node, Mapping):
            return []
        node = node.get(key)
        if node is None:
            return []
    # a section holding a single entity may arrive as an object rather than a list
    if isinstance(node, Mapping):
        return [node]
    if isinstance(node, list):
        return [item for item in node if isinstance(item, Mapping)]
    return []


def _internalize_product(store: GraphStore, raw: Mapping[str, Any], log: logging.Logger) -> Product:
    product = Product(store)
    for raw_offer in section_items(raw, ("offers", "offer")):
        log.info("Internalizing offer with ID=%s", raw_offer.get("id"))
        key = store.internalize("offers", raw_offer)
        offer = cast(Offer, store.get("offers", key))
        offer.set_product(product)
        product.add_offer(offer)
    dropped = product.load(raw, skip=("offers",))
    if dropped:
        log.debug("Dropped non-scalar attributes %s from product %s", dropped, product.id_key)
    store.add(product)
    return product
