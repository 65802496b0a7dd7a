"""In-memory resource graph."""

from psapi.graph.attributes import AttributeBag, AttributeNotFound
from psapi.graph.resources import (
    RESOURCE_TYPES,
    Brand,
    Category,
    Country,
    Deal,
    DealType,
    DummyResource,
    Merchant,
    MerchantType,
    Offer,
    Product,
    Resource,
    canonical_kind,
)
from psapi.graph.store import GraphStore

__all__ = [
    "RESOURCE_TYPES",
    "AttributeBag",
    "AttributeNotFound",
    "Brand",
    "Category",
    "Country",
    "Deal",
    "DealType",
    "DummyResource",
    "GraphStore",
    "Merchant",
    "MerchantType",
    "Offer",
    "Product",
    "Resource",
    "canonical_kind",
]
