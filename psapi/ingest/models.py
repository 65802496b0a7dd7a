"""Ingestion data models."""

from __future__ import annotations

from dataclasses import dataclass

CALL_KINDS = ("products", "merchants", "deals")


@dataclass(frozen=True, slots=True)
class Section:
    """Location of one list of raw entities inside a decoded API response."""

    kind: str
    path: tuple[str, ...]

    @property
    def label(self) -> str:
        return self.path[-1].replace("_", " ")


PRODUCTS_SECTION = Section("products", ("results", "products", "product"))

# Order matters: later sections overwrite earlier ones on id collision.
SECTIONS: tuple[Section, ...] = (
    Section("merchants", ("results", "merchants", "merchant")),
    Section("deals", ("results", "deals", "deal")),
    Section("merchants", ("resources", "merchants", "merchant")),
    Section("brands", ("resources", "brands", "brand")),
    Section("categories", ("resources", "categories", "matches", "category")),
    Section("categories", ("resources", "categories", "context", "category")),
    Section("deal_types", ("resources", "deal_types", "deal_type")),
    Section("countries", ("resources", "countries", "country")),
    Section("merchant_types", ("resources", "merchant_types", "merchant_type")),
)
