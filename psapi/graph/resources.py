"""Resource kinds and their relations.

Every resource wraps an :class:`AttributeBag` holding the scalar fields the API
returned, plus a reference to the :class:`~psapi.graph.store.GraphStore` that
owns it. Relations are never stored on the resource itself: they are derived
from foreign-key-like attribute values (``merchant``, ``category``,
``deal_type`` ...) by asking the store, then memoised per instance.

Relations are pure functions of a fully populated store, so they must not be
resolved while ingestion is still running; a result computed early stays cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar, Mapping

from psapi.errors import UnknownRelation, UnknownResourceKind
from psapi.graph.attributes import MISSING, AttributeBag, AttributeNotFound, is_scalar

if TYPE_CHECKING:
    from psapi.graph.store import GraphStore

IMAGE_ATTRIBUTES = ("image_url_small", "image_url_medium", "image_url_large")


def normalize_id(value: Any) -> str | None:
    """Return the string form used to key and compare ids, or ``None`` when absent."""
    if value is None or isinstance(value, AttributeNotFound):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def split_ids(value: Any) -> list[str]:
    normalized = normalize_id(value)
    if not normalized:
        return []
    return [part.strip() for part in normalized.split(",") if part.strip()]


def relation(name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func._relation_name = name  # type: ignore[attr-defined]
        return func

    return decorator


class Resource:
    kind: ClassVar[str] = ""
    singular: ClassVar[str] = ""
    is_dummy: ClassVar[bool] = False
    _relations: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        relations: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, member in vars(klass).items():
                name = getattr(member, "_relation_name", None)
                if name:
                    relations[name] = attr_name
        cls._relations = relations

    def __init__(self, store: GraphStore) -> None:
        self._store = store
        self._attributes = AttributeBag(self.kind)
        self._cache: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id_key!r}>"

    @property
    def id(self) -> Any:
        return self.attr("id")

    @property
    def id_key(self) -> str | None:
        return normalize_id(self.attr("id"))

    @property
    def name(self) -> Any:
        return self.attr("name")

    @property
    def attributes(self) -> dict[str, Any]:
        return self._attributes.as_dict()

    def attr(self, name: str, default: Any = MISSING) -> Any:
        return self._attributes.get(name, default)

    def set_attr(self, name: str, value: Any) -> None:
        self._attributes.set(name, value)

    def load(self, raw: Mapping[str, Any], *, skip: tuple[str, ...] = ()) -> list[str]:
        """Copy scalar fields from ``raw``; return the names of dropped non-scalar fields."""
        dropped: list[str] = []
        for name, value in raw.items():
            if name in skip:
                continue
            if is_scalar(value):
                self._attributes.set(name, value)
            else:
                dropped.append(name)
        return dropped

    @classmethod
    def relations(cls) -> list[str]:
        return list(cls._relations)

    def resource(self, name: str) -> Any:
        try:
            return self._cache[name]
        except KeyError:
            pass
        method_name = self._relations.get(name)
        if method_name is None:
            raise UnknownRelation(self.kind, name)
        result = getattr(self, method_name)()
        self._cache[name] = result
        return result

    def _lookup(self, kind: str, attribute: str) -> Resource | DummyResource:
        value = self.attr(attribute)
        if isinstance(value, AttributeNotFound):
            return DummyResource(f"{self.singular} {self.id_key} has no {attribute} reference")
        return self._store.by_id(kind, value)

    def _scan(self, kind: str, attribute: str) -> list[Resource]:
        own_id = self.id_key
        if own_id is None:
            return []
        return [
            candidate
            for candidate in self._store.collection(kind)
            if normalize_id(candidate.attr(attribute)) == own_id
        ]


class Product(Resource):
    kind = "products"
    singular = "product"

    def __init__(self, store: GraphStore) -> None:
        super().__init__(store)
        self._offers: list[Offer] = []

    def add_offer(self, offer: Offer) -> None:
        # offers arrive nested inside products, so the link is set at ingestion time
        self._offers.append(offer)

    @relation("offers")
    def _resolve_offers(self) -> list[Offer]:
        return self._offers

    @relation("category")
    def _resolve_category(self) -> Resource | DummyResource:
        return self._lookup("categories", "category")

    @relation("brand")
    def _resolve_brand(self) -> Resource | DummyResource:
        return self._lookup("brands", "brand")

    def smallest_image_url(self) -> str | None:
        for name in IMAGE_ATTRIBUTES:
            value = self.attr(name, None)
            if value:
                return str(value)
        return None

    def largest_image_url(self) -> str | None:
        for name in reversed(IMAGE_ATTRIBUTES):
            value = self.attr(name, None)
            if value:
                return str(value)
        return None


class Offer(Resource):
    kind = "offers"
    singular = "offer"

    def __init__(self, store: GraphStore) -> None:
        super().__init__(store)
        self._product: Product | None = None

    def set_product(self, product: Product) -> None:
        self._product = product

    @relation("product")
    def _resolve_product(self) -> Product | DummyResource:
        if self._product is None:
            return DummyResource(f"offer {self.id_key} was not nested in a product")
        return self._product

    @relation("merchant")
    def _resolve_merchant(self) -> Resource | DummyResource:
        return self._lookup("merchants", "merchant")


class Merchant(Resource):
    kind = "merchants"
    singular = "merchant"

    @relation("offers")
    def _resolve_offers(self) -> list[Resource]:
        return self._scan("offers", "merchant")

    @relation("deals")
    def _resolve_deals(self) -> list[Resource]:
        return self._scan("deals", "merchant")

    @relation("country")
    def _resolve_country(self) -> Resource | DummyResource:
        return self._lookup("countries", "country")

    @relation("merchant_type")
    def _resolve_merchant_type(self) -> Resource | DummyResource:
        return self._lookup("merchant_types", "merchant_type")

    @relation("category")
    def _resolve_category(self) -> Resource | DummyResource:
        return self._lookup("categories", "category")


class Deal(Resource):
    kind = "deals"
    singular = "deal"

    @relation("merchant")
    def _resolve_merchant(self) -> Resource | DummyResource:
        return self._lookup("merchants", "merchant")

    @relation("deal_types")
    def _resolve_deal_types(self) -> list[Resource | DummyResource]:
        return [self._store.by_id("deal_types", type_id) for type_id in split_ids(self.attr("deal_type"))]


class Category(Resource):
    kind = "categories"
    singular = "category"

    @relation("products")
    def _resolve_products(self) -> list[Resource]:
        return self._scan("products", "category")


class Brand(Resource):
    kind = "brands"
    singular = "brand"

    @relation("products")
    def _resolve_products(self) -> list[Resource]:
        return self._scan("products", "brand")


class DealType(Resource):
    kind = "deal_types"
    singular = "deal_type"

    @relation("deals")
    def _resolve_deals(self) -> list[Resource]:
        own_id = self.id_key
        if own_id is None:
            return []
        return [deal for deal in self._store.collection("deals") if own_id in split_ids(deal.attr("deal_type"))]


class Country(Resource):
    kind = "countries"
    singular = "country"

    @relation("merchants")
    def _resolve_merchants(self) -> list[Resource]:
        return self._scan("merchants", "country")


class MerchantType(Resource):
    kind = "merchant_types"
    singular = "merchant_type"

    @relation("merchants")
    def _resolve_merchants(self) -> list[Resource]:
        return self._scan("merchants", "merchant_type")


class DummyResource:
    """Placeholder returned for a reference the store cannot satisfy.

    Attribute lookups return a bracketed diagnostic naming what was missing, and
    relations return further placeholders, so a chain such as
    ``offer.resource("merchant").resource("country").attr("name")`` never raises.
    """

    is_dummy = True
    kind = "dummy"

    def __init__(self, message: str) -> None:
        self.message = message

    @classmethod
    def missing(cls, kind: str, resource_id: Any) -> DummyResource:
        return cls(f"no {kind} with id {resource_id}")

    def __repr__(self) -> str:
        return f"<DummyResource {self.message!r}>"

    def __str__(self) -> str:
        return f"[PopShops API: {self.message}]"

    @property
    def id(self) -> str:
        return str(self)

    @property
    def id_key(self) -> None:
        return None

    @property
    def name(self) -> str:
        return self.attr("name")

    @property
    def attributes(self) -> dict[str, Any]:
        return {}

    def attr(self, name: str, default: Any = MISSING) -> Any:
        if default is not MISSING:
            return default
        return f"[PopShops API: {self.message}; attribute {name!r} unavailable]"

    @classmethod
    def relations(cls) -> list[str]:
        return []

    def resource(self, name: str) -> DummyResource:
        return DummyResource(f"{name} of missing parent object ({self.message})")


RESOURCE_TYPES: dict[str, type[Resource]] = {
    cls.kind: cls
    for cls in (Product, Offer, Merchant, Deal, Category, Brand, DealType, Country, MerchantType)
}
_SINGULAR_KINDS = {cls.singular: kind for kind, cls in RESOURCE_TYPES.items()}


def canonical_kind(kind: str) -> str:
    """Map a plural or singular kind name onto its plural collection name."""
    if kind in RESOURCE_TYPES:
        return kind
    try:
        return _SINGULAR_KINDS[kind]
    except KeyError:
        raise UnknownResourceKind(kind) from None
