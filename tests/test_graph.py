import pytest

from psapi.errors import UnknownRelation, UnknownResourceKind
from psapi.graph import AttributeBag, AttributeNotFound, DummyResource, GraphStore, Merchant, Product


def test_attribute_bag_overwrites_and_keeps_types():
    bag = AttributeBag("products")
    bag.set("price", 10)
    bag.set("price", 12.5)
    bag.set("name", "Widget")
    assert bag.get("price") == 12.5
    assert bag.get("name") == "Widget"
    assert "price" in bag
    assert bag.names() == ["price", "name"]


def test_missing_attribute_is_an_explicit_result():
    bag = AttributeBag("merchants")
    missing = bag.get("url")
    assert isinstance(missing, AttributeNotFound)
    assert not missing
    assert "url" in str(missing)
    assert "merchants" in str(missing)
    assert bag.get("url", None) is None


def test_duplicate_ids_keep_the_later_record():
    store = GraphStore()
    store.internalize("brands", {"id": 7, "name": "First", "slogan": "old"})
    store.internalize("brands", {"id": "7", "name": "Second"})
    brands = store.collection("brands")
    assert len(brands) == 1
    assert brands[0].attr("name") == "Second"
    assert isinstance(brands[0].attr("slogan"), AttributeNotFound)


def test_relations_are_memoized(store):
    merchant = store.by_id("merchants", 5)
    offers = merchant.resource("offers")
    store.internalize("offers", {"id": 5999, "merchant": 5})
    again = merchant.resource("offers")
    assert again is offers
    assert [offer.id_key for offer in again] == ["5001", "5003"]
    assert merchant.resource("country") is merchant.resource("country")


def test_unknown_id_returns_placeholder(store):
    missing = store.by_id("merchants", 999)
    assert isinstance(missing, DummyResource)
    assert missing.is_dummy
    name = missing.attr("name")
    assert "999" in name
    assert "merchants" in name


def test_placeholder_relations_chain(store):
    missing = store.by_id("merchant", 999)
    nested = missing.resource("country").resource("merchants")
    assert nested.is_dummy
    assert "999" in nested.attr("name")
    assert "country" in nested.attr("name")
    assert missing.attr("name", "fallback") == "fallback"


def test_deal_types_follow_comma_list_order(store):
    deal = store.by_id("deals", 9001)
    deal_types = deal.resource("deal_types")
    assert [deal_type.id_key for deal_type in deal_types] == ["3", "7", "2"]
    assert [deal_type.name for deal_type in deal_types] == ["Percent Off", "Sale", "Free Shipping"]


def test_deal_types_with_unknown_id_yield_placeholder():
    store = GraphStore()
    store.internalize("deal_types", {"id": 3, "name": "Percent Off"})
    store.internalize("deals", {"id": 1, "deal_type": "3, 8"})
    first, second = store.by_id("deals", 1).resource("deal_types")
    assert first.name == "Percent Off"
    assert second.is_dummy


def test_unknown_relation_raises(store):
    with pytest.raises(UnknownRelation):
        store.by_id("products", 1001).resource("merchants")


def test_unknown_kind_raises():
    store = GraphStore()
    with pytest.raises(UnknownResourceKind):
        store.collection("widgets")
    with pytest.raises(UnknownResourceKind):
        store.by_id("widgets", 1)


def test_singular_and_plural_kinds_are_equivalent(store):
    assert store.by_id("category", 10) is store.by_id("categories", "10")


def test_integral_float_ids_match_integer_ids():
    store = GraphStore()
    store.internalize("countries", {"id": 1, "name": "United States"})
    store.internalize("merchants", {"id": 5, "country": 1.0})
    assert store.by_id("merchants", 5).resource("country").name == "United States"


def test_missing_reference_attribute_yields_placeholder(store):
    merchant = store.by_id("merchants", 6)
    category = merchant.resource("category")
    assert category.is_dummy
    assert "category" in category.attr("name")


def test_relation_names_per_kind():
    assert set(Merchant.relations()) == {"offers", "deals", "country", "merchant_type", "category"}
    assert set(Product.relations()) == {"offers", "category", "brand"}


def test_product_image_urls(store):
    product = store.by_id("products", 1001)
    assert product.smallest_image_url() == "http://images.example.com/1001-s.jpg"
    assert product.largest_image_url() == "http://images.example.com/1001-l.jpg"
    assert store.by_id("products", 1003).smallest_image_url() is None
