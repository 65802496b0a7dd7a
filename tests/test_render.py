import pytest

from psapi import PsApiCall
from psapi.render import RenderError, catalog_context, render_catalog


@pytest.fixture()
def call(settings, make_client, products_document):
    call = PsApiCall("acct", "cat", client=make_client(products_document), settings=settings)
    call.get("products", {"keyword": "wallet"})
    return call


def test_catalog_context_groups_products_by_category(call):
    context = catalog_context(call)
    assert [category["name"] for category in context["categories"]] == ["Wallets & Money Clips", "Accessories"]
    wallets = context["categories"][0]
    assert [product["name"] for product in wallets["products"]] == ["Leather Bifold Wallet", "Travel Wallet"]
    offers = wallets["products"][0]["offers"]
    assert [offer["merchant"] for offer in offers] == ["Acme Leather", "Wallet Barn"]
    assert context["uncategorized"] == []
    assert context["deals"][0]["deal_types"] == ["Percent Off", "Sale", "Free Shipping"]


def test_uncategorized_products_are_listed(settings, make_client):
    document = {"status": 200, "results": {"products": {"product": [{"id": 1, "name": "Loose", "category": 42}]}}}
    call = PsApiCall("acct", "cat", client=make_client(document), settings=settings)
    call.get("products")
    context = catalog_context(call)
    assert context["categories"] == []
    assert [product["name"] for product in context["uncategorized"]] == ["Loose"]


def test_render_catalog_html(call):
    html = render_catalog(call, title="Wallet search")
    assert "<title>Wallet search</title>" in html
    assert "http://images.example.com/1001-s.jpg" in html
    assert "Percent Off, Sale, Free Shipping" in html


def test_render_requires_a_completed_call(settings):
    call = PsApiCall("acct", "cat", settings=settings)
    with pytest.raises(RenderError):
        render_catalog(call)
