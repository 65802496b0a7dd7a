"""HTML rendering of a call's resource graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from psapi.call import PsApiCall
from psapi.graph.resources import Resource

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent
ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",)),
)


class RenderError(RuntimeError):
    pass


def catalog_context(call: PsApiCall) -> dict[str, Any]:
    """Categories, with their products, offers and each offer's merchant."""
    categories = []
    for category in call.resource("categories"):
        products = [_product_entry(product) for product in category.resource("products")]
        categories.append({"id": category.id_key, "name": category.name, "products": products})
    categorized = {entry["id"] for category in categories for entry in category["products"]}
    uncategorized = [
        _product_entry(product) for product in call.resource("products") if product.id_key not in categorized
    ]
    return {
        "categories": categories,
        "uncategorized": uncategorized,
        "deals": [_deal_entry(deal) for deal in call.resource("deals")],
        "next_page": call.next_page(),
        "prev_page": call.prev_page(),
    }


def _product_entry(product: Resource) -> dict[str, Any]:
    return {
        "id": product.id_key,
        "name": product.name,
        "image_url": product.smallest_image_url() if hasattr(product, "smallest_image_url") else None,
        "offers": [
            {
                "name": offer.name,
                "price": offer.attr("current_price", None),
                "url": offer.attr("url", None),
                "merchant": offer.resource("merchant").name,
            }
            for offer in product.resource("offers")
        ],
    }


def _deal_entry(deal: Resource) -> dict[str, Any]:
    return {
        "name": deal.name,
        "merchant": deal.resource("merchant").name,
        "deal_types": [deal_type.name for deal_type in deal.resource("deal_types")],
    }


def render_catalog(call: PsApiCall, *, title: str = "PopShops catalog") -> str:
    if not call.called:
        raise RenderError("The API has not been called yet; nothing to render")
    template = ENV.get_template("catalog.html")
    context = catalog_context(call)
    logger.info("Rendering %s categories and %s deals", len(context["categories"]), len(context["deals"]))
    return template.render(title=title, **context)
