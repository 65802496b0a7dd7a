"""Print the category -> product -> offer -> merchant tree for a keyword search."""

from __future__ import annotations

import sys

from dotenv import load_dotenv

from psapi import PsApiCall
from psapi.logs import enable_logging
from psapi.settings import load_settings


def main() -> None:
    load_dotenv()
    settings = load_settings()
    if settings.logging:
        enable_logging()
    keyword = sys.argv[1] if len(sys.argv) > 1 else "wallet"
    api = PsApiCall.from_settings(settings)
    result = api.get("products", {"keyword": keyword})
    if not result:
        raise SystemExit(f"Call failed: {result.error}")
    for category in api.resource("categories"):
        print(f"=CATEGORY: {category.name} -- {category.id}")
        for product in category.resource("products"):
            print(f"==PRODUCT: {product.name}")
            for offer in product.resource("offers"):
                print(f"===OFFER: {offer.name}")
                print(f"====MERCHANT: {offer.resource('merchant').name}")
    print("Next page:", api.next_page())


if __name__ == "__main__":
    main()
