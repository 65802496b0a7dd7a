import copy
import json
from pathlib import Path

import httpx
import pytest

from psapi.graph.store import GraphStore
from psapi.ingest.pipeline import ingest_document
from psapi.ingest.popshops import PopShopsClient
from psapi.settings import Settings

FIXTURES = Path(__file__).parent / "fixtures" / "http"

SCENARIO_A = {
    "status": 200,
    "results": {
        "products": {
            "product": [
                {"id": 1, "name": "Widget", "category": 10, "offers": {"offer": [{"id": 100, "merchant": 5}]}},
            ]
        }
    },
    "resources": {
        "merchants": {"merchant": [{"id": 5, "name": "Acme"}]},
        "categories": {"matches": {"category": [{"id": 10, "name": "Tools"}]}},
    },
}


def load_fixture(path: str) -> dict:
    return json.loads((FIXTURES / path).read_text())


@pytest.fixture()
def products_document() -> dict:
    return load_fixture("popshops/products.json")


@pytest.fixture()
def store(products_document) -> GraphStore:
    return ingest_document(products_document, "products")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        base_url="http://api.popshops.com/v3",
        timeout=5.0,
        user_agent="psapi-tests",
        url_mode_prefix="psapi_",
        account="acct",
        catalog="cat",
    )


@pytest.fixture()
def sent_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_client(settings, sent_requests):
    def factory(payload, status_code: int = 200) -> PopShopsClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if isinstance(payload, (dict, list)):
                return httpx.Response(status_code, json=payload)
            return httpx.Response(status_code, text=payload)

        session = httpx.Client(transport=httpx.MockTransport(handler))
        return PopShopsClient(settings=settings, session=session)

    return factory


@pytest.fixture()
def scenario_a_document() -> dict:
    return copy.deepcopy(SCENARIO_A)


@pytest.fixture()
def error_document() -> dict:
    return load_fixture("popshops/error.json")
